from decimal import Decimal
from typing import Annotated

from pydantic import Field, model_validator

from schemas.commons import CamelModel, CamelRequest, CompanyHandle, JobId, Name, Count, SearchText, reject_explicit_nulls

Equity = Annotated[Decimal, Field(ge=0, le=1, description="지분율 (0 ~ 1)")]


class CompanyJobItem(CamelModel):
    """회사 상세 조회에 포함되는 채용공고"""
    id: JobId
    title: str
    salary: int | None = None
    equity: Decimal | None = None


class Job(CompanyJobItem):
    company_handle: str


class JobCreateRequest(CamelRequest):
    title: Name
    salary: Count | None = None
    equity: Equity | None = None
    company_handle: CompanyHandle


class JobUpdateRequest(CamelRequest):
    """id, companyHandle은 수정 불가"""
    title: Name | None = None
    salary: Count | None = None
    equity: Equity | None = None

    @model_validator(mode='after')
    def check_not_null_fields(self):
        reject_explicit_nulls(self, ("title",))
        return self


class ListJobsQuery(CamelRequest):
    title: Annotated[SearchText | None, Field(description="공고 제목에 포함된 검색어 (대소문자 무시)")] = None
    min_salary: Count | None = None
    has_equity: bool | None = None


class JobResponse(CamelModel):
    job: Job


class ListJobsResponse(CamelModel):
    jobs: list[Job]


class JobDeleteResponse(CamelModel):
    deleted: JobId
