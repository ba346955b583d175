from typing import Annotated

from pydantic import Field, model_validator

from schemas.commons import CamelModel, CamelRequest, CompanyHandle, Name, Count, SearchText, reject_explicit_nulls
from schemas.job import CompanyJobItem

Description = Annotated[str, Field(min_length=1, max_length=5000)]
LogoUrl = Annotated[str, Field(pattern=r"^https?://", max_length=2000)]


class Company(CamelModel):
    handle: str
    name: str
    description: str
    num_employees: int | None = None
    logo_url: str | None = None


class CompanyDetail(Company):
    jobs: list[CompanyJobItem] = []


class CompanyCreateRequest(CamelRequest):
    handle: CompanyHandle
    name: Name
    description: Description
    num_employees: Count | None = None
    logo_url: LogoUrl | None = None


class CompanyUpdateRequest(CamelRequest):
    """handle은 수정 불가"""
    name: Name | None = None
    description: Description | None = None
    num_employees: Count | None = None
    logo_url: LogoUrl | None = None

    @model_validator(mode='after')
    def check_not_null_fields(self):
        reject_explicit_nulls(self, ("name", "description"))
        return self


class ListCompaniesQuery(CamelRequest):
    name: Annotated[SearchText | None, Field(description="회사 이름에 포함된 검색어 (대소문자 무시)")] = None
    min_employees: Count | None = None
    max_employees: Count | None = None

    @model_validator(mode='after')
    def check_employee_range(self):
        if (
            self.min_employees is not None
            and self.max_employees is not None
            and self.min_employees > self.max_employees
        ):
            raise ValueError("minEmployees cannot be greater than maxEmployees")
        return self


class CompanyResponse(CamelModel):
    company: Company


class CompanyDetailResponse(CamelModel):
    company: CompanyDetail


class ListCompaniesResponse(CamelModel):
    companies: list[Company]


class CompanyDeleteResponse(CamelModel):
    deleted: str
