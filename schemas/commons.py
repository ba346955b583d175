from typing import Annotated

from fastapi import Path
from pydantic import Field, BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

CompanyHandle = Annotated[
    str,
    Field(
        pattern=r"^[a-z0-9-]+$",
        min_length=1,
        max_length=25,
        description="회사 handle",
        examples=["anderson-arias-morrow"],
    ),
]

# jobs.id는 SERIAL (int4)
MAX_INT4 = 2**31 - 1

JobId = Annotated[
    int,
    Field(ge=1, le=MAX_INT4, description="채용공고 ID", examples=[1]),
]

JobIdPath = Annotated[
    int,
    Path(ge=1, le=MAX_INT4, description="채용공고 ID"),
]

Name = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=255),
]

SearchText = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]

Count = Annotated[int, Field(ge=0)]


class CamelModel(BaseModel):
    """API 필드는 camelCase, 내부/DB 필드는 snake_case"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class CamelRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')


def reject_explicit_nulls(model: BaseModel, fields: tuple[str, ...]) -> None:
    """
    PATCH 요청에서 NOT NULL 컬럼에 명시적 null을 보낸 경우 거부
    미전송 필드는 model_fields_set에 없으므로 통과
    """
    for field in fields:
        if field in model.model_fields_set and getattr(model, field) is None:
            raise ValueError(f"{to_camel(field)} cannot be null")
