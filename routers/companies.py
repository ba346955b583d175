from typing import Annotated

from fastapi import APIRouter, Query, status

from crud import companies as company_crud
from schemas.company import (
    CompanyCreateRequest,
    CompanyUpdateRequest,
    ListCompaniesQuery,
    CompanyResponse,
    CompanyDetailResponse,
    ListCompaniesResponse,
    CompanyDeleteResponse)
from utils.auth import AdminUser
from utils.database import DBConn

router = APIRouter(
    prefix="/companies",
    tags=["COMPANIES"],
)


@router.post("", response_model=CompanyResponse,
             status_code=status.HTTP_201_CREATED)
async def create_company(_: AdminUser, company: CompanyCreateRequest, conn: DBConn) -> CompanyResponse:
    """회사 생성 (관리자)"""
    new_company = await company_crud.create(conn, company.model_dump())
    return CompanyResponse.model_validate({"company": new_company})


@router.get("", response_model=ListCompaniesResponse)
async def get_companies(conn: DBConn, query: Annotated[ListCompaniesQuery, Query()]) -> ListCompaniesResponse:
    """
    회사 목록 조회
    - name: 이름 부분 일치 (대소문자 무시)
    - minEmployees / maxEmployees: 직원 수 범위
    """
    companies = await company_crud.find_all(
        conn,
        name=query.name,
        min_employees=query.min_employees,
        max_employees=query.max_employees,
    )
    return ListCompaniesResponse.model_validate({"companies": companies})


@router.get("/{handle}", response_model=CompanyDetailResponse)
async def get_company(handle: str, conn: DBConn) -> CompanyDetailResponse:
    """회사 상세 조회 (채용공고 포함)"""
    company = await company_crud.get(conn, handle)
    return CompanyDetailResponse.model_validate({"company": company})


@router.patch("/{handle}", response_model=CompanyResponse)
async def update_company(
        _: AdminUser, handle: str, update_data: CompanyUpdateRequest, conn: DBConn) -> CompanyResponse:
    """회사 수정 (관리자, 보낸 필드만 수정)"""
    update_fields = update_data.model_dump(exclude_unset=True, by_alias=True)
    company = await company_crud.update(conn, handle, update_fields)
    return CompanyResponse.model_validate({"company": company})


@router.delete("/{handle}", response_model=CompanyDeleteResponse)
async def delete_company(_: AdminUser, handle: str, conn: DBConn) -> CompanyDeleteResponse:
    """회사 삭제 (관리자)"""
    await company_crud.remove(conn, handle)
    return CompanyDeleteResponse(deleted=handle)
