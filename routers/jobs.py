from typing import Annotated

from fastapi import APIRouter, Query, status

from crud import jobs as job_crud
from schemas.commons import JobIdPath
from schemas.job import (
    JobCreateRequest,
    JobUpdateRequest,
    ListJobsQuery,
    JobResponse,
    ListJobsResponse,
    JobDeleteResponse)
from utils.auth import AdminUser
from utils.database import DBConn

router = APIRouter(
    prefix="/jobs",
    tags=["JOBS"],
)


@router.post("", response_model=JobResponse,
             status_code=status.HTTP_201_CREATED)
async def create_job(_: AdminUser, job: JobCreateRequest, conn: DBConn) -> JobResponse:
    """채용공고 생성 (관리자)"""
    new_job = await job_crud.create(conn, job.model_dump())
    return JobResponse.model_validate({"job": new_job})


@router.get("", response_model=ListJobsResponse)
async def get_jobs(conn: DBConn, query: Annotated[ListJobsQuery, Query()]) -> ListJobsResponse:
    """
    채용공고 목록 조회
    - title: 제목 부분 일치 (대소문자 무시)
    - minSalary: 최소 연봉
    - hasEquity: true면 지분 있는 공고만
    """
    jobs = await job_crud.find_all(
        conn,
        title=query.title,
        min_salary=query.min_salary,
        has_equity=query.has_equity,
    )
    return ListJobsResponse.model_validate({"jobs": jobs})


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: JobIdPath, conn: DBConn) -> JobResponse:
    """채용공고 상세 조회"""
    job = await job_crud.get(conn, job_id)
    return JobResponse.model_validate({"job": job})


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(_: AdminUser, job_id: JobIdPath, update_data: JobUpdateRequest, conn: DBConn) -> JobResponse:
    """채용공고 수정 (관리자, 보낸 필드만 수정)"""
    update_fields = update_data.model_dump(exclude_unset=True, by_alias=True)
    job = await job_crud.update(conn, job_id, update_fields)
    return JobResponse.model_validate({"job": job})


@router.delete("/{job_id}", response_model=JobDeleteResponse)
async def delete_job(_: AdminUser, job_id: JobIdPath, conn: DBConn) -> JobDeleteResponse:
    """채용공고 삭제 (관리자)"""
    await job_crud.remove(conn, job_id)
    return JobDeleteResponse(deleted=job_id)
