"""
채용공고(jobs) 데이터 접근 함수
"""
import logging
from typing import Any

import asyncpg

from utils.errors import BadRequestError, NotFoundError
from utils.query import build_set_clause, escape_like

logger = logging.getLogger(__name__)

JOB_COLUMNS = "id, title, salary, equity, company_handle"


async def create(conn: asyncpg.Connection, data: dict[str, Any]) -> dict:
    """
    채용공고 생성

    data: {title, salary, equity, company_handle}
    존재하지 않는 회사면 BadRequestError
    """
    try:
        row = await conn.fetchrow(
            f"""
            INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {JOB_COLUMNS}
            """,
            data["title"],
            data.get("salary"),
            data.get("equity"),
            data["company_handle"],
        )
    except asyncpg.ForeignKeyViolationError:
        raise BadRequestError(f"No company: {data['company_handle']}")

    logger.info("Job created: %s (%s)", row["id"], row["company_handle"])
    return dict(row)


async def find_all(
        conn: asyncpg.Connection,
        title: str | None = None,
        min_salary: int | None = None,
        has_equity: bool | None = None,
) -> list[dict]:
    """
    채용공고 목록 조회 (id순)
    - title: 대소문자 무시 부분 일치
    - min_salary: 최소 연봉 (경계 포함)
    - has_equity: True면 지분이 0보다 큰 공고만
    """
    conditions = []
    params: list[Any] = []

    if title is not None:
        params.append(f"%{escape_like(title)}%")
        conditions.append(f"title ILIKE ${len(params)}")
    if min_salary is not None:
        params.append(min_salary)
        conditions.append(f"salary >= ${len(params)}")
    if has_equity:
        conditions.append("equity > 0")

    query = f"SELECT {JOB_COLUMNS} FROM jobs"
    if conditions:
        query += " WHERE " + " AND ".join(conditions)
    query += " ORDER BY id"

    rows = await conn.fetch(query, *params)
    return [dict(row) for row in rows]


async def get(conn: asyncpg.Connection, job_id: int) -> dict:
    row = await conn.fetchrow(
        f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = $1",
        job_id,
    )
    if row is None:
        raise NotFoundError(f"No job: {job_id}")
    return dict(row)


async def update(conn: asyncpg.Connection, job_id: int, data: dict[str, Any]) -> dict:
    """
    채용공고 부분 수정

    data: {title, salary, equity} 중 실제로 전송된 필드
    API 필드명과 DB 컬럼명이 같아서 매핑 없음
    """
    set_clause, values = build_set_clause(data)
    id_idx = len(values) + 1

    row = await conn.fetchrow(
        f"""
        UPDATE jobs
        SET {set_clause}
        WHERE id = ${id_idx}
        RETURNING {JOB_COLUMNS}
        """,
        *values,
        job_id,
    )
    if row is None:
        raise NotFoundError(f"No job: {job_id}")

    return dict(row)


async def remove(conn: asyncpg.Connection, job_id: int) -> None:
    deleted = await conn.fetchval(
        "DELETE FROM jobs WHERE id = $1 RETURNING id",
        job_id,
    )
    if deleted is None:
        raise NotFoundError(f"No job: {job_id}")
    logger.info("Job deleted: %s", job_id)
