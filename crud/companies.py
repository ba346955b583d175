"""
회사(companies) 데이터 접근 함수

모든 함수는 요청마다 주입되는 asyncpg 커넥션을 첫 인자로 받는다.
반환값은 snake_case 키를 가진 dict (API 응답 스키마가 camelCase로 변환)
"""
import logging
from typing import Any

import asyncpg

from utils.errors import BadRequestError, NotFoundError
from utils.query import build_set_clause, escape_like

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = "handle, name, description, num_employees, logo_url"

# API 필드명(camelCase) -> DB 컬럼명
COMPANY_COLUMN_MAP = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

COMPANY_NAME_CONSTRAINT = "companies_name_key"


async def create(conn: asyncpg.Connection, data: dict[str, Any]) -> dict:
    """
    회사 생성

    data: {handle, name, description, num_employees, logo_url}
    이미 존재하는 handle/name이면 BadRequestError
    """
    duplicate = await conn.fetchval(
        "SELECT handle FROM companies WHERE handle = $1",
        data["handle"],
    )
    if duplicate:
        raise BadRequestError(f"Duplicate company: {data['handle']}")

    try:
        row = await conn.fetchrow(
            f"""
            INSERT INTO companies (handle, name, description, num_employees, logo_url)
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {COMPANY_COLUMNS}
            """,
            data["handle"],
            data["name"],
            data["description"],
            data.get("num_employees"),
            data.get("logo_url"),
        )
    except asyncpg.UniqueViolationError as e:
        if getattr(e, "constraint_name", None) == COMPANY_NAME_CONSTRAINT:
            raise BadRequestError(f"Duplicate company name: {data['name']}")
        raise BadRequestError(f"Duplicate company: {data['handle']}")

    logger.info("Company created: %s", row["handle"])
    return dict(row)


async def find_all(
        conn: asyncpg.Connection,
        name: str | None = None,
        min_employees: int | None = None,
        max_employees: int | None = None,
) -> list[dict]:
    """
    회사 목록 조회 (이름순)
    - name: 대소문자 무시 부분 일치
    - min_employees / max_employees: 직원 수 범위 (경계 포함)
    """
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise BadRequestError("minEmployees cannot be greater than maxEmployees")

    conditions = []
    params: list[Any] = []

    if name is not None:
        params.append(f"%{escape_like(name)}%")
        conditions.append(f"name ILIKE ${len(params)}")
    if min_employees is not None:
        params.append(min_employees)
        conditions.append(f"num_employees >= ${len(params)}")
    if max_employees is not None:
        params.append(max_employees)
        conditions.append(f"num_employees <= ${len(params)}")

    query = f"SELECT {COMPANY_COLUMNS} FROM companies"
    if conditions:
        query += " WHERE " + " AND ".join(conditions)
    query += " ORDER BY name"

    rows = await conn.fetch(query, *params)
    return [dict(row) for row in rows]


async def get(conn: asyncpg.Connection, handle: str) -> dict:
    """회사 상세 조회 (소속 채용공고 포함)"""
    row = await conn.fetchrow(
        f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
        handle,
    )
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    job_rows = await conn.fetch(
        """
        SELECT id, title, salary, equity
        FROM jobs
        WHERE company_handle = $1
        ORDER BY id
        """,
        handle,
    )

    company = dict(row)
    company["jobs"] = [dict(job) for job in job_rows]
    return company


async def update(conn: asyncpg.Connection, handle: str, data: dict[str, Any]) -> dict:
    """
    회사 부분 수정

    data: 실제로 전송된 필드만 담은 camelCase dict
          {name, description, numEmployees, logoUrl} 중 일부
    """
    set_clause, values = build_set_clause(data, COMPANY_COLUMN_MAP)
    handle_idx = len(values) + 1

    try:
        row = await conn.fetchrow(
            f"""
            UPDATE companies
            SET {set_clause}
            WHERE handle = ${handle_idx}
            RETURNING {COMPANY_COLUMNS}
            """,
            *values,
            handle,
        )
    except asyncpg.UniqueViolationError:
        # 수정 가능한 UNIQUE 컬럼은 name뿐
        raise BadRequestError(f"Duplicate company name: {data.get('name')}")
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    return dict(row)


async def remove(conn: asyncpg.Connection, handle: str) -> None:
    """회사 삭제 (채용공고는 FK CASCADE로 함께 삭제)"""
    deleted = await conn.fetchval(
        "DELETE FROM companies WHERE handle = $1 RETURNING handle",
        handle,
    )
    if deleted is None:
        raise NotFoundError(f"No company: {handle}")
    logger.info("Company deleted: %s", handle)
