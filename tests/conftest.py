"""
공통 테스트 fixture

DB 대신 AsyncMock 커넥션을 주입한다 (fetch/fetchrow/fetchval 반환값을 테스트마다 지정)

실행 방법:
    uv sync --all-extras  # dev 의존성 설치
    pytest -v
"""
import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from main import app
from utils.auth import create_access_token
from utils.database import get_connection


@pytest.fixture
def conn():
    """asyncpg 커넥션 mock"""
    mock = AsyncMock()
    mock.fetch.return_value = []
    mock.fetchrow.return_value = None
    mock.fetchval.return_value = None
    return mock


@pytest.fixture
def client(conn):
    """테스트용 FastAPI 클라이언트 (커넥션 의존성 교체)"""
    app.dependency_overrides[get_connection] = lambda: conn
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = create_access_token(data={"username": "admin", "isAdmin": True})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_access_token(data={"username": "u1", "isAdmin": False})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def company_row():
    return {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "num_employees": 1,
        "logo_url": "http://c1.img",
    }


@pytest.fixture
def job_row():
    return {
        "id": 1,
        "title": "j1",
        "salary": 10000,
        "equity": Decimal("0.3"),
        "company_handle": "c1",
    }
