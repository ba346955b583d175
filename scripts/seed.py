"""테스트 데이터 생성 스크립트

사용법:
    python scripts/seed.py

테이블이 없으면 생성하고 기존 데이터를 비운 뒤 샘플 회사/채용공고를 넣는다.
마지막에 API 테스트용 관리자 토큰을 출력한다.
"""
import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import async_sessionmaker

from db.base import Base
from db.models.company import Company
from db.models.job import Job
from db.session import engine
from utils.auth import create_access_token

TEST_COMPANIES = [
    {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "num_employees": 1,
        "logo_url": "http://c1.img",
    },
    {
        "handle": "c2",
        "name": "C2",
        "description": "Desc2",
        "num_employees": 2,
        "logo_url": "http://c2.img",
    },
    {
        "handle": "c3",
        "name": "C3",
        "description": "Desc3",
        "num_employees": 3,
        "logo_url": None,
    },
]

TEST_JOBS = [
    {"title": "j1", "salary": 10000, "equity": Decimal("0.3"), "company_handle": "c1"},
    {"title": "j2", "salary": 20000, "equity": Decimal("0"), "company_handle": "c2"},
    {"title": "j3", "salary": None, "equity": None, "company_handle": "c1"},
]


async def seed():
    """모든 테스트 데이터 생성"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        await session.execute(delete(Job))
        await session.execute(delete(Company))

        session.add_all(Company(**company) for company in TEST_COMPANIES)
        await session.flush()
        session.add_all(Job(**job) for job in TEST_JOBS)
        await session.commit()

    await engine.dispose()

    print("✅ 테스트 데이터 생성 완료!")
    print(f"\n🏢 회사 {len(TEST_COMPANIES)}개, 채용공고 {len(TEST_JOBS)}개")
    print("\n🔑 관리자 토큰:")
    print(f"   {create_access_token({'username': 'admin', 'isAdmin': True})}")


if __name__ == "__main__":
    asyncio.run(seed())
