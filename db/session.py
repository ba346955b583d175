from sqlalchemy.ext.asyncio import create_async_engine

from config import settings


def to_async_url(database_url: str) -> str:
    """asyncpg DSN(postgresql://)을 SQLAlchemy async URL(postgresql+asyncpg://)로 변환"""
    for prefix in ("postgresql://", "postgres://"):
        if database_url.startswith(prefix):
            return "postgresql+asyncpg://" + database_url[len(prefix):]
    return database_url


engine = create_async_engine(to_async_url(settings.database_url))
