from __future__ import annotations

from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blogcms.config import DB_DSN
from blogcms.db.base import Base


_engine: Optional[AsyncEngine] = None
_sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None


def _to_sqlalchemy_async_dsn(dsn: str | None) -> str:
    if not dsn:
        raise RuntimeError("DATABASE_URL is not configured")
    if dsn.startswith("postgresql+asyncpg://"):
        return dsn
    if dsn.startswith("postgresql://"):
        return dsn.replace("postgresql://", "postgresql+asyncpg://", 1)
    if dsn.startswith("postgres://"):
        return dsn.replace("postgres://", "postgresql+asyncpg://", 1)
    return dsn


async def init_sa_engine() -> None:
    global _engine, _sessionmaker
    if _engine is None:
        async_dsn = _to_sqlalchemy_async_dsn(DB_DSN)
        _engine = create_async_engine(async_dsn, pool_pre_ping=True)
        _sessionmaker = async_sessionmaker(
            bind=_engine,
            expire_on_commit=False,
            autoflush=False,
        )


async def close_sa_engine() -> None:
    global _engine, _sessionmaker
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _sessionmaker = None


async def create_kv_tables() -> None:
    """Create ORM-managed tables (the key-value store). Idempotent."""
    from blogcms.models import kv_models  # noqa: F401 ensure model registration

    if _engine is None:
        raise RuntimeError("SQLAlchemy engine is not initialized. Call init_sa_engine() first.")
    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    if _sessionmaker is None:
        raise RuntimeError("SQLAlchemy engine is not initialized. Call init_sa_engine() first.")
    session = _sessionmaker()
    try:
        yield session
    finally:
        await session.close()
