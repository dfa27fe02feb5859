"""DDL for the ``articles`` table.

Articles are accessed with plain parameterized SQL through the asyncpg pool,
so the table is created here rather than through SQLAlchemy metadata.
"""
from __future__ import annotations

from blogcms.db.pool import pool


ARTICLES_DDL = """
CREATE TABLE IF NOT EXISTS articles (
    id          SERIAL PRIMARY KEY,
    slug        TEXT NOT NULL,
    title       TEXT,
    content     TEXT,
    category    TEXT,
    draft       BOOLEAN NOT NULL DEFAULT TRUE,
    platforms   TEXT[] NOT NULL DEFAULT '{}',
    created_at  TIMESTAMPTZ NOT NULL DEFAULT now(),
    lastmod     TIMESTAMPTZ,
    CONSTRAINT uq_articles_slug UNIQUE (slug)
)
"""

ARTICLES_INDEXES = (
    "CREATE INDEX IF NOT EXISTS ix_articles_created_at ON articles (created_at DESC)",
)


async def ensure_articles_table() -> None:
    p = pool()
    async with p.acquire() as conn:
        await conn.execute(ARTICLES_DDL)
        for stmt in ARTICLES_INDEXES:
            await conn.execute(stmt)
