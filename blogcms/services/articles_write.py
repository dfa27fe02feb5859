"""Single-statement writes against the ``articles`` table.

Every function here runs exactly one statement and returns the raw status
string reported by asyncpg (``"INSERT 0 1"``, ``"UPDATE 0"``, ...). A slug
that matches no row is not an error.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from blogcms.db.pool import pool
from blogcms.models.schemas import ArticleCreate, ArticleUpdate
from blogcms.services.articles_read import ARTICLE_COLUMNS


async def create_article(article: ArticleCreate) -> str:
    sql = """
    INSERT INTO articles (title, slug, content, category, draft, platforms)
    VALUES ($1, $2, $3, $4, $5, $6)
    """
    p = pool()
    async with p.acquire() as conn:
        return await conn.execute(
            sql,
            article.title,
            article.slug,
            article.content,
            article.category,
            article.draft,
            article.platforms,
        )


async def update_article(slug: str, article: ArticleUpdate) -> str:
    sql = """
    UPDATE articles
    SET title = $1, content = $2, category = $3, draft = $4,
        platforms = COALESCE($5, platforms)
    WHERE slug = $6
    """
    p = pool()
    async with p.acquire() as conn:
        return await conn.execute(
            sql,
            article.title,
            article.content,
            article.category,
            article.draft,
            article.platforms,
            slug,
        )


async def delete_article(slug: str) -> str:
    p = pool()
    async with p.acquire() as conn:
        return await conn.execute("DELETE FROM articles WHERE slug = $1", slug)


async def mark_published(slug: str, lastmod: Optional[datetime] = None) -> Optional[dict]:
    """Clear ``draft`` and stamp ``lastmod``; return the updated row or None."""
    lastmod = lastmod or datetime.now(timezone.utc)
    sql = f"""
    UPDATE articles
    SET draft = FALSE, lastmod = $1
    WHERE slug = $2
    RETURNING {ARTICLE_COLUMNS}
    """
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(sql, lastmod, slug)
        if not row:
            return None
        return dict(row)
