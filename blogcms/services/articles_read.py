from __future__ import annotations

from typing import List, Optional

from blogcms.db.pool import pool


ARTICLE_COLUMNS = "id, slug, title, content, category, draft, platforms, created_at, lastmod"


async def list_articles() -> List[dict]:
    sql = f"""
    SELECT {ARTICLE_COLUMNS}
    FROM articles
    ORDER BY created_at DESC
    """
    p = pool()
    async with p.acquire() as conn:
        rows = await conn.fetch(sql)
        return [dict(r) for r in rows]


async def get_article(slug: str) -> Optional[dict]:
    sql = f"""
    SELECT {ARTICLE_COLUMNS}
    FROM articles
    WHERE slug = $1
    """
    p = pool()
    async with p.acquire() as conn:
        row = await conn.fetchrow(sql, slug)
        if not row:
            return None
        return dict(row)
