from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from blogcms.models.schemas import PublishResponse
from blogcms.services.articles_write import mark_published
from blogcms.services.cache import load_platform_config
from blogcms.sync.registry import sync_to_platforms


logger = logging.getLogger("blogcms.publish")


async def publish_article(slug: str, session: AsyncSession) -> Optional[PublishResponse]:
    """Publish the article and sync it to its platforms.

    Returns None when no article has this slug; nothing is written then.
    """
    article = await mark_published(slug)
    if article is None:
        return None
    logger.info("Article published", extra={"event": "article_published", "slug": slug})

    config = await load_platform_config(session)
    results = await sync_to_platforms(article, config)
    return PublishResponse(**article, sync=results)
