from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional

from blogcms.models.schemas import PlatformConfig, SyncResult
from blogcms.sync.base import PlatformSyncer
from blogcms.sync.platforms import WeChatSyncer, XiaohongshuSyncer, ZhihuSyncer


logger = logging.getLogger("blogcms.sync")

SYNCERS: Dict[str, PlatformSyncer] = {
    s.name: s for s in (WeChatSyncer(), ZhihuSyncer(), XiaohongshuSyncer())
}


async def _sync_one(platform: str, article: dict, config: PlatformConfig,
                    syncers: Dict[str, PlatformSyncer]) -> SyncResult:
    syncer = syncers.get(platform)
    if syncer is None:
        return SyncResult(platform=platform, ok=False, detail="unsupported platform")
    try:
        return await syncer.sync(article, config.credentials_for(platform))
    except Exception as e:  # noqa: BLE001 - one platform must not break the others
        logger.exception(
            "Platform sync failed",
            extra={"event": "sync_failed", "platform": platform, "slug": article.get("slug")},
        )
        return SyncResult(platform=platform, ok=False, detail=f"{type(e).__name__}: {e}")


async def sync_to_platforms(
    article: dict,
    config: PlatformConfig,
    syncers: Optional[Dict[str, PlatformSyncer]] = None,
) -> List[SyncResult]:
    """Fan out to every platform listed on the article and collect results.

    Order of the returned list follows ``article["platforms"]``.
    """
    syncers = SYNCERS if syncers is None else syncers
    platforms = article.get("platforms") or []
    results = await asyncio.gather(
        *[_sync_one(p, article, config, syncers) for p in platforms]
    )
    failed = [r.platform for r in results if not r.ok]
    logger.info(
        "Platform sync finished",
        extra={
            "event": "sync_finished",
            "slug": article.get("slug"),
            "platforms": list(platforms),
            "failed": failed,
        },
    )
    return list(results)
