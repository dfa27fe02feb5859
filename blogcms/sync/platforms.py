"""Platform syncers.

None of the platforms is wired to its remote API yet: ``push`` reports a
failed "not implemented" result once the credentials check has passed.
"""
from __future__ import annotations

import logging
from typing import Any, Dict

from blogcms.models.schemas import SyncResult
from blogcms.sync.base import PlatformSyncer


logger = logging.getLogger("blogcms.sync")


class WeChatSyncer(PlatformSyncer):
    # Official account: app_id/app_secret are exchanged for an access token
    name = "wechat"
    required_credentials = ("app_id", "app_secret")

    async def push(self, article: dict, credentials: Dict[str, Any]) -> SyncResult:
        logger.info(
            "WeChat sync requested",
            extra={"event": "sync_wechat", "slug": article.get("slug"), "app_id": credentials.get("app_id")},
        )
        return SyncResult(platform=self.name, ok=False, detail="not implemented")


class ZhihuSyncer(PlatformSyncer):
    name = "zhihu"
    required_credentials = ("username", "password")

    async def push(self, article: dict, credentials: Dict[str, Any]) -> SyncResult:
        logger.info(
            "Zhihu sync requested",
            extra={"event": "sync_zhihu", "slug": article.get("slug")},
        )
        return SyncResult(platform=self.name, ok=False, detail="not implemented")


class XiaohongshuSyncer(PlatformSyncer):
    name = "xiaohongshu"
    required_credentials = ("username", "password")

    async def push(self, article: dict, credentials: Dict[str, Any]) -> SyncResult:
        logger.info(
            "Xiaohongshu sync requested",
            extra={"event": "sync_xiaohongshu", "slug": article.get("slug")},
        )
        return SyncResult(platform=self.name, ok=False, detail="not implemented")
