from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from blogcms.models.schemas import SyncResult


class PlatformSyncer(ABC):
    """Pushes a published article to one external platform."""

    name: str = ""
    required_credentials: Tuple[str, ...] = ()

    def missing_credentials(self, credentials: Dict[str, Any]) -> list[str]:
        return [k for k in self.required_credentials if not credentials.get(k)]

    async def sync(self, article: dict, credentials: Dict[str, Any]) -> SyncResult:
        missing = self.missing_credentials(credentials)
        if missing:
            return SyncResult(
                platform=self.name,
                ok=False,
                detail="missing credentials: " + ", ".join(missing),
            )
        return await self.push(article, credentials)

    @abstractmethod
    async def push(self, article: dict, credentials: Dict[str, Any]) -> SyncResult:
        ...
