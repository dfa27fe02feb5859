from __future__ import annotations

import json
import logging
from typing import Optional

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from blogcms.config import PLATFORM_CONFIG_KEY
from blogcms.models.kv_models import CacheEntry
from blogcms.models.schemas import PlatformConfig


logger = logging.getLogger("blogcms.cache")


async def get_value(session: AsyncSession, key: str) -> Optional[str]:
    entry = await session.get(CacheEntry, key)
    if entry is None:
        return None
    return entry.value


async def put_value(session: AsyncSession, key: str, value: str) -> None:
    entry = await session.get(CacheEntry, key)
    if entry is None:
        session.add(CacheEntry(key=key, value=value))
    else:
        entry.value = value
    await session.commit()
    logger.debug("Cache entry written", extra={"event": "cache_put", "key": key})


async def load_platform_config(session: AsyncSession) -> PlatformConfig:
    raw = await get_value(session, PLATFORM_CONFIG_KEY)
    if raw is None:
        logger.warning(
            "Platform config is missing",
            extra={"event": "platform_config_missing", "key": PLATFORM_CONFIG_KEY},
        )
        return PlatformConfig()
    try:
        return PlatformConfig.model_validate(json.loads(raw))
    except (ValueError, ValidationError) as e:
        logger.warning(
            "Platform config is not valid JSON: %s",
            e,
            extra={"event": "platform_config_invalid", "key": PLATFORM_CONFIG_KEY},
        )
        return PlatformConfig()
