from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from blogcms.db.sa import get_session
from blogcms.models.schemas import CacheValue, CacheWriteResult
from blogcms.services import cache as cache_svc


router = APIRouter(prefix="/api/cache", tags=["cache"])


@router.get("/{key}", response_model=CacheValue)
async def get_cache(key: str, session: AsyncSession = Depends(get_session)) -> CacheValue:
    value = await cache_svc.get_value(session, key)
    if value is None:
        raise HTTPException(status_code=404, detail="Key not found")
    return CacheValue(value=value)


@router.put("/{key}", response_model=CacheWriteResult)
async def put_cache(
    key: str,
    payload: CacheValue,
    session: AsyncSession = Depends(get_session),
) -> CacheWriteResult:
    await cache_svc.put_value(session, key, payload.value)
    return CacheWriteResult(success=True)
