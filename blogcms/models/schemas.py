# blogcms/models/schemas.py
import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from typing import Optional, List, Dict, Any
from datetime import datetime


logger = logging.getLogger("blogcms.cache")


# --- Тело запроса на создание статьи ---
# Валидации нет: отсутствующие поля приходят как None, ошибки ловит БД
class ArticleCreate(BaseModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    draft: bool = True
    platforms: List[str] = Field(default_factory=list)


# --- Тело запроса на обновление (полная замена полей) ---
# platforms = None означает "не трогать сохранённый список"
class ArticleUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    draft: bool = True
    platforms: Optional[List[str]] = None


# --- Строка таблицы articles ---
class ArticleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    slug: str
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    draft: bool
    platforms: List[str] = []
    created_at: datetime
    lastmod: Optional[datetime] = None


# --- Результат синхронизации с одной платформой ---
class SyncResult(BaseModel):
    platform: str
    ok: bool
    detail: Optional[str] = None


class PublishResponse(ArticleOut):
    sync: List[SyncResult] = []


# --- Учётные данные платформ (KV-ключ platform_config) ---
class WeChatCredentials(BaseModel):
    app_id: Optional[str] = None
    app_secret: Optional[str] = None


class AccountCredentials(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class PlatformConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    wechat: WeChatCredentials = Field(default_factory=WeChatCredentials)
    zhihu: AccountCredentials = Field(default_factory=AccountCredentials)
    xiaohongshu: AccountCredentials = Field(default_factory=AccountCredentials)

    @field_validator("wechat", "zhihu", "xiaohongshu", mode="wrap")
    @classmethod
    def drop_broken_section(cls, v, handler, info):
        # Битая секция одной платформы не должна обнулять остальные
        try:
            return handler(v)
        except ValidationError as e:
            logger.warning(
                "Platform config section %s is invalid: %s",
                info.field_name,
                e.errors(),
                extra={"event": "platform_config_section_invalid", "platform": info.field_name},
            )
            return cls.model_fields[info.field_name].default_factory()

    def credentials_for(self, platform: str) -> Dict[str, Any]:
        section = getattr(self, platform, None)
        if isinstance(section, BaseModel):
            return section.model_dump()
        if isinstance(section, dict):
            return section
        return {}


# --- KV-кэш ---
class CacheValue(BaseModel):
    value: Optional[str] = None


class CacheWriteResult(BaseModel):
    success: bool = True
