"""Façade that re-exports article service functions.

Routers import from here so read and write paths can live in separate
modules.
"""

from .articles_read import get_article, list_articles  # noqa: F401
from .articles_write import (  # noqa: F401
    create_article,
    delete_article,
    mark_published,
    update_article,
)
from .publish import publish_article  # noqa: F401

__all__ = [
    "get_article",
    "list_articles",
    "create_article",
    "update_article",
    "delete_article",
    "mark_published",
    "publish_article",
]
