# blogcms/api/articles.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from blogcms.db.sa import get_session
from blogcms.models.schemas import ArticleCreate, ArticleOut, ArticleUpdate, PublishResponse
from blogcms.services import articles as svc

router = APIRouter(prefix="/api/articles", tags=["articles"])
logger = logging.getLogger("blogcms.articles")


@router.get("", response_model=List[ArticleOut], summary="All articles, newest first")
async def api_list_articles():
    return await svc.list_articles()


@router.post("", status_code=201, summary="Create an article and echo the payload")
async def api_create_article(payload: ArticleCreate):
    try:
        await svc.create_article(payload)
    except Exception as e:
        logger.exception("Error creating article", extra={"event": "article_create_failed", "slug": payload.slug})
        raise HTTPException(status_code=500, detail=f"Error creating article: {e}")
    return payload.model_dump(exclude_unset=True)


# -----------------------
#  Операции по slug
# -----------------------

@router.get("/{slug}", response_model=ArticleOut, summary="Article by slug")
async def api_get_article(slug: str):
    art = await svc.get_article(slug)
    if not art:
        raise HTTPException(status_code=404, detail="Article not found")
    return art


@router.put("/{slug}", summary="Overwrite article fields and echo the payload")
async def api_update_article(slug: str, payload: ArticleUpdate):
    try:
        status = await svc.update_article(slug, payload)
    except Exception as e:
        logger.exception("Error updating article", extra={"event": "article_update_failed", "slug": slug})
        raise HTTPException(status_code=500, detail=f"Error updating article: {e}")
    logger.debug("Article update: %s", status, extra={"event": "article_updated", "slug": slug})
    return payload.model_dump(exclude_unset=True)


@router.delete("/{slug}", status_code=204, response_class=Response, summary="Delete article by slug")
async def api_delete_article(slug: str):
    try:
        await svc.delete_article(slug)
    except Exception as e:
        logger.exception("Error deleting article", extra={"event": "article_delete_failed", "slug": slug})
        raise HTTPException(status_code=500, detail=f"Error deleting article: {e}")
    return Response(status_code=204)


@router.post("/{slug}/publish", response_model=PublishResponse,
             summary="Publish article and sync it to its platforms")
async def api_publish_article(slug: str, session: AsyncSession = Depends(get_session)):
    try:
        published = await svc.publish_article(slug, session)
    except Exception as e:
        logger.exception("Error publishing article", extra={"event": "article_publish_failed", "slug": slug})
        raise HTTPException(status_code=500, detail=f"Error publishing article: {e}")
    if published is None:
        raise HTTPException(status_code=404, detail="Article not found")
    return published
