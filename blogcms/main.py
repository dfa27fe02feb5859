from contextlib import asynccontextmanager

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from blogcms.api import articles
from blogcms.api import cache as cache_api
from blogcms.api import health as health_api
from blogcms.config import LOG_LEVEL, ROOT_PATH
from blogcms.db import pool as db_pool
from blogcms.db import sa as db_sa
from blogcms.db import schema as db_schema


logger = logging.getLogger("blogcms")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # asyncpg for articles, SQLAlchemy for the key-value store
    await db_pool.connect_db()
    await db_sa.init_sa_engine()
    await db_schema.ensure_articles_table()
    await db_sa.create_kv_tables()
    try:
        yield
    finally:
        await db_sa.close_sa_engine()
        await db_pool.close_db()


app = FastAPI(lifespan=lifespan, root_path=ROOT_PATH)
app.include_router(health_api.router)
app.include_router(articles.router)
app.include_router(cache_api.router)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.error(
        "Unhandled error: %s",
        exc,
        exc_info=exc,
        extra={"event": "unhandled_error", "path": request.url.path, "error_name": type(exc).__name__},
    )
    return PlainTextResponse(f"Internal Server Error: {exc}", status_code=500)


@app.exception_handler(RequestValidationError)
async def unreadable_body(request: Request, exc: RequestValidationError):
    # Unparsable bodies share the generic server-error path
    logger.warning(
        "Request body rejected: %s",
        exc.errors(),
        extra={"event": "request_body_rejected", "path": request.url.path},
    )
    return PlainTextResponse(f"Internal Server Error: {exc}", status_code=500)


logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
