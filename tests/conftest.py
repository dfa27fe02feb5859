import itertools
from datetime import datetime, timedelta, timezone

import pytest
import sys
from pathlib import Path

# Ensure repository root is on sys.path for `import blogcms`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from fastapi.testclient import TestClient


class FakeUniqueViolation(Exception):
    pass


class FakeNotNullViolation(Exception):
    pass


class FakeConnection:
    """Interprets the handful of statements the article services issue."""

    def __init__(self, db: "FakePool"):
        self.db = db

    @staticmethod
    def _norm(sql: str) -> str:
        return " ".join(sql.split())

    def _find(self, slug):
        return [r for r in self.db.rows if r["slug"] == slug]

    async def fetch(self, sql, *args):
        text = self._norm(sql)
        if text.startswith("SELECT") and "ORDER BY created_at DESC" in text:
            rows = sorted(self.db.rows, key=lambda r: r["created_at"], reverse=True)
            return [dict(r) for r in rows]
        raise AssertionError(f"unexpected fetch: {text}")

    async def fetchrow(self, sql, *args):
        text = self._norm(sql)
        if text.startswith("SELECT") and "WHERE slug = $1" in text:
            found = self._find(args[0])
            return dict(found[0]) if found else None
        if text.startswith("UPDATE articles SET draft = FALSE") and "RETURNING" in text:
            lastmod, slug = args
            found = self._find(slug)
            for r in found:
                r["draft"] = False
                r["lastmod"] = lastmod
            return dict(found[0]) if found else None
        raise AssertionError(f"unexpected fetchrow: {text}")

    async def execute(self, sql, *args):
        text = self._norm(sql)
        if text.startswith("INSERT INTO articles"):
            title, slug, content, category, draft, platforms = args
            if slug is None:
                raise FakeNotNullViolation('null value in column "slug" violates not-null constraint')
            if self._find(slug):
                raise FakeUniqueViolation('duplicate key value violates unique constraint "uq_articles_slug"')
            self.db.rows.append({
                "id": next(self.db.ids),
                "slug": slug,
                "title": title,
                "content": content,
                "category": category,
                "draft": draft,
                "platforms": list(platforms),
                "created_at": self.db.next_created_at(),
                "lastmod": None,
            })
            return "INSERT 0 1"
        if text.startswith("UPDATE articles SET title"):
            title, content, category, draft, platforms, slug = args
            found = self._find(slug)
            for r in found:
                r.update(title=title, content=content, category=category, draft=draft)
                if platforms is not None:
                    r["platforms"] = list(platforms)
            return f"UPDATE {len(found)}"
        if text.startswith("DELETE FROM articles"):
            found = self._find(args[0])
            self.db.rows = [r for r in self.db.rows if r["slug"] != args[0]]
            return f"DELETE {len(found)}"
        raise AssertionError(f"unexpected execute: {text}")


class _Acquire:
    def __init__(self, conn):
        self.conn = conn

    async def __aenter__(self):
        return self.conn

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakePool:
    def __init__(self):
        self.rows: list[dict] = []
        self.ids = itertools.count(1)
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def next_created_at(self) -> datetime:
        self._clock += timedelta(minutes=1)
        return self._clock

    def acquire(self):
        return _Acquire(FakeConnection(self))


class FakeSession:
    """Key-value store session: just enough of AsyncSession for the cache service."""

    def __init__(self):
        self.entries = {}
        self.commits = 0

    async def get(self, model, key):
        return self.entries.get(key)

    def add(self, obj):
        self.entries[obj.key] = obj

    async def commit(self):
        self.commits += 1

    async def rollback(self):
        return None

    async def close(self):
        return None


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def fake_pool(monkeypatch):
    import blogcms.db.pool as db_pool

    fp = FakePool()
    monkeypatch.setattr(db_pool, "_pool", fp)
    return fp


@pytest.fixture()
def kv_session():
    return FakeSession()


@pytest.fixture()
def client(monkeypatch, fake_pool, kv_session):
    # Patch DB init/close in lifespan to no-op
    import blogcms.db.pool as db_pool
    import blogcms.db.sa as db_sa
    import blogcms.db.schema as db_schema

    async def _noop(*args, **kwargs):
        return None

    monkeypatch.setattr(db_pool, "connect_db", _noop)
    monkeypatch.setattr(db_pool, "close_db", _noop)
    monkeypatch.setattr(db_sa, "init_sa_engine", _noop)
    monkeypatch.setattr(db_sa, "close_sa_engine", _noop)
    monkeypatch.setattr(db_sa, "create_kv_tables", _noop)
    monkeypatch.setattr(db_schema, "ensure_articles_table", _noop)

    from blogcms import main as main_mod

    async def _gen():
        yield kv_session

    app = main_mod.app
    app.dependency_overrides[db_sa.get_session] = _gen

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
