from __future__ import annotations

import pytest

from blogcms.services import cache as cache_svc


def test_put_then_get_returns_value(client):
    resp = client.put("/api/cache/greeting", json={"value": "hello"})
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    got = client.get("/api/cache/greeting")
    assert got.status_code == 200
    assert got.json() == {"value": "hello"}


def test_put_overwrites_previous_value(client, kv_session):
    client.put("/api/cache/k", json={"value": "one"})
    client.put("/api/cache/k", json={"value": "two"})

    assert client.get("/api/cache/k").json() == {"value": "two"}
    assert len(kv_session.entries) == 1


def test_empty_string_is_a_stored_value(client):
    client.put("/api/cache/blank", json={"value": ""})
    got = client.get("/api/cache/blank")
    assert got.status_code == 200
    assert got.json() == {"value": ""}


def test_get_missing_key_404(client):
    resp = client.get("/api/cache/missing")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Key not found"


@pytest.mark.anyio
async def test_load_platform_config_tolerates_bad_blob(kv_session):
    cfg = await cache_svc.load_platform_config(kv_session)
    assert cfg.credentials_for("wechat") == {"app_id": None, "app_secret": None}

    await cache_svc.put_value(kv_session, "platform_config", "{not json")
    cfg = await cache_svc.load_platform_config(kv_session)
    assert cfg.credentials_for("zhihu") == {"username": None, "password": None}


@pytest.mark.anyio
async def test_load_platform_config_parses_sections(kv_session):
    await cache_svc.put_value(
        kv_session,
        "platform_config",
        '{"wechat": {"app_id": "a", "app_secret": "b"}, "xiaohongshu": {"username": "u", "password": "p"}}',
    )
    cfg = await cache_svc.load_platform_config(kv_session)
    assert cfg.credentials_for("wechat") == {"app_id": "a", "app_secret": "b"}
    assert cfg.credentials_for("xiaohongshu") == {"username": "u", "password": "p"}
    assert cfg.credentials_for("unknown") == {}


@pytest.mark.anyio
async def test_broken_section_does_not_discard_other_platforms(kv_session):
    await cache_svc.put_value(
        kv_session,
        "platform_config",
        '{"wechat": null, "zhihu": {"username": 42, "password": "p"},'
        ' "xiaohongshu": {"username": "u", "password": "p"}}',
    )
    cfg = await cache_svc.load_platform_config(kv_session)
    assert cfg.credentials_for("wechat") == {"app_id": None, "app_secret": None}
    assert cfg.credentials_for("zhihu") == {"username": None, "password": None}
    assert cfg.credentials_for("xiaohongshu") == {"username": "u", "password": "p"}
