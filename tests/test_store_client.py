"""
Test Suite for Store Client

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from store import client as store_client
from store.client import _fallback, redis_delete, redis_get, redis_set


@pytest.mark.asyncio
async def test_fallback_operations():
    await redis_set("k1", "v1")
    assert await redis_get("k1") == "v1"
    await redis_delete("k1")
    assert await redis_get("k1") is None
    assert store_client.is_using_fallback()


@pytest.mark.asyncio
async def test_fallback_honours_ttl(monkeypatch):
    clock = {"now": 1000.0}
    monkeypatch.setattr(store_client, "_clock", lambda: clock["now"])

    await redis_set("k", "v", ttl=900)
    clock["now"] += 899
    assert await redis_get("k") == "v"
    clock["now"] += 2
    assert await redis_get("k") is None
    assert "k" not in _fallback


@pytest.mark.asyncio
async def test_fallback_without_ttl_never_expires(monkeypatch):
    clock = {"now": 0.0}
    monkeypatch.setattr(store_client, "_clock", lambda: clock["now"])
    await redis_set("k", "v")
    clock["now"] += 10 ** 9
    assert await redis_get("k") == "v"


@pytest.mark.asyncio
async def test_fallback_size_is_bounded(monkeypatch):
    monkeypatch.setattr(store_client, "_MAX_FALLBACK_SIZE", 2)
    await redis_set("a", "1")
    await redis_set("b", "2")
    await redis_set("c", "3")
    assert await redis_get("c") is None
    # existing keys can still be overwritten
    await redis_set("a", "9")
    assert await redis_get("a") == "9"


@pytest.mark.asyncio
async def test_redis_errors_fall_back_to_memory(monkeypatch):
    class BrokenRedis:
        async def get(self, key):
            raise ConnectionError("gone")

        async def setex(self, key, ttl, value):
            raise ConnectionError("gone")

    async def broken():
        return BrokenRedis()

    monkeypatch.setattr(store_client, "get_redis", broken)
    await redis_set("k", "v", ttl=60)
    assert await redis_get("k") == "v"
