"""
Time-boxed cache of the most recent ranked insight list.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import json
import logging
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from api.responses import Insight
from config import settings
from store import keys
from store.client import redis_get, redis_set

log = logging.getLogger(__name__)

_INSIGHTS = TypeAdapter(List[Insight])


async def load_insights() -> Optional[List[Insight]]:
    try:
        raw = await redis_get(keys.anomalies())
        if raw:
            return _INSIGHTS.validate_json(raw)
    except (ValidationError, ValueError) as exc:
        log.warning("Discarding unreadable insights cache entry: %s", exc)
    except Exception as exc:
        log.debug("Insights cache load failed: %s", exc)
    return None


async def save_insights_cache(insights: List[Insight], ttl: Optional[int] = None) -> None:
    if ttl is None:
        ttl = settings.cache_ttl_seconds
    try:
        payload = json.dumps(_INSIGHTS.dump_python(insights, mode="json", by_alias=True))
        await redis_set(keys.anomalies(), payload, ttl=ttl)
    except Exception as exc:
        log.debug("Insights cache save failed: %s", exc)
