"""
Insight service that serves the ranked anomaly insights, using the response cache and optionally persisting fresh results.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import asyncio
import logging
from typing import List

from api.responses import Insight
from datasources.base import ObservationSource
from engine.analyzer import run
from store.cache import load_insights, save_insights_cache
from store.reports import save_insights

log = logging.getLogger(__name__)


async def persist_insights(insights: List[Insight]) -> None:
    # the result is already final; a failed write must not affect it
    try:
        await asyncio.to_thread(save_insights, insights)
    except Exception as exc:
        log.warning("Persisting %d insight(s) failed: %s", len(insights), exc)


async def get_anomaly_insights(source: ObservationSource) -> List[Insight]:
    cached = await load_insights()
    if cached is not None:
        return cached

    insights = await run(source)
    await save_insights_cache(insights)
    await persist_insights(insights)
    return insights
