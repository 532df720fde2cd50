"""
Analyzer run: fetches each metric kind's hourly observations, groups them, detects anomalies per group and returns all composed insights ranked by strength.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

from api.responses import Insight
from datasources.base import ObservationSource
from engine.anomaly import detect, group_observations, rank, to_insight
from engine.enums import MetricKind
from engine.models import Observation

log = logging.getLogger(__name__)


def analyze_metric(metric: MetricKind, observations: Sequence[Observation]) -> List[Insight]:
    if not observations:
        return []

    groups = group_observations(observations)
    insights: List[Insight] = []
    for members in groups.values():
        candidate = detect(metric, members)
        if candidate is not None:
            insights.append(to_insight(candidate))

    log.debug(
        "analyze_metric metric=%s observations=%d groups=%d anomalies=%d",
        metric.value, len(observations), len(groups), len(insights),
    )
    return insights


async def run(
    source: ObservationSource,
    metrics: Optional[Sequence[MetricKind]] = None,
) -> List[Insight]:
    kinds = list(metrics) if metrics is not None else list(MetricKind)

    raw = await asyncio.gather(*[source.fetch(kind) for kind in kinds], return_exceptions=True)

    all_insights: List[Insight] = []
    for kind, result in zip(kinds, raw):
        if isinstance(result, Exception):
            log.warning("fetch failed for metric=%s, skipping: %s", kind.value, result)
            continue
        all_insights.extend(analyze_metric(kind, result))

    return rank(all_insights)
