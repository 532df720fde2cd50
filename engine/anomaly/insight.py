"""
Insight composition: turns a detected anomaly candidate into the ranked, human-readable record served to clients, with a signed percent change and a templated explanation worded for the metric kind and direction.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import Dict, List, Tuple

from api.responses import AnomalyContext, Insight, InsightWindow
from config import settings
from engine.enums import Direction, MetricKind
from engine.models import AnomalyCandidate

# keyed by (metric is latency, direction)
_CLOSING: Dict[Tuple[bool, Direction], str] = {
    (True, Direction.up): (
        "Higher p95 load time may be related to a recent deployment, "
        "backend slowdown, or third-party scripts."
    ),
    (True, Direction.down): "Lower p95 load time suggests a positive performance improvement.",
    (False, Direction.up): (
        "This could be driven by a campaign, traffic spike, or better UX for this segment."
    ),
    (False, Direction.down): (
        "This may point to a broken flow, tracking issue, or loss of traffic for this segment."
    ),
}


def _round_half_up(x: float) -> int:
    # x - floor(x) is exact, unlike x + 0.5 near the half
    whole = math.floor(x)
    return int(whole) + (1 if x - whole >= 0.5 else 0)


def percent_change(recent_avg: float, baseline_mean: float) -> str:
    """Signed, rounded percent change of ``recent_avg`` over ``baseline_mean``.

    A zero baseline has no defined ratio and reports ``"+0%"``.
    """
    pct = 0.0 if baseline_mean == 0 else (recent_avg - baseline_mean) / baseline_mean * 100
    sign = "+" if pct >= 0 else ""
    return f"{sign}{_round_half_up(pct)}%"


def context_clauses(ctx: AnomalyContext) -> List[str]:
    pieces: List[str] = []
    if ctx.page:
        pieces.append(f"on page '{ctx.page}'")
    if ctx.device_type:
        pieces.append(f"for {ctx.device_type} users")
    if ctx.referrer:
        pieces.append(f"from referrer '{ctx.referrer}'")
    if ctx.category:
        pieces.append(f"in category '{ctx.category}'")
    return pieces


def closing_sentence(metric: MetricKind, direction: Direction) -> str:
    return _CLOSING[(metric.is_latency, direction)]


def explain(c: AnomalyCandidate) -> str:
    text = f"Detected a significant {c.direction.word} in {c.metric.label.lower()}"
    pieces = context_clauses(c.context)
    if pieces:
        text += " " + " ".join(pieces)
    return f"{text}. {closing_sentence(c.metric, c.direction)}"


def to_insight(c: AnomalyCandidate) -> Insight:
    return Insight(
        metric=c.metric.label,
        page=c.context.page or None,
        type=c.metric,
        change=percent_change(c.recent_avg, c.baseline_mean),
        possible_cause=explain(c),
        context=c.context.model_copy(),
        score=abs(c.z_score),
        window=InsightWindow(
            recent_hours=settings.recent_hours,
            baseline_hours=settings.baseline_hours_label,
        ),
    )
