"""
Detection logic that compares the trailing recent window of a group's hourly series against the older baseline portion with a z-score, and reports a candidate anomaly when the deviation passes the configured threshold.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from config import settings
from engine.anomaly.stats import mean, stddev, total
from engine.enums import Direction, MetricKind
from engine.models import AnomalyCandidate, Observation


def sort_series(observations: Sequence[Observation]) -> List[Observation]:
    # bucket_start is a UTC ISO string at hour granularity, so string order is time order
    return sorted(observations, key=lambda o: o.bucket_start)


def split_windows(values: Sequence[float], recent_hours: int) -> tuple[list[float], list[float]]:
    cut = len(values) - recent_hours
    return list(values[:cut]), list(values[cut:])


def detect(
    metric: MetricKind,
    observations: Sequence[Observation],
    recent_hours: int | None = None,
    threshold: float | None = None,
) -> Optional[AnomalyCandidate]:
    if recent_hours is None:
        recent_hours = settings.recent_hours
    if threshold is None:
        threshold = settings.zscore_threshold

    series = sort_series(observations)
    # need at least one baseline point on top of the recent window
    if len(series) <= recent_hours:
        return None

    baseline, recent = split_windows([o.value for o in series], recent_hours)

    baseline_mean = mean(baseline)
    baseline_std = stddev(baseline)
    if baseline_std == 0:
        return None

    recent_avg = mean(recent)
    z = (recent_avg - baseline_mean) / baseline_std
    if abs(z) < threshold:
        return None

    latest = series[-1]
    return AnomalyCandidate(
        metric=metric,
        context=latest.context(),
        recent_sum=total(recent),
        recent_avg=recent_avg,
        baseline_mean=baseline_mean,
        baseline_std=baseline_std,
        z_score=z,
        direction=Direction.from_z(z),
    )
