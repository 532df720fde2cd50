"""
Internal data structures shared by the grouping, detection and insight stages: hourly observations, group identities and anomaly candidates.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from api.responses import AnomalyContext
from engine.enums import Direction, MetricKind

SCOPE_CONTEXT = "context"
SCOPE_GLOBAL = "global"


def _dimension(value: Optional[str]) -> Optional[str]:
    # "" and None are both "not set"
    return value or None


@dataclass(frozen=True)
class Observation:
    bucket_start: str
    value: float
    page: Optional[str] = None
    device_type: Optional[str] = None
    referrer: Optional[str] = None
    category: Optional[str] = None

    def context(self) -> AnomalyContext:
        return AnomalyContext(
            referrer=_dimension(self.referrer),
            device_type=_dimension(self.device_type),
            category=_dimension(self.category),
            page=_dimension(self.page),
        )

    def stripped(self) -> Observation:
        return replace(self, page=None, device_type=None, referrer=None, category=None)


@dataclass(frozen=True)
class GroupKey:
    """Identity of a group of observations.

    ``None`` is the wildcard for an unset dimension. Because the key is a
    tuple of optional values rather than a joined string, a dimension whose
    literal value is ``"*"`` stays distinct from an unset one.
    """

    page: Optional[str] = None
    device_type: Optional[str] = None
    referrer: Optional[str] = None
    category: Optional[str] = None
    scope: str = SCOPE_CONTEXT

    @classmethod
    def of(cls, obs: Observation) -> GroupKey:
        return cls(
            page=_dimension(obs.page),
            device_type=_dimension(obs.device_type),
            referrer=_dimension(obs.referrer),
            category=_dimension(obs.category),
        )

    @classmethod
    def global_(cls) -> GroupKey:
        return cls(scope=SCOPE_GLOBAL)

    @property
    def is_global(self) -> bool:
        return self.scope == SCOPE_GLOBAL


@dataclass(frozen=True)
class AnomalyCandidate:
    metric: MetricKind
    context: AnomalyContext
    recent_sum: float
    recent_avg: float
    baseline_mean: float
    baseline_std: float
    z_score: float
    direction: Direction
