"""
Enumerations for Metric Kinds and Anomaly Directions

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum

_LABELS = {
    "pageviews": "Page Views",
    "useractions": "User Actions",
    "performance": "Page Load Time (p95)",
}


class MetricKind(str, Enum):
    pageviews = "pageviews"
    useractions = "useractions"
    performance = "performance"

    @property
    def label(self) -> str:
        return _LABELS[self.value]

    @property
    def is_latency(self) -> bool:
        # counts vs. latency only changes wording, never the math
        return self is MetricKind.performance


class Direction(str, Enum):
    up = "up"
    down = "down"

    @classmethod
    def from_z(cls, z: float) -> Direction:
        return cls.up if z >= 0 else cls.down

    @property
    def word(self) -> str:
        return "increase" if self is Direction.up else "drop"
