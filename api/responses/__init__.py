"""
Response models for API endpoints and internal data structures.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic.alias_generators import to_camel

from engine.enums import MetricKind


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):
    # wire format is camelCase; python code uses snake_case names
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class AnomalyContext(NpModel):
    """Where an anomaly happened. Unset fields mean the dimension is not part of the segment."""

    referrer: Optional[str] = None
    device_type: Optional[str] = None
    category: Optional[str] = None
    page: Optional[str] = None


class InsightWindow(NpModel):

    recent_hours: int
    baseline_hours: int


class Insight(NpModel):

    metric: str
    page: Optional[str] = None
    type: MetricKind
    change: str
    possible_cause: str
    context: AnomalyContext
    score: float
    window: InsightWindow

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        data = _coerce(handler(self))
        # an insight outside any page carries no page key at all
        if data.get("page") is None:
            data.pop("page", None)
        return data
