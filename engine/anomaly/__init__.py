"""
Anomaly detection for hourly web metrics: statistics primitives, context grouping, z-score detection over a recent window, insight composition and ranking.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.anomaly.detection import detect
from engine.anomaly.grouping import group_observations
from engine.anomaly.insight import to_insight
from engine.anomaly.ranking import rank

__all__ = ["detect", "group_observations", "rank", "to_insight"]
