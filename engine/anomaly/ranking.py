"""
Ranking of composed insights by anomaly strength.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Iterable, List

from api.responses import Insight


def rank(insights: Iterable[Insight]) -> List[Insight]:
    return sorted(insights, key=lambda i: i.score, reverse=True)
