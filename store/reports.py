"""
Persistence of computed insights into the insight_reports table.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import List, Optional

from api.responses import Insight
from config import settings
from database import get_db_session
from db_models import InsightReport

log = logging.getLogger(__name__)


def _to_row(insight: Insight) -> InsightReport:
    return InsightReport(
        metric=insight.metric,
        type=insight.type.value,
        page=insight.page,
        change=insight.change,
        possible_cause=insight.possible_cause,
        context=insight.context.model_dump(mode="json", by_alias=True),
        score=float(insight.score),
        recent_hours=insight.window.recent_hours,
        baseline_hours=insight.window.baseline_hours,
    )


def save_insights(insights: List[Insight], enabled: Optional[bool] = None) -> int:
    if enabled is None:
        enabled = settings.save_insights
    if not enabled or not insights:
        return 0

    with get_db_session() as session:
        session.add_all([_to_row(i) for i in insights])
    log.info("Saved %d insight report(s)", len(insights))
    return len(insights)
