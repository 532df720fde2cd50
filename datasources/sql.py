"""
SQL-backed observation source reading the hourly rollup tables.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Type

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from config import settings
from database import get_db_session, is_initialized
from datasources.base import ObservationSource
from datasources.exceptions import DataSourceUnavailable
from db_models import PageviewsHourly, PerformanceHourly, UseractionsHourly
from engine.enums import MetricKind
from engine.models import Observation

log = logging.getLogger(__name__)

# which table and value column to use for each metric
METRIC_MODELS: Dict[MetricKind, tuple[Type[Any], str]] = {
    MetricKind.pageviews: (PageviewsHourly, "count"),
    MetricKind.useractions: (UseractionsHourly, "count"),
    MetricKind.performance: (PerformanceHourly, "p95_load_time_ms"),
}


def iso_hour(value: Any) -> str:
    """Render a bucket timestamp as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC.

    Naive datetimes are taken to already be UTC.
    """
    if not isinstance(value, datetime):
        return str(value)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


class SqlObservationSource(ObservationSource):

    def __init__(self, window_hours: Optional[int] = None):
        self.window_hours = window_hours if window_hours is not None else settings.window_hours

    def _query(self, kind: MetricKind, now: datetime) -> List[Observation]:
        model, value_column = METRIC_MODELS[kind]
        cutoff = now - timedelta(hours=self.window_hours)
        stmt = (
            select(
                model.ts,
                getattr(model, value_column),
                model.referrer,
                model.device_type,
                model.category,
                model.page,
            )
            .where(model.ts >= cutoff)
            .order_by(model.ts.asc())
        )
        with get_db_session() as session:
            rows = session.execute(stmt).all()

        return [
            Observation(
                bucket_start=iso_hour(ts),
                value=float(value if value is not None else 0),
                referrer=referrer,
                device_type=device_type,
                category=category,
                page=page,
            )
            for ts, value, referrer, device_type, category, page in rows
        ]

    async def fetch(self, kind: MetricKind, now: Optional[datetime] = None) -> List[Observation]:
        if not is_initialized():
            raise DataSourceUnavailable("database is not configured")
        if now is None:
            now = datetime.now(timezone.utc)
        try:
            observations = await asyncio.to_thread(self._query, kind, now)
        except SQLAlchemyError as exc:
            raise DataSourceUnavailable(f"query for {kind.value} failed: {exc}") from exc
        log.debug("fetched metric=%s rows=%d window_hours=%d", kind.value, len(observations), self.window_hours)
        return observations
