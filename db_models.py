"""
Core module implementing `db_models` functionality for the insights engine.
"""
from __future__ import annotations

from datetime import datetime
from sqlalchemy import JSON, DateTime, Float, Index, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class _HourlyBucket:
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ts: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    referrer: Mapped[str | None] = mapped_column(String(512), nullable=True)
    device_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    category: Mapped[str | None] = mapped_column(String(256), nullable=True)
    page: Mapped[str | None] = mapped_column(String(1024), nullable=True)


class PageviewsHourly(_HourlyBucket, Base):
    __tablename__ = "pageviews_hourly"
    count: Mapped[float | None] = mapped_column(Float, nullable=True)

    __table_args__ = (Index("ix_pageviews_hourly_ts", "ts"),)


class UseractionsHourly(_HourlyBucket, Base):
    __tablename__ = "useractions_hourly"
    count: Mapped[float | None] = mapped_column(Float, nullable=True)

    __table_args__ = (Index("ix_useractions_hourly_ts", "ts"),)


class PerformanceHourly(_HourlyBucket, Base):
    __tablename__ = "performance_hourly"
    p95_load_time_ms: Mapped[float | None] = mapped_column(Float, nullable=True)

    __table_args__ = (Index("ix_performance_hourly_ts", "ts"),)


class InsightReport(Base):
    __tablename__ = "insight_reports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    metric: Mapped[str] = mapped_column(String(128), nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    page: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    change: Mapped[str] = mapped_column(String(32), nullable=False)
    possible_cause: Mapped[str] = mapped_column(Text, nullable=False)
    context: Mapped[dict] = mapped_column(JSON, nullable=False)
    score: Mapped[float] = mapped_column(Float, nullable=False)
    recent_hours: Mapped[int] = mapped_column(Integer, nullable=False)
    baseline_hours: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index("ix_insight_reports_created", "created_at"),
        Index("ix_insight_reports_type_created", "type", "created_at"),
    )
