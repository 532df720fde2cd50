"""
Constants and configuration for the Anomaly Insights Engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Optional

from pydantic_settings import BaseSettings


INSIGHTS_DATABASE_URL = os.getenv("INSIGHTS_DATABASE_URL", os.getenv("DATABASE_URL", ""))
INSIGHTS_REDIS_URL = os.getenv("INSIGHTS_REDIS_URL", "")
INSIGHTS_CACHE_TTL_SECONDS: int = int(os.getenv("INSIGHTS_CACHE_TTL_SECONDS", "900"))

ANOMALIES_CACHE_VERSION = "v1"


class Settings(BaseSettings):
    database_url: Optional[str] = INSIGHTS_DATABASE_URL or None
    redis_url: Optional[str] = INSIGHTS_REDIS_URL or None

    # only write to insight_reports when enabled
    save_insights: bool = False
    cache_ttl_seconds: int = INSIGHTS_CACHE_TTL_SECONDS

    host: str = "0.0.0.0"
    port: int = 8080

    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_pool_timeout: int = 30
    db_pool_recycle: int = 1800

    # detection policy
    window_hours: int = 30
    recent_hours: int = 6
    # descriptive only; the real baseline is whatever precedes the recent window
    baseline_hours_label: int = 24
    zscore_threshold: float = 2.5

    store_redis_retry_cooldown_seconds: float = 10.0
    store_fallback_max_items: int = 10_000

    model_config = {
        "env_prefix": "INSIGHTS_",
        "extra": "ignore",
    }


settings = Settings()
