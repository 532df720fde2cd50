"""
Cache key construction for the key-value store.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from config import ANOMALIES_CACHE_VERSION


def anomalies(version: str = ANOMALIES_CACHE_VERSION) -> str:
    return f"ie:anomalies:{version}"
