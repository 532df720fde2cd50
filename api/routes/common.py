"""
Shared dependencies for API route modules.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional

from datasources.base import ObservationSource
from datasources.sql import SqlObservationSource

_source: Optional[ObservationSource] = None


def get_source() -> ObservationSource:
    global _source
    if _source is None:
        _source = SqlObservationSource()
    return _source


def reset_source() -> None:
    global _source
    _source = None
