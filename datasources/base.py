"""
Base contract for observation sources

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from abc import ABC, abstractmethod
from typing import List

from engine.enums import MetricKind
from engine.models import Observation


class ObservationSource(ABC):
    """Supplies the hourly observations of one metric kind over the lookback window.

    An empty list is a valid answer and means the metric has no data.
    """

    @abstractmethod
    async def fetch(self, kind: MetricKind) -> List[Observation]: ...
