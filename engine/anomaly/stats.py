"""
Basic statistics over numeric sequences used by the anomaly detector.

Empty input is not an error: ``mean`` returns 0 for an empty sequence and
``stddev`` returns 0 for fewer than two values. Callers that care about the
difference between "no data" and "no deviation" must check length first.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def mean(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=float)))


def stddev(values: Sequence[float]) -> float:
    """Population standard deviation (divides by N)."""
    if len(values) < 2:
        return 0.0
    arr = np.asarray(values, dtype=float)
    # a constant series must give exactly 0, not float noise from the mean
    if np.all(arr == arr[0]):
        return 0.0
    return float(np.std(arr, ddof=0))


def total(values: Sequence[float]) -> float:
    return float(np.sum(np.asarray(values, dtype=float)))
