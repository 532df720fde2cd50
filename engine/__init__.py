"""
Engine Packages for the Anomaly Insights Engine

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.enums import Direction, MetricKind

__all__ = ["Direction", "MetricKind"]
