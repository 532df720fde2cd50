"""
Test cases for metric kind and direction enums.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.enums import Direction, MetricKind


def test_metric_kinds_are_a_closed_set():
    assert [k.value for k in MetricKind] == ["pageviews", "useractions", "performance"]


def test_metric_labels_and_semantics():
    assert MetricKind.pageviews.label == "Page Views"
    assert MetricKind.useractions.label == "User Actions"
    assert MetricKind.performance.label == "Page Load Time (p95)"
    assert MetricKind.performance.is_latency
    assert not MetricKind.pageviews.is_latency


def test_direction_from_z():
    assert Direction.from_z(0.0) == Direction.up
    assert Direction.from_z(3.1) == Direction.up
    assert Direction.from_z(-2.5) == Direction.down
    assert Direction.up.word == "increase"
    assert Direction.down.word == "drop"
