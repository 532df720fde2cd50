"""
Test cases for recent-vs-baseline z-score detection, including window boundaries, zero-variance baselines and direction.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import datetime, timedelta, timezone

import pytest

from engine.anomaly.detection import detect, sort_series, split_windows
from engine.enums import Direction, MetricKind
from engine.models import Observation

START = datetime(2026, 3, 1, 0, 0, tzinfo=timezone.utc)
NOISY_BASELINE = [100, 102, 98, 101, 99, 100] * 3


def _series(values, **ctx):
    return [
        Observation(
            bucket_start=(START + timedelta(hours=i)).strftime("%Y-%m-%dT%H:%M:%S.000Z"),
            value=v,
            **ctx,
        )
        for i, v in enumerate(values)
    ]


def test_sort_series_orders_by_timestamp_string():
    obs = _series([1, 2, 3, 4])
    shuffled = [obs[2], obs[0], obs[3], obs[1]]
    assert [o.value for o in sort_series(shuffled)] == [1, 2, 3, 4]


def test_sort_series_crosses_day_boundary():
    obs = _series(list(range(30)))
    assert [o.value for o in sort_series(list(reversed(obs)))] == list(range(30))


def test_split_windows():
    baseline, recent = split_windows(list(range(10)), 6)
    assert baseline == [0, 1, 2, 3]
    assert recent == [4, 5, 6, 7, 8, 9]


@pytest.mark.parametrize("n", [0, 1, 5, 6])
def test_groups_not_longer_than_recent_window_are_skipped(n):
    assert detect(MetricKind.pageviews, _series([1, 1000, 1, 1000, 1, 1000][:n])) is None


def test_seven_points_are_evaluated(monkeypatch):
    # a single baseline point has no variance, so force one to prove eligibility
    monkeypatch.setattr("engine.anomaly.detection.stddev", lambda values: 1.0)
    c = detect(MetricKind.pageviews, _series([10, 50, 50, 50, 50, 50, 50]))
    assert c is not None
    assert c.baseline_mean == 10
    assert c.z_score == pytest.approx(40.0)


def test_zero_variance_baseline_is_skipped():
    # constant baseline, huge recent jump: still not an anomaly
    values = [100] * 18 + [400, 420, 410, 430, 440, 450]
    assert detect(MetricKind.pageviews, _series(values)) is None


def test_large_positive_shift_is_detected():
    values = NOISY_BASELINE + [500, 510, 495, 505, 515, 520]
    c = detect(MetricKind.useractions, _series(values, page="/home"))
    assert c is not None
    assert c.direction == Direction.up
    assert c.z_score >= 2.5
    assert c.baseline_mean == pytest.approx(100.0)
    assert c.recent_avg == pytest.approx(507.5)
    assert c.recent_sum == pytest.approx(3045.0)
    assert c.context.page == "/home"


def test_large_drop_is_detected_as_down():
    values = NOISY_BASELINE + [10, 12, 8, 11, 9, 10]
    c = detect(MetricKind.pageviews, _series(values))
    assert c is not None
    assert c.direction == Direction.down
    assert c.z_score <= -2.5


def test_small_deviation_is_below_threshold():
    values = NOISY_BASELINE + [101, 100, 102, 99, 100, 101]
    assert detect(MetricKind.pageviews, _series(values)) is None


def test_threshold_override(monkeypatch):
    values = NOISY_BASELINE + [103, 103, 103, 103, 103, 103]
    # z = 3 / sqrt(10/6) ~= 2.32
    assert detect(MetricKind.pageviews, _series(values)) is None
    monkeypatch.setattr("config.settings.zscore_threshold", 2.0)
    assert detect(MetricKind.pageviews, _series(values)) is not None


def test_recent_window_override():
    values = NOISY_BASELINE + [500, 500]
    c = detect(MetricKind.pageviews, _series(values), recent_hours=2)
    assert c is not None
    assert c.recent_sum == 1000


def test_input_order_does_not_matter():
    values = NOISY_BASELINE + [500, 510, 495, 505, 515, 520]
    obs = _series(values)
    a = detect(MetricKind.pageviews, obs)
    b = detect(MetricKind.pageviews, list(reversed(obs)))
    assert a == b


def test_context_comes_from_latest_observation():
    obs = _series(NOISY_BASELINE + [500] * 5 + [520], device_type="mobile", referrer="google")
    c = detect(MetricKind.pageviews, obs)
    assert c.context.device_type == "mobile"
    assert c.context.referrer == "google"
    assert c.context.page is None


# baseline mean 100, population std ~1.29
@pytest.mark.parametrize("recent,expected", [
    ([500, 510, 495, 505, 515, 520], Direction.up),
    ([10, 12, 8, 11, 9, 10], Direction.down),
    ([104, 104, 105, 104, 103, 104], Direction.up),
    ([96, 95, 96, 96, 97, 95], Direction.down),
    ([102, 102, 103, 102, 102, 102], None),
    ([98, 98, 98, 98, 98, 98], None),
])
def test_emitted_candidates_satisfy_threshold_and_direction(recent, expected):
    c = detect(MetricKind.performance, _series(NOISY_BASELINE + recent))
    if expected is None:
        assert c is None
        return
    assert c is not None
    assert c.direction == expected
    assert abs(c.z_score) >= 2.5
    assert (c.direction == Direction.up) == (c.z_score >= 0)
