"""
Test cases for environment-driven settings.
"""

from config import Settings


def test_defaults_match_detection_policy():
    s = Settings()
    assert s.zscore_threshold == 2.5
    assert s.recent_hours == 6
    assert s.window_hours == 30
    assert s.baseline_hours_label == 24
    assert s.cache_ttl_seconds == 900
    assert s.port == 8080
    assert s.save_insights is False


def test_env_prefix_overrides(monkeypatch):
    monkeypatch.setenv("INSIGHTS_ZSCORE_THRESHOLD", "3.0")
    monkeypatch.setenv("INSIGHTS_SAVE_INSIGHTS", "true")
    monkeypatch.setenv("INSIGHTS_RECENT_HOURS", "4")
    s = Settings()
    assert s.zscore_threshold == 3.0
    assert s.save_insights is True
    assert s.recent_hours == 4
