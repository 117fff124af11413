"""Tests for the randomized request pacing."""

from randomorg.client import rate_limiter


def test_zero_delay_does_not_sleep(monkeypatch):
    slept = []
    monkeypatch.setattr(rate_limiter.time, "sleep", slept.append)
    assert rate_limiter.wait_between_requests(0.0, 0.0) == 0.0
    assert slept == []


def test_delay_within_bounds(monkeypatch):
    slept = []
    monkeypatch.setattr(rate_limiter.time, "sleep", slept.append)
    delay = rate_limiter.wait_between_requests(1.0, 3.0)
    assert 1.0 <= delay <= 3.0
    assert slept == [delay]
