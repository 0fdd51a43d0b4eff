from datetime import datetime, timedelta, timezone

from app.utils.rate_limiter import RateLimiter


def test_blocks_after_max_attempts():
    limiter = RateLimiter(max_attempts=2, window_seconds=60)

    assert limiter.is_allowed("10.0.0.1")
    assert limiter.is_allowed("10.0.0.1")
    assert not limiter.is_allowed("10.0.0.1")
    assert 0 < limiter.get_remaining_time("10.0.0.1") <= 60
    assert limiter.is_allowed("10.0.0.2")


def test_expired_identifiers_are_forgotten():
    limiter = RateLimiter(max_attempts=1, window_seconds=60)
    limiter.attempts["10.0.0.1"] = [datetime.now(timezone.utc) - timedelta(seconds=120)]

    assert limiter.get_remaining_time("10.0.0.1") == 0
    assert "10.0.0.1" not in limiter.attempts

    assert limiter.is_allowed("10.0.0.1")
    assert len(limiter.attempts["10.0.0.1"]) == 1


def test_lookup_of_unknown_identifier_does_not_add_entry():
    limiter = RateLimiter(max_attempts=1, window_seconds=60)

    assert limiter.get_remaining_time("10.0.0.9") == 0
    assert limiter.attempts == {}


def test_reset():
    limiter = RateLimiter(max_attempts=1, window_seconds=60)
    limiter.is_allowed("10.0.0.1")
    limiter.is_allowed("10.0.0.2")

    limiter.reset("10.0.0.1")
    assert list(limiter.attempts) == ["10.0.0.2"]

    limiter.reset()
    assert limiter.attempts == {}
