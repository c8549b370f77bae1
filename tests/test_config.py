from token_bucket_limiter.config import (
    BucketConfig,
    _load_capacity,
    _load_float,
    _load_refill_rate,
)


def test_load_capacity_invalid_env(monkeypatch):
    monkeypatch.setenv("TOKEN_BUCKET_CAPACITY", "not-a-number")
    assert _load_capacity() == 10.0  # falls back to default on parse error


def test_load_capacity_valid_env(monkeypatch):
    monkeypatch.setenv("TOKEN_BUCKET_CAPACITY", "25")
    assert _load_capacity() == 25.0


def test_load_refill_rate_valid_env(monkeypatch):
    monkeypatch.setenv("TOKEN_BUCKET_REFILL_RATE", "0.5")
    assert _load_refill_rate() == 0.5


def test_load_float_empty_env_uses_default(monkeypatch):
    monkeypatch.setenv("SOME_RATE", "")
    assert _load_float("SOME_RATE", 3.0) == 3.0


def test_bucket_config_overrides():
    cfg = BucketConfig(capacity=100, refill_rate=20, log_format="plain")
    assert cfg.capacity == 100
    assert cfg.refill_rate == 20
    assert cfg.log_format == "plain"
