"""
Configuration helpers for token buckets.

Default bucket parameters and logging settings are read from the environment so
a process can be tuned without code changes. Malformed numeric values fall back
to the built-in defaults rather than failing at import time; positivity is
checked later, when a bucket is built.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

CAPACITY_ENV_VAR = "TOKEN_BUCKET_CAPACITY"
REFILL_RATE_ENV_VAR = "TOKEN_BUCKET_REFILL_RATE"

FALLBACK_CAPACITY = 10.0
FALLBACK_REFILL_RATE = 1.0


def _load_float(env_var: str, default: float) -> float:
    raw_value = os.getenv(env_var)
    if raw_value:
        try:
            return float(raw_value)
        except ValueError:
            return default
    return default


def _load_capacity() -> float:
    return _load_float(CAPACITY_ENV_VAR, FALLBACK_CAPACITY)


def _load_refill_rate() -> float:
    return _load_float(REFILL_RATE_ENV_VAR, FALLBACK_REFILL_RATE)


DEFAULT_CAPACITY = _load_capacity()
DEFAULT_REFILL_RATE = _load_refill_rate()
LOG_LEVEL = os.getenv("TOKEN_BUCKET_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("TOKEN_BUCKET_LOG_FORMAT", "json")  # json or plain


@dataclass(slots=True)
class BucketConfig:
    """Parameters for one token bucket plus process logging settings."""

    capacity: float = DEFAULT_CAPACITY
    refill_rate: float = DEFAULT_REFILL_RATE
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT


default_config = BucketConfig()
