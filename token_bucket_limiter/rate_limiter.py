"""Thread-safe token bucket used to admit or reject a single client's requests."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from token_bucket_limiter.config import BucketConfig
from token_bucket_limiter.metrics import MetricsRecorder

logger = logging.getLogger(__name__)

# Zero-argument callable returning monotonic seconds.
Clock = Callable[[], float]


class InvalidConfiguration(ValueError):
    """Raised when a bucket is built with a non-positive capacity or refill rate."""

    def __init__(self, message: str, *, capacity: float, refill_rate: float) -> None:
        super().__init__(message)
        self.capacity = capacity
        self.refill_rate = refill_rate


class TokenBucket:
    """
    Token bucket that refills lazily on every call.

    The bucket starts full. Each ``allow_request`` call first adds
    ``elapsed * refill_rate`` tokens (capped at ``capacity``) and then admits the
    request only if strictly more than ``cost`` tokens are available.
    """

    def __init__(
        self,
        capacity: float,
        refill_rate: float,
        *,
        clock: Clock = time.monotonic,
        metrics: Optional[MetricsRecorder] = None,
    ) -> None:
        # `not x > 0` also rejects NaN.
        if not capacity > 0:
            raise InvalidConfiguration(
                f"capacity must be positive, got {capacity!r}",
                capacity=capacity,
                refill_rate=refill_rate,
            )
        if not refill_rate > 0:
            raise InvalidConfiguration(
                f"refill_rate must be positive, got {refill_rate!r}",
                capacity=capacity,
                refill_rate=refill_rate,
            )
        self._capacity = float(capacity)
        self._refill_rate = float(refill_rate)
        self._clock = clock
        self._metrics = metrics
        self._tokens = self._capacity
        self._last_refill = clock()
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: BucketConfig, **kwargs) -> "TokenBucket":
        return cls(config.capacity, config.refill_rate, **kwargs)

    @property
    def capacity(self) -> float:
        return self._capacity

    @property
    def refill_rate(self) -> float:
        return self._refill_rate

    @property
    def tokens(self) -> float:
        """Token level as of the last refill; does not advance the clock."""
        with self._lock:
            return self._tokens

    def allow_request(self, cost: int = 1) -> bool:
        with self._lock:
            self._refill()
            if not cost > 0:
                outcome = "non_positive_cost"
            elif self._tokens > cost:
                self._tokens -= cost
                outcome = "allowed"
            else:
                outcome = "rejected"
            tokens_left = self._tokens
        allowed = outcome == "allowed"
        if self._metrics is not None:
            if allowed:
                self._metrics.record_allowed(cost)
            else:
                self._metrics.incr_rejected()
        if outcome == "non_positive_cost":
            logger.warning("outcome=rejected reason=non_positive_cost cost=%r", cost)
        else:
            logger.debug(
                "outcome=%s cost=%s tokens=%.3f",
                outcome,
                cost,
                tokens_left,
                extra={"outcome": outcome, "cost": cost, "tokens": tokens_left},
            )
        return allowed

    def _refill(self) -> None:
        # Caller holds self._lock. A clock that steps backwards adds nothing.
        now = self._clock()
        elapsed = max(0.0, now - self._last_refill)
        self._tokens = min(self._tokens + elapsed * self._refill_rate, self._capacity)
        self._last_refill = now

    def __repr__(self) -> str:
        return (
            f"TokenBucket(capacity={self._capacity!r}, refill_rate={self._refill_rate!r}, "
            f"tokens={self._tokens!r})"
        )
