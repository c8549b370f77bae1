"""Minimal in-process admission counters (not suitable for multi-process aggregation)."""

from __future__ import annotations

from threading import Lock
from typing import Dict


class MetricsRecorder:
    def __init__(self) -> None:
        self._lock = Lock()
        self._allowed = 0
        self._rejected = 0
        self._admitted_cost = 0.0

    def record_allowed(self, cost: float) -> None:
        with self._lock:
            self._allowed += 1
            self._admitted_cost += cost

    def incr_rejected(self) -> None:
        with self._lock:
            self._rejected += 1

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            return {
                "allowed": self._allowed,
                "rejected": self._rejected,
                "admitted_cost": self._admitted_cost,
            }

    def reset(self) -> None:
        with self._lock:
            self._allowed = 0
            self._rejected = 0
            self._admitted_cost = 0.0


default_metrics = MetricsRecorder()
