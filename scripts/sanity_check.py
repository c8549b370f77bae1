"""Minimal sanity check: hammer one bucket from several threads and print the outcome."""

from __future__ import annotations

import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from token_bucket_limiter import TokenBucket  # noqa: E402
from token_bucket_limiter.config import default_config  # noqa: E402
from token_bucket_limiter.logging_config import configure_logging  # noqa: E402
from token_bucket_limiter.metrics import default_metrics  # noqa: E402

# Number of worker threads and requests each one sends; override via env.
WORKERS = int(os.getenv("SANITY_WORKERS", "8"))
REQUESTS_PER_WORKER = int(os.getenv("SANITY_REQUESTS", "50"))
# Pause between a worker's requests, in seconds.
PAUSE = float(os.getenv("SANITY_PAUSE", "0.01"))


def worker(bucket: TokenBucket) -> int:
    admitted = 0
    for _ in range(REQUESTS_PER_WORKER):
        if bucket.allow_request(1):
            admitted += 1
        time.sleep(PAUSE)
    return admitted


def main() -> None:
    configure_logging(default_config)
    bucket = TokenBucket.from_config(default_config, metrics=default_metrics)
    print("Bucket:", bucket)

    start = time.monotonic()
    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        admitted = sum(pool.map(worker, [bucket] * WORKERS))
    elapsed = time.monotonic() - start

    print(f"Elapsed: {elapsed:.2f}s")
    print("Admitted:", admitted, "of", WORKERS * REQUESTS_PER_WORKER)
    print("Upper bound:", round(bucket.capacity + elapsed * bucket.refill_rate, 2))
    print("Metrics:", default_metrics.snapshot())
    print("Bucket after run:", bucket)


if __name__ == "__main__":
    main()
