"""
In-process token bucket rate limiter.

A ``TokenBucket`` admits or rejects requests for one client. Mapping client keys
to buckets and storing per-rule parameters is left to the caller. See DESIGN.md
for details.
"""

from token_bucket_limiter.rate_limiter import Clock, InvalidConfiguration, TokenBucket

__all__ = ["Clock", "InvalidConfiguration", "TokenBucket"]
