"""Process logging setup: JSON lines by default, plain text on request."""

from __future__ import annotations

import json
import logging

from token_bucket_limiter.config import BucketConfig, default_config

EXTRA_FIELDS = ("outcome", "cost", "tokens")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload)


def _resolve_level(level_name: str) -> int:
    level = getattr(logging, level_name.upper(), logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(config: BucketConfig = default_config) -> None:
    level = _resolve_level(config.log_level)
    if config.log_format.lower() == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler], force=True)
    else:
        logging.basicConfig(level=level, force=True)
