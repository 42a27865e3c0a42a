"""Logging configuration for scrybot with optional structured JSON output."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

# Extras attached to records by the client and the resolve decorator
STRUCTURED_FIELDS = (
    "variant",
    "card_name",
    "url",
    "status_code",
    "execution_time_ms",
    "success",
    "error",
)


class JSONFormatter(logging.Formatter):
    """Custom formatter that outputs structured JSON logs."""

    def format(self, record):
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
        }
        for field in STRUCTURED_FIELDS:
            log_data[field] = getattr(record, field, None)
        log_data["message"] = record.getMessage()

        # Remove None values to keep logs clean
        log_data = {k: v for k, v in log_data.items() if v is not None}

        return json.dumps(log_data, ensure_ascii=False, default=str)


def setup_logging(level: Optional[str] = None, json_output: bool = False):
    """
    Configure the ``scrybot`` logger hierarchy.

    Args:
        level: Level name; defaults to the configured SCRYBOT_LOG_LEVEL
        json_output: Emit one JSON object per line instead of plain text

    Returns:
        The configured ``scrybot`` logger
    """
    if level is None:
        from .config import get_settings

        level = get_settings().log_level

    handler = logging.StreamHandler(sys.stderr)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    logger = logging.getLogger("scrybot")
    logger.setLevel(level)
    # Replace handlers so repeated setup does not duplicate output
    logger.handlers = [handler]
    logger.propagate = False

    return logger
