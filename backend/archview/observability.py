"""Logging setup for hosts embedding the view engine.

The engine only writes to ``archview.*`` module loggers and configures
nothing on import. A host calls ``setup_logging`` once at startup; calling
it again replaces the handler it installed earlier instead of stacking
another one.
"""

import json
import logging
from datetime import datetime, timezone

from archview.config import LOG_FORMAT, LOG_LEVEL

ROOT_LOGGER = "archview"

# Fields views and the model pass through ``extra=``
VIEW_FIELDS = ("view_key", "element_id", "relationship_id", "added", "pruned")


class JSONFormatter(logging.Formatter):
    """One JSON object per record, carrying any view fields present."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in VIEW_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _ArchviewHandler(logging.StreamHandler):
    """Marker type so repeated setup can find its own handler."""


def setup_logging(level: str = LOG_LEVEL, fmt: str = LOG_FORMAT) -> logging.Handler:
    logger = logging.getLogger(ROOT_LOGGER)
    for existing in [h for h in logger.handlers if isinstance(h, _ArchviewHandler)]:
        logger.removeHandler(existing)

    handler = _ArchviewHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(view_key)s] - %(message)s",
            defaults={"view_key": "-"},
        ))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
