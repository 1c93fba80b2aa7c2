"""Logging estructurado para diagnósticos del cliente RPC.

- Todos los logs incluyen timestamp, nivel, logger y mensaje.
- Los campos extra (path, status_code, operation, error) aparecen cuando
  están presentes en el record.
- JSON para pipelines, texto legible para terminal.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("operation", "path", "status_code", "error", "rpc_args")


class JSONFormatter(logging.Formatter):
    """Formatea cada record como un objeto JSON en una sola línea."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Configura el logger `arkrpc` (no el root, para no pisar al host)."""

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    logger = logging.getLogger("arkrpc")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
