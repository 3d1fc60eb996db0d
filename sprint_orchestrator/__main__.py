"""Module entrypoint for python -m sprint_orchestrator."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

from sprint_orchestrator.cli import app


class JsonLogFormatter(logging.Formatter):
    """Format log records as JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        """Serialize a log record in JSON format."""
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        stage = getattr(record, "stage", None)
        if stage:
            payload["stage"] = stage
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _configure_json_logging() -> None:
    """Configure root logger to use JSON formatter when module is invoked directly."""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(JsonLogFormatter())
        root.addHandler(handler)
        root.setLevel(logging.INFO)


if __name__ == "__main__":
    _configure_json_logging()
    app(prog_name="sprint-orchestrator")
