"""Logging configuration helpers for the sprint orchestrator."""

from __future__ import annotations

import logging
from pathlib import Path

from sprint_orchestrator.planning.models import PlanningStage

_LOGGER_NAME = "sprint_orchestrator"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(stage)s]: %(message)s"
_NO_STAGE = "-"


class PlanningStageFilter(logging.Filter):
    """Stamp every record with the planning stage it was emitted under."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "stage"):
            record.stage = _NO_STAGE
        return True


def stage_extra(stage: PlanningStage) -> dict[str, str]:
    """Return the ``extra`` mapping tagging a record with a planning stage."""
    return {"stage": stage.value}


def log_stage(logger: logging.Logger, stage: PlanningStage) -> None:
    """Record a stage boundary; completion is logged at INFO, the rest at DEBUG."""
    level = logging.INFO if stage is PlanningStage.complete else logging.DEBUG
    logger.log(level, "Planning stage: %s", stage.value, extra=stage_extra(stage))


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def configure_logging(*, log_file: Path, verbose: bool) -> logging.Logger:
    """Route package logs for one CLI invocation into ``log_file``.

    The file is truncated per run. Records carry their planning stage, or
    ``-`` when emitted outside generation.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    _close_handlers(logger)

    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)
    logger.propagate = False
    log_path = log_file.expanduser().resolve()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    handler.setLevel(level)
    handler.addFilter(PlanningStageFilter())
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    return logger


def get_logger() -> logging.Logger:
    """Return the package logger (configured or with null handler)."""
    logger = logging.getLogger(_LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger
