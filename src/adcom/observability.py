"""Observability: structured logs for validation and normalization runs."""

from __future__ import annotations

import logging
from typing import Any

_LOGGER = logging.getLogger("adcom")


def get_logger() -> logging.Logger:
    return _LOGGER


def configure_logging(level: str = "INFO") -> None:
    """Attach a stderr handler to the package logger (CLI entry points only)."""
    if not _LOGGER.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        _LOGGER.addHandler(handler)
    _LOGGER.setLevel(level)


def log_validation(
    message_type: str,
    errors: int,
    warnings: int,
    latency_ms: float,
) -> None:
    """Emit one summary record per validate call."""
    _LOGGER.info(
        "validation_complete",
        extra={
            "message_type": message_type,
            "errors": errors,
            "warnings": warnings,
            "latency_ms": round(latency_ms, 2),
        },
    )


def log_issue(
    message_type: str,
    path: str,
    rule: str,
    detail: str,
    extra: dict[str, Any] | None = None,
) -> None:
    """Log a WARNING-level issue; processing continues."""
    payload: dict[str, Any] = {
        "message_type": message_type,
        "issue_path": path,
        "issue_rule": rule,
        "issue_detail": detail,
    }
    if extra:
        payload.update(extra)
    _LOGGER.warning("validation_warning", extra=payload)


def log_normalization(message_type: str, filled: int) -> None:
    _LOGGER.debug(
        "normalization_complete",
        extra={"message_type": message_type, "defaults_filled": filled},
    )
