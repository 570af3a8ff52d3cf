"""Structured logging for envelope materials.

Every logger wraps a stdlib ``logging.Logger`` under ``envelope_materials``,
so nothing is emitted until the embedding application attaches handlers or
calls :func:`configure_logging`.
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from .utils.config import DEFAULT_CONFIG, MaterialsConfig

_ROOT_COMPONENT = "envelope_materials"


def configure_logging(config: MaterialsConfig | None = None, *, level: str | None = None) -> None:
    """Emit JSON lines (``ts``, ``level``, ``component``, ``msg``) on stdout.

    The level comes from ``level`` when given, else from ``config.logging``.
    """

    log_level = level or (config or DEFAULT_CONFIG).logging.normalized_level()
    numeric_level = logging.getLevelName(log_level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        handlers=[logging.StreamHandler(sys.stdout)],
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _component_processor,
            _rename_event_to_msg,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(component: str) -> Any:
    """Return a logger for ``component`` backed by the stdlib logger tree"""
    return structlog.wrap_logger(
        logging.getLogger(f"{_ROOT_COMPONENT}.{component}"),
        wrapper_class=structlog.stdlib.BoundLogger,
        component=component,
    )


def _component_processor(
    logger: logging.Logger, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    if event_dict.get("component") is None:
        event_dict["component"] = getattr(logger, "name", None) or _ROOT_COMPONENT
    return event_dict


def _rename_event_to_msg(
    _logger: logging.Logger, _name: str, event_dict: dict[str, object]
) -> dict[str, object]:
    if "msg" not in event_dict:
        event_dict["msg"] = event_dict.pop("event", "")
    return event_dict


__all__ = ["configure_logging", "get_logger"]
