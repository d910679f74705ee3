"""Observability – structlog configuration for the pipeline's log events."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from aggregator.config.settings import AggregatorSettings


def configure_logging(settings: AggregatorSettings | None = None) -> None:
    """Configure structlog on top of the stdlib root logger.

    Values bound with ``structlog.contextvars`` (``command_type``,
    ``correlation_id`` during ``CommandProcessor.process``) are merged into
    every event. ``settings.log_json`` picks JSON or console rendering.
    Without *settings*, ``AGGREGATOR_*`` variables are read.
    """
    settings = settings or AggregatorSettings.from_env()

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.log_level_number)


__all__ = ["configure_logging"]
