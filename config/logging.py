"""Structlog configuration shared by the web process and management commands."""

import logging
import sys

import structlog


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure structlog on top of the standard library logging module.

    Console output is pretty-printed in development. With ``json_output``
    every record is rendered as a single JSON object, which is what log
    collectors expect in production.

    Records emitted through plain ``logging`` (Django, DRF) go through the
    same processor chain, so the output stays uniform.

    Args:
        level: Root log level name (DEBUG, INFO, WARNING, ...).
        json_output: Render JSON instead of the coloured console format.
    """
    log_level = getattr(logging, str(level).upper(), logging.INFO)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if json_output:
        renderer = structlog.processors.JSONRenderer()
        final_processors = [structlog.processors.format_exc_info, renderer]
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        final_processors = [renderer]

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *final_processors,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)

    # The API exception handler logs every 4xx/5xx; django.request would repeat them
    logging.getLogger("django.request").setLevel(logging.CRITICAL)
