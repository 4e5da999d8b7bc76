"""Logging setup for the Roster service."""

import logging

import structlog


def configure_logging(level: str = "INFO", log_format: str = "json") -> None:
    """Configure stdlib logging and structlog.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO")
        log_format: "json" for one JSON object per line, "text" for console output
    """
    level = level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level)
        ),
        cache_logger_on_first_use=True,
    )
