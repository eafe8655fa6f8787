"""Shared structlog logger."""
import logging
import sys
from typing import Optional

from pydantic import ValidationError
import structlog

from arithmetic_calculator.common.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure structlog from the application settings.

    :param Settings settings: Settings to apply, defaults to `get_settings()`
    """
    settings = settings or get_settings()
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level)
        ),
        # Bound to whatever sys.stderr is when the logger is created
        logger_factory=lambda *args: structlog.PrintLogger(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


logger = structlog.get_logger("arithmetic_calculator")

try:
    configure_logging()
except ValidationError as exc:
    # Field defaults, without reading the environment
    configure_logging(Settings.model_construct())
    logger.warning("Invalid ARITHMETIC_* settings, using defaults", error=str(exc))
