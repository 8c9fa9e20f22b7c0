# leadimage/logging_setup.py
# Responsibility: Process-wide logging configuration.

import logging

from leadimage.config.settings import settings


def configure_logging(level: str = "") -> None:
    level_name = (level or settings.LOGGING.LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=settings.LOGGING.FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
