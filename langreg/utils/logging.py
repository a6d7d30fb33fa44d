"""Logging helpers for langreg tools."""

import logging
import sys

DEFAULT_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO, format: str | None = None) -> None:
    """
    Configure the root logger once, leaving existing handlers alone.
    Args:
        level: Logging level or its name, e.g. "DEBUG".
        format: Optional record format, defaults to DEFAULT_FORMAT.
    """
    if logging.getLogger().handlers:
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logging.basicConfig(
        level=level,
        format=format or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
