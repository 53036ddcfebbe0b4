"""
Konfiguracja logowania CLI.

Biblioteki (data_model, layout_grid, dialects, validator) logują przez
logging.getLogger(__name__) wyłącznie na poziomie DEBUG; CLI podpina pod
ich loggery jeden RichHandler na stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "codlayout"

# Loggery pakietów projektu konfigurowane przez setup_logging.
PACKAGE_LOGGERS: tuple[str, ...] = (
    LOGGER_NAME,
    "data_model",
    "layout_grid",
    "dialects",
    "validator",
)

_handler: RichHandler | None = None


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """
    Ustawia poziom i handler loggerów projektu.

    Args:
        level: DEBUG / INFO / WARNING / ERROR (nieznany → WARNING).

    Returns:
        logger "codlayout".
    """
    global _handler

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    if _handler is None:
        _handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        _handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    _handler.setLevel(numeric_level)

    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(numeric_level)
        if _handler not in logger.handlers:
            logger.addHandler(_handler)
        # bez propagacji do root loggera
        logger.propagate = False

    return logging.getLogger(LOGGER_NAME)


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger w przestrzeni "codlayout", np. get_logger("commands.parse")."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
