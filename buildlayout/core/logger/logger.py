"""Logging configuration driven by LoggingSettings.

Library modules only ask for named loggers; the root logger is configured by
the CLI through setup_logging. Without it, warnings still reach stderr through
the logging module's last-resort handler.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from buildlayout.core.config.settings import LoggingSettings, get_settings

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handlers installed by setup_logging, replaced on the next call
_installed: list[logging.Handler] = []


def _console_handler(settings: LoggingSettings) -> logging.Handler:
    """Create the stderr handler, Rich or plain."""
    if settings.use_rich:
        return RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(settings.format))
    return handler


def setup_logging(settings: LoggingSettings | None = None, verbose: bool = False) -> None:
    """Configure the root logger.

    Handlers from a previous call are replaced, so calling it again (e.g.
    after a configuration file has been read) takes the new settings.
    Handlers installed by others are left in place.

    Args:
        settings: Logging settings. Uses global settings if not provided.
        verbose: Log at DEBUG regardless of the configured level.
    """
    if settings is None:
        settings = get_settings().logging
    level = logging.DEBUG if verbose else getattr(logging, settings.level)

    root_logger = logging.getLogger()
    while _installed:
        handler = _installed.pop()
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(level)

    _installed.append(_console_handler(settings))

    if settings.file:
        settings.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        _installed.append(file_handler)

    for handler in _installed:
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger by name (typically __name__)."""
    return logging.getLogger(name)
