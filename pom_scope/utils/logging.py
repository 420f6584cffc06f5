"""Logging utilities for PomScope."""

import logging
import sys
from typing import Any, Dict
from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_loggers: Dict[str, "PomScopeLogger"] = {}


class PomScopeLogger:
    """Logger wrapper writing through a rich console handler."""

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        """Setup rich console handler with custom theme."""
        console = Console(stderr=True, theme=Theme({
            "info": "cyan",
            "warning": "yellow",
            "error": "red",
            "critical": "red bold",
            "debug": "dim",
        }))

        handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            markup=False,
        )

        formatter = logging.Formatter(
            fmt="%(name)s: %(message)s",
            datefmt="[%X]"
        )
        handler.setFormatter(formatter)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()
        self.logger.addHandler(handler)
        self.logger.propagate = False

    def setLevel(self, level: int) -> None:
        """Change the level of the wrapped logger."""
        self.logger.setLevel(level)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log info message."""
        self.logger.info(msg, extra=kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log warning message."""
        self.logger.warning(msg, extra=kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log error message."""
        self.logger.error(msg, extra=kwargs)

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log debug message."""
        self.logger.debug(msg, extra=kwargs)


def setup_logging(level: int = logging.INFO, verbose: bool = False) -> None:
    """Setup logging configuration for PomScope.

    Args:
        level: Logging level
        verbose: Enable verbose logging
    """
    if verbose:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr
    )

    # Loggers created at import time keep their own level
    for logger in _loggers.values():
        logger.setLevel(level)

    logging.getLogger("aiohttp").setLevel(logging.WARNING)


def get_logger(name: str) -> PomScopeLogger:
    """Get a PomScope logger instance.

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    if name not in _loggers:
        _loggers[name] = PomScopeLogger(name)
    return _loggers[name]
