"""Logging setup for applications that embed the client.

The library itself only creates module loggers under ``bitvavo_api`` and
never installs handlers. An application (the ``bitvavo`` CLI, for one)
calls ``log_manager.configure(settings)`` once; after that every record
under the package goes to stderr and to ``<log_dir>/bitvavo_api.log``,
and ``log_manager.component(name)`` additionally mirrors one component's
records into ``<log_dir>/<name>.log``.
"""

import logging
import sys
from pathlib import Path

from bitvavo_api.config import Settings

PACKAGE_LOGGER = "bitvavo_api"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogManager:
    """Owns the handlers attached to the package logger tree."""

    def __init__(self) -> None:
        self._handlers: list[tuple[logging.Logger, logging.Handler]] = []
        self._components: dict[str, logging.Logger] = {}
        self._log_dir: Path | None = None
        self._level = logging.INFO
        self._formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    @property
    def configured(self) -> bool:
        return self._log_dir is not None

    def configure(self, settings: Settings) -> logging.Logger:
        """Attach console and file handlers to the package logger.

        Calling it again replaces the handlers from the previous call.

        Returns:
            The package logger
        """
        self.reset()
        self._log_dir = settings.log_dir
        self._level = getattr(logging, settings.log_level.upper())
        self._log_dir.mkdir(parents=True, exist_ok=True)

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(self._level)
        self._attach(package_logger, logging.StreamHandler(sys.stderr))
        self._attach(
            package_logger,
            logging.FileHandler(self._log_dir / f"{PACKAGE_LOGGER}.log", encoding="utf-8"),
        )
        return package_logger

    def component(self, name: str) -> logging.Logger:
        """Logger for ``bitvavo_api.<name>`` with its own log file.

        Records still propagate to the package handlers, so they reach the
        console and the combined log exactly once. Before ``configure`` the
        plain module logger is returned.
        """
        if name in self._components:
            return self._components[name]

        logger = logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
        if self._log_dir is None:
            return logger

        self._attach(logger, logging.FileHandler(self._log_dir / f"{name}.log", encoding="utf-8"))
        self._components[name] = logger
        return logger

    def reset(self) -> None:
        """Detach and close every handler this manager installed."""
        for logger, handler in self._handlers:
            logger.removeHandler(handler)
            handler.close()
        self._handlers.clear()
        self._components.clear()
        self._log_dir = None

    def _attach(self, logger: logging.Logger, handler: logging.Handler) -> None:
        handler.setFormatter(self._formatter)
        handler.setLevel(self._level)
        logger.addHandler(handler)
        self._handlers.append((logger, handler))


log_manager = LogManager()
