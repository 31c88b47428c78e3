"""
Logging configuration for the application.

``setup_logging`` installs a single console handler on the root logger
(plus a file handler when ``LOG_FILE`` is set) through
``logging.config.dictConfig``.  Application loggers such as the
endpoint and service loggers propagate to the root; Uvicorn keeps its
own handlers.  Calling it again once the root logger has handlers does
nothing, so tests and repeated ``create_app`` calls are safe.
"""

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional


def _resolve_level(level: str) -> int:
    """Map a level name to its number; unknown names fall back to INFO."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logging for the server.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.
    logfile : Optional[str]
        File that receives a copy of the console output.  Relative
        paths are resolved against the current working directory.
    """
    if logging.getLogger().handlers:
        return

    handlers: Dict[str, Dict[str, Any]] = {
        "console": {"class": "logging.StreamHandler", "formatter": "server"},
    }
    if logfile:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "server",
            "filename": str(Path(logfile).resolve()),
            "encoding": "utf-8",
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "server": {
                    "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": handlers,
            "root": {"level": _resolve_level(level), "handlers": list(handlers)},
        }
    )
