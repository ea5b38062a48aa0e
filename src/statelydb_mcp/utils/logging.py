"""
Logging configuration for the StatelyDB MCP server.

All log output goes to stderr (stdout carries the MCP protocol) and,
optionally, to a log file. JSON output is available through python-json-logger.
"""

import logging
import logging.config
from pathlib import Path
from typing import Any

from pythonjsonlogger.json import JsonFormatter

STANDARD_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
STRUCTURED_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(name: str | None = None, level: str | None = None) -> logging.Logger:
    """Get a module logger.

    Handlers are installed once by :func:`configure_root_logging`; module
    loggers only propagate to the ``statelydb_mcp`` logger.

    Args:
        name: Logger name (defaults to this module)
        level: Optional level override for this logger

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name or __name__)
    if level:
        logger.setLevel(getattr(logging, level.upper()))
    return logger


def build_logging_config(
    level: str = "INFO",
    structured: bool = False,
    log_file: Path | None = None
) -> dict[str, Any]:
    """Build a ``dictConfig`` mapping for the application."""
    formatter = "structured" if structured else "standard"
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": STANDARD_FORMAT,
                "datefmt": DATE_FORMAT
            },
            "structured": {
                "()": JsonFormatter,
                "fmt": STRUCTURED_FORMAT,
                "datefmt": DATE_FORMAT
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": formatter,
                "stream": "ext://sys.stderr"
            }
        },
        "root": {
            "level": level,
            "handlers": ["console"]
        },
        "loggers": {
            "statelydb_mcp": {
                "level": level,
                "handlers": ["console"],
                "propagate": False
            }
        }
    }

    if log_file:
        config["handlers"]["file"] = {
            "class": "logging.FileHandler",
            "level": level,
            "formatter": formatter,
            "filename": str(log_file)
        }
        config["root"]["handlers"].append("file")
        config["loggers"]["statelydb_mcp"]["handlers"].append("file")

    return config


def configure_root_logging(
    level: str = "INFO",
    structured: bool = False,
    log_file: Path | None = None
) -> None:
    """Configure root logging for the entire application.

    Args:
        level: Root logging level
        structured: Enable JSON structured logging
        log_file: Optional log file path
    """
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(level.upper(), structured, log_file))
