"""Logging setup: colored console output and JSON log files."""
import logging
import sys
from pathlib import Path
from datetime import datetime, timezone
from typing import Any, Dict, Optional
import json

LOGS_DIR = Path(__file__).parent.parent / "logs"


def with_data(**fields: Any) -> Dict[str, Dict[str, Any]]:
    """
    Build the ``extra`` argument for a log call carrying structured fields.

    Usage:
        logger.info("Stream completed", extra=with_data(chunks=3, chars=120))
    """
    return {"extra_data": fields}


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, structured fields under ``data``."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        data = getattr(record, "extra_data", None)
        if data:
            entry["data"] = data
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class ColoredConsoleFormatter(logging.Formatter):
    """Single-line colored output for a terminal."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'
    BOLD = '\033[1m'

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        timestamp = datetime.fromtimestamp(record.created).strftime('%H:%M:%S')
        line = f"{color}{self.BOLD}{record.levelname:<7}{self.RESET} {timestamp} {record.name}: {record.getMessage()}"

        if record.levelno >= logging.ERROR:
            line += f" ({record.filename}:{record.lineno})"
        data = getattr(record, "extra_data", None)
        if data:
            pairs = " ".join(f"{key}={value}" for key, value in data.items())
            line += f"\n  └─ Data: {pairs}"

        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"
        return line


def _file_handler(path: Path, mode: str = "a") -> logging.Handler:
    handler = logging.FileHandler(path, mode=mode, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(StructuredFormatter())
    return handler


def setup_logging(
    log_level: str = "INFO",
    log_to_file: bool = True,
    log_to_console: bool = True,
    logs_dir: Optional[Path] = None
) -> logging.Logger:
    """
    Configure the ``tech_therapy`` logger tree.

    Console output goes to stdout with colors. File output is JSON, one
    dated file per day plus ``latest.log`` which is rewritten on startup.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Whether to write JSON log files
        log_to_console: Whether to log to stdout
        logs_dir: Directory for log files (default: ``logs/`` at the project root)

    Returns:
        The ``tech_therapy`` logger
    """
    logger = logging.getLogger("tech_therapy")
    logger.setLevel(getattr(logging, log_level.upper()))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(ColoredConsoleFormatter())
        logger.addHandler(console_handler)

    if log_to_file:
        logs_dir = Path(logs_dir or LOGS_DIR)
        logs_dir.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_file_handler(logs_dir / f"tech_therapy_{datetime.now():%Y%m%d}.log"))
        logger.addHandler(_file_handler(logs_dir / "latest.log", mode="w"))

    return logger


def get_logger(name: str = "tech_therapy") -> logging.Logger:
    return logging.getLogger(name)
