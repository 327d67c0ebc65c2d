"""
Logging setup for the stateprop CLI.

Every record carries the seed of the run it belongs to, so JSON logs from
several runs can be told apart.

Environment Variables:
    STATEPROP_LOG_LEVEL: Level name - default: WARNING
    STATEPROP_LOG_FORMAT: json or text - default: text
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s (seed=%(seed)s)"
JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s %(seed)s"


def setup_logging() -> None:
    """Route all records to a single stderr handler (stdout carries --json)."""
    level = logging.getLevelName(os.getenv("STATEPROP_LOG_LEVEL", "WARNING").upper())
    if not isinstance(level, int):
        level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    if os.getenv("STATEPROP_LOG_FORMAT", "text").lower() == "json":
        handler.setFormatter(
            JsonFormatter(JSON_FIELDS, rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"})
        )
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%H:%M:%S"))
    handler.addFilter(SeedFilter())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)


def get_logger(name: str, seed: Optional[str] = None) -> logging.LoggerAdapter:
    """Logger bound to the seed of the current run."""
    return logging.LoggerAdapter(logging.getLogger(name), {"seed": seed or "-"})


class SeedFilter(logging.Filter):
    # Engine modules log through plain loggers without a seed
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "seed"):
            record.seed = "-"  # type: ignore
        return True
