"""Logging setup for the flappy_block namespace."""

import logging
import sys
from datetime import datetime


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace("flappy_block.", "")
        return f"{ts} [{record.levelname[0]}] {name}: {record.getMessage()}"


def setup_logging(level: str = "info") -> None:
    """Configure the flappy_block root logger to write to stderr."""
    root = logging.getLogger("flappy_block")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    root.addHandler(console)


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the flappy_block namespace."""
    return logging.getLogger(f"flappy_block.{name}")
