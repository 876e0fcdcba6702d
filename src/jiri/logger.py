"""
jiri log output

Console: text on stderr (human readable, keeps stdout for command output)
File: JSON lines (machine readable), only when a log directory is configured
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

import click

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}

LEVEL_COLORS = {"DEBUG": "blue", "INFO": "green", "WARNING": "yellow", "ERROR": "red"}


class JiriLogger:
    """
    Logger for jiri

    Console: text format on stderr, filtered by ``console_level``
    File: JSON format, every level, one file per day
    """

    def __init__(
        self,
        name: str = "jiri",
        log_dir: Path | None = None,
        console_level: str = "WARNING",
    ) -> None:
        """
        Initialise the logger

        Args:
            name: Logger name
            log_dir: Log directory (None disables file output)
            console_level: Lowest level echoed to the console
        """
        self.name = name
        self.log_dir = log_dir
        self.console_level = console_level
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

    def _get_log_file(self) -> Path | None:
        """Path of today's log file"""
        if self.log_dir is None:
            return None
        today = datetime.now().strftime("%Y%m%d")
        return self.log_dir / f"{self.name}-{today}.log"

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """
        Emit a structured log entry

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR)
            message: Log message
            **kwargs: Additional structured data
        """
        now = datetime.now()

        if LEVELS.get(level, 0) >= LEVELS.get(self.console_level, 30):
            tag = click.style(f"[{level}]", fg=LEVEL_COLORS.get(level))
            click.echo(f"{now.strftime('%H:%M:%S')} {tag} {message}", err=True)

        log_file = self._get_log_file()
        if log_file is None:
            return

        log_entry = {
            "timestamp": now.isoformat(),
            "level": level,
            "message": message,
            **kwargs,
        }
        with open(log_file, "a") as f:
            f.write(json.dumps(log_entry, ensure_ascii=False, default=str) + "\n")

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log at DEBUG level"""
        self.log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log at INFO level"""
        self.log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log at WARNING level"""
        self.log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log at ERROR level"""
        self.log("ERROR", message, **kwargs)
