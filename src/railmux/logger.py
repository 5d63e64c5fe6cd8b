"""
Railmux log output

Console: text (human readable)
File: JSON lines (machine readable), only when a log directory is given
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

import click

LEVEL_COLORS = {
    "WARNING": "yellow",
    "ERROR": "red",
}


class RailmuxLogger:
    """
    Logger for railmux

    Console lines go through click.echo, which flushes, so nothing is lost
    when the process is replaced by exec afterwards.
    """

    def __init__(
        self, name: str = "railmux", log_dir: Path | None = None, verbose: bool = False
    ) -> None:
        """
        Args:
            name: Logger name, used as the log file prefix
            log_dir: Directory for JSON log files (default: no file output)
            verbose: Echo DEBUG lines to the console
        """
        self.name = name
        self.verbose = verbose
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

    def _get_log_file(self) -> Path | None:
        """Today's log file path"""
        if self.log_dir is None:
            return None
        today = datetime.now().strftime("%Y%m%d")
        return self.log_dir / f"{self.name}-{today}.log"

    def log(self, level: str, message: str, **kwargs: Any) -> None:
        """
        Write a structured log record

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR)
            message: Log message
            **kwargs: Extra structured fields (file output only)
        """
        now = datetime.now()

        if level != "DEBUG" or self.verbose:
            time_str = now.strftime("%H:%M:%S")
            line = f"{time_str} [{level}] {message}"
            color = LEVEL_COLORS.get(level)
            click.echo(click.style(line, fg=color) if color else line)

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
            f.write(json.dumps(log_entry, ensure_ascii=False) + "\n")

    def debug(self, message: str, **kwargs: Any) -> None:
        self.log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self.log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.log("ERROR", message, **kwargs)
