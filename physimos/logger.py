"""Per-category log files under a log directory."""

from __future__ import annotations

import enum
from pathlib import Path


class LogType(enum.Enum):
    """Log categories, each written to its own file."""

    MODELS = "models.log"
    TEXTURES = "textures.log"

    @property
    def filename(self) -> str:
        return self.value


class Logger:
    """Appends messages to one file per log category."""

    def __init__(self, directory: str | Path = "logs") -> None:
        self.directory = Path(directory)

    def path_for(self, log_type: LogType) -> Path:
        """Return the file that messages of this category go to."""
        if not isinstance(log_type, LogType):
            raise ValueError(f"no matching logging mode: {log_type!r}")
        return self.directory / log_type.filename

    def init(self) -> None:
        """Create the directory and empty every category's file."""
        self.directory.mkdir(parents=True, exist_ok=True)
        for log_type in LogType:
            self.path_for(log_type).write_text("", encoding="utf-8")

    def log(self, log_type: LogType, message: str) -> None:
        """Append one line to the file of the given category."""
        path = self.path_for(log_type)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(f"{message}\n")