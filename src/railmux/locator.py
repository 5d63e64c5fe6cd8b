"""Command and executable lookup."""

import os
import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Optional


class Locator(ABC):
    """Answers "can this be run?" questions for the resolver."""

    @abstractmethod
    def is_executable_path(self, path: str) -> bool:
        """Check if a path names an executable file."""

    @abstractmethod
    def is_on_search_path(self, name: str) -> bool:
        """Check if a command name resolves on PATH."""


class SystemLocator(Locator):
    """Locator backed by the real filesystem and PATH."""

    def __init__(self, cwd: Optional[Path] = None) -> None:
        """
        Args:
            cwd: Directory relative paths are resolved against (default: current directory)
        """
        self.cwd = Path(cwd) if cwd is not None else None

    def is_executable_path(self, path: str) -> bool:
        target = Path(path)
        if not target.is_absolute():
            target = (self.cwd or Path.cwd()) / target
        return target.is_file() and os.access(target, os.X_OK)

    def is_on_search_path(self, name: str) -> bool:
        return shutil.which(name) is not None


class FakeLocator(Locator):
    """In-memory locator for tests.

    Args:
        executables: Paths reported as executable files
        commands: Command names reported as present on PATH
    """

    def __init__(self, executables: Iterable[str] = (), commands: Iterable[str] = ()) -> None:
        self.executables = set(executables)
        self.commands = set(commands)

    def is_executable_path(self, path: str) -> bool:
        return path in self.executables

    def is_on_search_path(self, name: str) -> bool:
        return name in self.commands
