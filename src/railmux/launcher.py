"""Hand a resolved plan off to the external session launcher.

The launcher command is called as::

    <launcher> SESSION LABEL1 COMMAND1 ... LABEL9 COMMAND9

It creates (or attaches to) the tmux session and one window per pair.
"""

import os
import subprocess
import sys
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from railmux.logger import RailmuxLogger
from railmux.resolver import LaunchPlan, WindowSpec

# Exit statuses a shell reports for unknown and non-executable commands
COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126


class LauncherNotFoundError(RuntimeError):
    """Raised when the launcher command is required but not on PATH."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"{command} not found on PATH")


def build_command(command: str, session_name: str, windows: Sequence[WindowSpec]) -> list[str]:
    """Build the full argv for the launcher."""
    argv = [command, session_name]
    for window in windows:
        argv.extend((window.label, window.command))
    return argv


class Launcher(ABC):
    """Starts a session from a list of windows and reports the exit status."""

    @abstractmethod
    def launch(self, session_name: str, windows: Sequence[WindowSpec]) -> int:
        """Launch the session and return the exit status."""

    def launch_plan(self, plan: LaunchPlan) -> int:
        return self.launch(plan.session_name, plan.windows)


class ExecLauncher(Launcher):
    """Replace the current process with the launcher command.

    Only returns if the exec fails.
    """

    def __init__(self, command: str, logger: Optional[RailmuxLogger] = None) -> None:
        self.command = command
        self.logger = logger or RailmuxLogger()

    def launch(self, session_name: str, windows: Sequence[WindowSpec]) -> int:
        argv = build_command(self.command, session_name, windows)
        self.logger.debug(f"exec {' '.join(argv)}", argv=argv)
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            os.execvp(self.command, argv)
        except FileNotFoundError:
            self.logger.error(f"{self.command}: command not found", command=self.command)
            return COMMAND_NOT_FOUND
        except PermissionError as e:
            self.logger.error(f"{self.command}: {e.strerror}", command=self.command)
            return COMMAND_NOT_EXECUTABLE
        return 0


class SubprocessLauncher(Launcher):
    """Run the launcher command as a child and forward its exit status."""

    def __init__(self, command: str, logger: Optional[RailmuxLogger] = None) -> None:
        self.command = command
        self.logger = logger or RailmuxLogger()

    def launch(self, session_name: str, windows: Sequence[WindowSpec]) -> int:
        argv = build_command(self.command, session_name, windows)
        self.logger.debug(f"run {' '.join(argv)}", argv=argv)
        try:
            result = subprocess.run(argv, check=False)
        except FileNotFoundError:
            self.logger.error(f"{self.command}: command not found", command=self.command)
            return COMMAND_NOT_FOUND
        except PermissionError as e:
            self.logger.error(f"{self.command}: {e.strerror}", command=self.command)
            return COMMAND_NOT_EXECUTABLE
        return result.returncode


class RecordingLauncher(Launcher):
    """Records launch calls instead of running anything."""

    def __init__(self, exit_code: int = 0) -> None:
        self.exit_code = exit_code
        self.calls: list[tuple[str, tuple[WindowSpec, ...]]] = []

    def launch(self, session_name: str, windows: Sequence[WindowSpec]) -> int:
        self.calls.append((session_name, tuple(windows)))
        return self.exit_code
