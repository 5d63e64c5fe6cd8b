"""Resolve the session name and window commands for a Rails project.

The window table is fixed. Only the commands vary, depending on the
environment and on what is installed in the project and on PATH.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence

from railmux.config import (
    BUNDLE_EXEC_DEFAULT,
    BUNDLER_COMMAND,
    DEFAULT_RAILS_ENV,
    Settings,
)
from railmux.locator import Locator

# Placeholder command meaning "open an interactive shell"
SHELL = ":"

TOOLS = ("rails", "rake")

WINDOW_LABELS = (
    "quickies",
    "watchers",
    "editors",
    "runners",
    "consoles",
    "databases",
    "servers",
    "loggers",
    "options",
)


@dataclass(frozen=True)
class WindowSpec:
    """A labelled window and the command it runs."""

    label: str
    command: str


@dataclass(frozen=True)
class LaunchPlan:
    """Everything needed to hand a session off to the launcher."""

    session_name: str
    windows: tuple[WindowSpec, ...]
    tools: dict[str, str] = field(default_factory=dict, hash=False)
    environment_name: str = DEFAULT_RAILS_ENV

    def __post_init__(self) -> None:
        labels = tuple(w.label for w in self.windows)
        if labels != WINDOW_LABELS:
            raise ValueError(f"Expected windows {WINDOW_LABELS}, got {labels}")
        for window in self.windows:
            if window.command is None:
                raise ValueError(f"Window {window.label} has no command")

    def arguments(self) -> tuple[str, ...]:
        """Flatten to (session, label1, command1, ..., label9, command9)."""
        args = [self.session_name]
        for window in self.windows:
            args.extend((window.label, window.command))
        return tuple(args)

    def to_dict(self) -> dict[str, Any]:
        return {
            "session": self.session_name,
            "environment": self.environment_name,
            "tools": dict(self.tools),
            "windows": [{"label": w.label, "command": w.command} for w in self.windows],
        }


def _join(*parts: str) -> str:
    """Join command words, skipping empty ones."""
    return " ".join(part for part in parts if part)


def resolve_session_name(argv: Sequence[str], cwd: Path) -> str:
    """Use the first argument, falling back to the directory name."""
    if argv:
        return argv[0]
    return Path(cwd).name


def resolve_bundle_exec(settings: Settings, locator: Locator) -> str:
    """Resolve the prefix used to run tools through bundler.

    Returns:
        BUNDLE_EXEC if set, "bundle exec" if bundler is installed, else ""
    """
    if settings.bundle_exec is not None:
        return settings.bundle_exec
    if locator.is_on_search_path(BUNDLER_COMMAND):
        return BUNDLE_EXEC_DEFAULT
    return ""


def resolve_tool(tool: str, settings: Settings, locator: Locator, bundle_exec: str) -> str:
    """Resolve the command for a tool.

    Priority (highest first):
    1. Environment override (RAILS / RAKE)
    2. Project binstub: bin/{tool}
    3. {bundle_exec} {tool}

    Args:
        tool: Tool name ("rails" or "rake")
        settings: Configuration values
        locator: Lookup used for the binstub check
        bundle_exec: Resolved bundler prefix, may be empty

    Returns:
        The command string
    """
    override = settings.tool_override(tool)
    if override is not None:
        return override

    binstub = f"bin/{tool}"
    if locator.is_executable_path(binstub):
        return binstub

    return _join(bundle_exec, tool)


def build_windows(editor: str, rails: str, environment_name: str) -> tuple[WindowSpec, ...]:
    """Build the fixed window table."""
    commands = {
        "quickies": SHELL,
        "watchers": SHELL,
        "editors": editor,
        "runners": _join(rails, "test"),
        "consoles": _join(rails, "console"),
        "databases": _join(rails, "db"),
        "servers": _join(rails, "server"),
        "loggers": f"tail -f log/{environment_name}.log",
        "options": SHELL,
    }
    return tuple(WindowSpec(label, commands[label]) for label in WINDOW_LABELS)


def resolve(
    argv: Sequence[str],
    settings: Settings,
    locator: Locator,
    cwd: Optional[Path] = None,
) -> LaunchPlan:
    """Resolve a launch plan.

    Args:
        argv: Positional arguments (zero or one session name)
        settings: Configuration read from the environment
        locator: Executable and PATH lookups
        cwd: Working directory (default: current directory)

    Returns:
        LaunchPlan with exactly nine windows
    """
    if cwd is None:
        cwd = Path.cwd()

    session_name = resolve_session_name(argv, cwd)
    editor = settings.editor if settings.editor is not None else ""
    bundle_exec = resolve_bundle_exec(settings, locator)
    tools = {tool: resolve_tool(tool, settings, locator, bundle_exec) for tool in TOOLS}
    environment_name = settings.rails_env if settings.rails_env is not None else DEFAULT_RAILS_ENV

    return LaunchPlan(
        session_name=session_name,
        windows=build_windows(editor, tools["rails"], environment_name),
        tools=tools,
        environment_name=environment_name,
    )
