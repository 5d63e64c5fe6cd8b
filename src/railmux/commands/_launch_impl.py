"""Implementation of the railmux launch command."""

from pathlib import Path
from typing import Mapping, Optional

import click
import yaml

from railmux.config import Settings
from railmux.launcher import (
    COMMAND_NOT_FOUND,
    ExecLauncher,
    Launcher,
    LauncherNotFoundError,
    SubprocessLauncher,
)
from railmux.locator import Locator, SystemLocator
from railmux.logger import RailmuxLogger
from railmux.resolver import SHELL, LaunchPlan, resolve

OUTPUT_FORMATS = ("text", "yaml")


def run_launch(
    session: Optional[str] = None,
    launcher_command: Optional[str] = None,
    dry_run: bool = False,
    output_format: str = "text",
    wait: bool = False,
    strict: bool = False,
    log_dir: Optional[str] = None,
    verbose: bool = False,
    environ: Optional[Mapping[str, str]] = None,
    locator: Optional[Locator] = None,
    launcher: Optional[Launcher] = None,
    cwd: Optional[Path] = None,
) -> int:
    """Run the launch command implementation.

    Args:
        session: Session name. Defaults to the current directory name.
        launcher_command: Launcher command, overriding RAILMUX_LAUNCHER.
        dry_run: Print the plan instead of launching.
        output_format: "text" or "yaml" for --dry-run output.
        wait: Run the launcher as a child instead of exec'ing it.
        strict: Abort when the launcher is not on PATH.
        log_dir: Directory for JSON log files, overriding RAILMUX_LOG_DIR.
        verbose: Echo debug lines.
        environ: Environment mapping (default: os.environ).
        locator: Executable lookup (default: SystemLocator).
        launcher: Launcher to use (default: built from wait and launcher_command).
        cwd: Working directory (default: current directory).

    Returns:
        Exit status to terminate with.
    """
    if cwd is None:
        cwd = Path.cwd()

    settings = Settings.from_environ(environ).with_overrides(
        launcher=launcher_command, log_dir=log_dir
    )
    logger = RailmuxLogger(log_dir=settings.log_dir, verbose=verbose)
    if locator is None:
        locator = SystemLocator(cwd)

    # Check prerequisites
    try:
        _check_launcher(settings.launcher, locator, logger, strict=strict)
    except LauncherNotFoundError as e:
        click.echo(click.style(f"Error: {e}", fg="red"))
        click.echo(f"Install {e.command} or point RAILMUX_LAUNCHER at it")
        return COMMAND_NOT_FOUND

    argv = [session] if session is not None else []
    plan = resolve(argv, settings, locator, cwd)
    logger.debug(
        f"Resolved rails={plan.tools['rails']!r} rake={plan.tools['rake']!r} "
        f"environment={plan.environment_name!r}",
        session=plan.session_name,
        tools=plan.tools,
    )

    if dry_run:
        click.echo(format_plan(plan, output_format), nl=False)
        return 0

    if launcher is None:
        launcher_cls = SubprocessLauncher if wait else ExecLauncher
        launcher = launcher_cls(settings.launcher, logger=logger)

    logger.info(f"Launching session '{plan.session_name}'", session=plan.session_name)
    exit_code = launcher.launch_plan(plan)
    if exit_code != 0:
        logger.debug(f"{settings.launcher} exited with status {exit_code}", exit_code=exit_code)
    return exit_code


def _check_launcher(
    command: str, locator: Locator, logger: RailmuxLogger, strict: bool = False
) -> bool:
    """Check if the launcher command is on PATH.

    Without ``strict`` a missing launcher only prints a notice and the
    launch still goes ahead.

    Raises:
        LauncherNotFoundError: If the launcher is missing and ``strict`` is set
    """
    if locator.is_on_search_path(command):
        return True
    if strict:
        raise LauncherNotFoundError(command)
    logger.warning(f"{command} not found on PATH", command=command)
    return False


def format_plan(plan: LaunchPlan, output_format: str = "text") -> str:
    """Render a plan for --dry-run output."""
    if output_format == "yaml":
        return yaml.safe_dump(plan.to_dict(), default_flow_style=False, sort_keys=False)
    if output_format != "text":
        raise ValueError(f"Invalid format: {output_format}. Must be one of {OUTPUT_FORMATS}")

    width = max(len(w.label) for w in plan.windows)
    lines = [f"Session: {plan.session_name}"]
    for index, window in enumerate(plan.windows, start=1):
        command = window.command if window.command not in ("", SHELL) else "(shell)"
        lines.append(f"  {index}. {window.label.ljust(width)}  {command}")
    return "\n".join(lines) + "\n"
