"""Railmux CLI - tmux session launcher for Rails projects."""

import sys
from typing import Optional

import click

from railmux import __version__


@click.command()
@click.version_option(version=__version__, prog_name="railmux")
@click.argument("session", required=False)
@click.option(
    "--launcher",
    "-l",
    default=None,
    help="Session launcher command (default: $RAILMUX_LAUNCHER or tmux-windows)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print the resolved windows instead of launching",
)
@click.option(
    "--format",
    "output_format",
    default="text",
    type=click.Choice(["text", "yaml"]),
    help="Output format for --dry-run (default: text)",
)
@click.option(
    "--wait/--exec",
    default=False,
    help="Wait for the launcher and return its exit status instead of replacing this process",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Abort if the launcher is not on PATH",
)
@click.option(
    "--log-dir",
    default=None,
    type=click.Path(file_okay=False),
    help="Write JSON logs to this directory (default: $RAILMUX_LOG_DIR)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show resolved commands",
)
def cli(
    session: Optional[str],
    launcher: Optional[str],
    dry_run: bool,
    output_format: str,
    wait: bool,
    strict: bool,
    log_dir: Optional[str],
    verbose: bool,
) -> None:
    """Launch a tmux session for a Rails project.

    SESSION defaults to the current directory name. Nine windows are
    opened: quickies, watchers, editors, runners, consoles, databases,
    servers, loggers and options.

    Commands are resolved from (in priority order):
    1. Environment: EDITOR, BUNDLE_EXEC, RAILS, RAKE, RAILS_ENV
    2. Project binstubs: bin/rails, bin/rake
    3. bundle exec, if bundler is installed

    Example:
      railmux blog --dry-run
    """
    from railmux.commands._launch_impl import run_launch

    exit_code = run_launch(
        session=session,
        launcher_command=launcher,
        dry_run=dry_run,
        output_format=output_format,
        wait=wait,
        strict=strict,
        log_dir=log_dir,
        verbose=verbose,
    )
    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
