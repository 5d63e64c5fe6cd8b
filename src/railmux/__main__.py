"""Allow running railmux as ``python -m railmux``."""

from railmux.cli import cli

if __name__ == "__main__":
    cli()
