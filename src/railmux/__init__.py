"""Railmux - tmux session launcher for Rails projects."""

__version__ = "0.1.0"
