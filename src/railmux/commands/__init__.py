"""Railmux command implementations."""
