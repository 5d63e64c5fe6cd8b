"""Railmux configuration.

All settings come from the environment. ``Settings.from_environ`` reads
them once at startup so the rest of the program never looks at
``os.environ`` directly.
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

# Default configuration values
DEFAULT_RAILS_ENV = "development"
DEFAULT_LAUNCHER = "tmux-windows"
BUNDLER_COMMAND = "bundle"
BUNDLE_EXEC_DEFAULT = "bundle exec"

# Environment variable -> Settings field
ENV_VARS = {
    "EDITOR": "editor",
    "BUNDLE_EXEC": "bundle_exec",
    "RAILS": "rails",
    "RAKE": "rake",
    "RAILS_ENV": "rails_env",
    "RAILMUX_LAUNCHER": "launcher",
    "RAILMUX_LOG_DIR": "log_dir",
}


@dataclass(frozen=True)
class Settings:
    """Process-scoped configuration values.

    ``None`` means the variable was not set. An empty string is kept as is,
    so ``EDITOR=`` still counts as set.
    """

    editor: Optional[str] = None
    bundle_exec: Optional[str] = None
    rails: Optional[str] = None
    rake: Optional[str] = None
    rails_env: Optional[str] = None
    launcher: str = DEFAULT_LAUNCHER
    log_dir: Optional[str] = None

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from an environment mapping.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            Populated Settings instance
        """
        if environ is None:
            environ = os.environ

        values = {}
        for var, field_name in ENV_VARS.items():
            if var in environ:
                values[field_name] = environ[var]

        # An empty launcher name cannot be executed
        if not values.get("launcher"):
            values.pop("launcher", None)

        return cls(**values)

    def with_overrides(self, **overrides: Optional[str]) -> "Settings":
        """Return a copy with every non-None override applied.

        An empty launcher is ignored, as in ``from_environ``.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        # An empty launcher name cannot be executed
        if changes.get("launcher") == "":
            del changes["launcher"]
        if not changes:
            return self
        return replace(self, **changes)

    def tool_override(self, tool: str) -> Optional[str]:
        """Get the explicit override for a tool ("rails" or "rake")."""
        if tool not in ("rails", "rake"):
            raise ValueError(f"Unknown tool: {tool}")
        return getattr(self, tool)
