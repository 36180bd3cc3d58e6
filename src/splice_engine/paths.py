"""Default path and level resolution.

Uses environment variables when available, falls back to conventional
defaults.

Environment variables:
    SPLICE_PLAN — plan file (default: ./splice.yaml)
    SPLICE_LOG_LEVEL — logging level name (default: WARNING)
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_PLAN_NAME = "splice.yaml"
_DEFAULT_LOG_LEVEL = "WARNING"


def plan_path() -> Path:
    """Return the default splice plan path."""
    env = os.environ.get("SPLICE_PLAN")
    if env:
        return Path(env)
    return Path.cwd() / _DEFAULT_PLAN_NAME


def log_level() -> str:
    """Return the configured log level name."""
    return os.environ.get("SPLICE_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()
