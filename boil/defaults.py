"""Default locations, overridable through the environment."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_ENV = "BOIL_DEF_CONFIG"
PROJ_PATH_ENV = "BOIL_PROJ_PATH"


def default_config_path() -> Path:
    """``$BOIL_DEF_CONFIG`` or ``~/.boil/config.yaml``."""
    env = os.environ.get(CONFIG_ENV)
    if env:
        return Path(env)
    return Path.home() / ".boil" / "config.yaml"


def default_proj_path() -> Path:
    """``$BOIL_PROJ_PATH`` or ``~/dev``."""
    env = os.environ.get(PROJ_PATH_ENV)
    if env:
        return Path(env)
    return Path.home() / "dev"
