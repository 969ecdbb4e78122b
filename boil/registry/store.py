"""YAML-backed config store.

The whole registry lives in one YAML document:

    defaults:
      proj_path: /home/me/dev
    temp:
      path: /tmp/boil3.py
    programs:
      my-script: {path: ..., project: false, prog_type: Python, tags: [fun]}
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from boil.defaults import default_config_path, default_proj_path
from boil.errors import ConfigError, ConfigExistsError
from boil.registry.models import Config, Defaults, Program, Temp

logger = logging.getLogger(__name__)


class ConfigStore:
    """Reads and writes the registry config file."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path is not None else default_config_path()

    def exists(self) -> bool:
        return self.path.exists()

    def init(self, proj_path: Path | None = None, force: bool = False) -> Config:
        """Create a fresh, empty config file."""
        if self.exists() and not force:
            raise ConfigExistsError(self.path)
        config = Config(defaults=Defaults(proj_path=proj_path or default_proj_path()))
        self.save(config)
        logger.info("Initialized config at %s", self.path)
        return config

    def load(self) -> Config:
        """Load the config. A missing file yields an empty config."""
        if not self.exists():
            logger.debug("No config at %s, starting empty", self.path)
            return Config(defaults=Defaults(proj_path=default_proj_path()))

        try:
            with open(self.path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Unable to read config {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config {self.path} is not a mapping")

        try:
            return _dict_to_config(data)
        except (KeyError, TypeError, AttributeError) as e:
            raise ConfigError(f"Malformed config {self.path}: {e}") from e

    def save(self, config: Config) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                yaml.safe_dump(_config_to_dict(config), f, sort_keys=False)
        except OSError as e:
            raise ConfigError(f"Unable to write config {self.path}: {e}") from e
        logger.debug("Wrote %d programs to %s", len(config.programs), self.path)


def _config_to_dict(config: Config) -> dict:
    data: dict = {"defaults": {"proj_path": str(config.defaults.proj_path)}}
    if config.temp is not None:
        data["temp"] = {"path": str(config.temp.path)}
    data["programs"] = {name: p.to_dict() for name, p in config.programs.items()}
    return data


def _dict_to_config(data: dict) -> Config:
    defaults = data.get("defaults") or {}
    temp = data.get("temp")
    programs = data.get("programs") or {}
    return Config(
        defaults=Defaults(proj_path=Path(defaults.get("proj_path") or default_proj_path())),
        programs={str(name): Program.from_dict(str(name), p) for name, p in programs.items()},
        temp=Temp(path=Path(temp["path"])) if temp else None,
    )
