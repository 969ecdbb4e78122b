"""Error types raised by boil.

Everything derives from :class:`BoilError` so the CLI can report domain
failures without catching unrelated exceptions.
"""

from __future__ import annotations

from pathlib import Path


class BoilError(Exception):
    """Base class for all boil errors."""


# --- Configuration / registry ---


class ConfigError(BoilError):
    """The config file could not be read, parsed, or created."""


class ConfigExistsError(ConfigError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Config already exists - {path} (use --force to overwrite)")


class PathExistsError(BoilError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Path already exists - {path}")


class InvalidPathError(BoilError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"{path} - Path is not valid to add as a program")


class ProgramExistsError(BoilError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A program named '{name}' is already registered")


class ProgramNotFoundError(BoilError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No program named '{name}'")


# --- Query parsing ---


class ParseError(BoilError, ValueError):
    """A filter or sort token could not be parsed."""


class MalformedFilter(ParseError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"'{token}' - Input must be in format value:expression:field")


class UnknownField(ParseError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"'{token}' is not a valid option for 'field'")


class UnknownExpression(ParseError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"'{token}' is not a valid option for 'expression'")
