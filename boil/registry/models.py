"""Registry data models — programs and their types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class ProgType(Enum):
    """The kind of program being tracked."""

    PYTHON = "Python"
    JAVASCRIPT = "JavaScript"
    RUST = "Rust"
    BASH = "Bash"

    @property
    def label(self) -> str:
        return self.value

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @property
    def shebang(self) -> str:
        return _SHEBANGS.get(self, "")

    @classmethod
    def parse(cls, text: str | None) -> ProgType:
        """Resolve a user supplied type name. Unknown names fall back to Bash."""
        if text is None:
            return cls.BASH
        try:
            return cls(text)
        except ValueError:
            return _ALIASES.get(text.lower(), cls.BASH)

    @classmethod
    def from_path(cls, path: Path) -> ProgType:
        """Infer the type from a file extension."""
        return _SUFFIXES.get(path.suffix.lower(), cls.BASH)


_EXTENSIONS = {
    ProgType.PYTHON: ".py",
    ProgType.JAVASCRIPT: ".js",
    ProgType.RUST: ".rs",
    ProgType.BASH: ".sh",
}

_SHEBANGS = {
    ProgType.PYTHON: "#!/usr/bin/python",
    ProgType.BASH: "#!/bin/bash",
}

_ALIASES = {
    "py": ProgType.PYTHON,
    "python": ProgType.PYTHON,
    "js": ProgType.JAVASCRIPT,
    "javascript": ProgType.JAVASCRIPT,
    "rs": ProgType.RUST,
    "rust": ProgType.RUST,
    "sh": ProgType.BASH,
    "bash": ProgType.BASH,
}

_SUFFIXES = {
    ".py": ProgType.PYTHON,
    ".js": ProgType.JAVASCRIPT,
    ".mjs": ProgType.JAVASCRIPT,
    ".rs": ProgType.RUST,
    ".sh": ProgType.BASH,
    ".bash": ProgType.BASH,
}


@dataclass
class Program:
    """A single script or project tracked by boil."""

    name: str
    path: Path
    project: bool = False
    prog_type: ProgType = ProgType.BASH
    description: str | None = None
    tags: list[str] | None = None

    def to_dict(self) -> dict:
        data: dict = {
            "path": str(self.path),
            "project": self.project,
            "prog_type": self.prog_type.label,
        }
        if self.description is not None:
            data["description"] = self.description
        if self.tags is not None:
            data["tags"] = list(self.tags)
        return data

    @classmethod
    def from_dict(cls, name: str, data: dict) -> Program:
        tags = data.get("tags")
        if isinstance(tags, str):
            tags = [tags]
        description = data.get("description")
        return cls(
            name=name,
            path=Path(data["path"]),
            project=bool(data.get("project", False)),
            prog_type=ProgType.parse(data.get("prog_type")),
            description=str(description) if description is not None else None,
            tags=[str(t) for t in tags] if tags is not None else None,
        )


@dataclass
class Temp:
    """The most recently created temp program."""

    path: Path


@dataclass
class Defaults:
    """User defaults stored alongside the programs."""

    proj_path: Path


@dataclass
class Config:
    """The whole persisted registry."""

    defaults: Defaults
    programs: dict[str, Program] = field(default_factory=dict)
    temp: Temp | None = None
