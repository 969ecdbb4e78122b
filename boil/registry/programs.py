"""Program registry — create, track, edit and query programs.

Every mutating operation loads the config, applies the change and writes it
back, so a ``ProgramRegistry`` never holds stale state between commands.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Sequence

from boil import scaffold
from boil.errors import (
    InvalidPathError,
    PathExistsError,
    ProgramExistsError,
    ProgramNotFoundError,
)
from boil.query import FilterPredicate, SortTerm, run
from boil.registry.models import Config, ProgType, Program, Temp
from boil.registry.store import ConfigStore

logger = logging.getLogger(__name__)


class ProgramRegistry:
    """The user's catalog of scripts and projects."""

    def __init__(self, store: ConfigStore):
        self.store = store

    def new(
        self,
        name: str | None = None,
        project: bool = False,
        temp: bool = False,
        path: Path | None = None,
        prog_type: str | None = None,
        description: str | None = None,
        tags: list[str] | None = None,
    ) -> Program:
        """Scaffold a new script or project and register it.

        Temp programs are created in the system temp directory and remembered
        as the config's ``temp`` entry instead of being added to the catalog.
        """
        config = self.store.load()
        kind = ProgType.parse(prog_type)
        if temp:
            base = Path(tempfile.gettempdir())
        else:
            base = Path(path) if path is not None else config.defaults.proj_path

        name = name or _next_name(config, base, project, kind)
        if not temp and name in config.programs:
            raise ProgramExistsError(name)
        target = _target(base, name, project, kind)

        if target.exists():
            raise PathExistsError(target)

        if project:
            scaffold.create_project(target, kind)
        else:
            scaffold.create_program(target, kind)

        program = Program(
            name=name,
            path=target,
            project=project,
            prog_type=kind,
            description=description,
            tags=list(tags) if tags else None,
        )
        if temp:
            config.temp = Temp(path=target)
        else:
            config.programs[name] = program
        self.store.save(config)
        logger.info("Created %s at %s", name, target)
        return program

    def add(
        self,
        name: str,
        path: Path,
        prog_type: str | None = None,
        description: str | None = None,
        tags: list[str] | None = None,
    ) -> Program:
        """Register an existing script or project."""
        path = Path(path).expanduser().resolve()
        if not path.exists():
            raise InvalidPathError(path)

        config = self.store.load()
        if name in config.programs:
            raise ProgramExistsError(name)

        kind = ProgType.parse(prog_type) if prog_type else ProgType.from_path(path)
        program = Program(
            name=name,
            path=path,
            project=path.is_dir(),
            prog_type=kind,
            description=description,
            tags=list(tags) if tags else None,
        )
        config.programs[name] = program
        self.store.save(config)
        logger.info("Added %s (%s)", name, path)
        return program

    def edit(
        self,
        name: str,
        description: str | None = None,
        add_tags: Sequence[str] | None = None,
        rm_tags: Sequence[str] | None = None,
        prog_type: str | None = None,
    ) -> Program:
        """Update an entry. Tags in ``rm_tags`` that are not present are ignored."""
        config = self.store.load()
        program = _lookup(config, name)

        if description is not None:
            program.description = description
        if prog_type is not None:
            program.prog_type = ProgType.parse(prog_type)

        tags = list(program.tags or [])
        for tag in add_tags or []:
            if tag not in tags:
                tags.append(tag)
        if rm_tags:
            tags = [t for t in tags if t not in rm_tags]
        if add_tags or rm_tags:
            program.tags = tags or None

        self.store.save(config)
        logger.info("Edited %s", name)
        return program

    def remove(self, name: str) -> Program:
        """Drop an entry from the catalog. Files on disk are left alone."""
        config = self.store.load()
        program = _lookup(config, name)
        del config.programs[name]
        self.store.save(config)
        logger.info("Removed %s", name)
        return program

    def get(self, name: str) -> Program:
        return _lookup(self.store.load(), name)

    def query(
        self,
        predicates: Sequence[FilterPredicate] | None = None,
        spec: Sequence[SortTerm] | None = None,
    ) -> list[Program]:
        """Return programs matching ``predicates``, ordered by ``spec``."""
        config = self.store.load()
        return run(config.programs.values(), predicates, spec)

    @property
    def temp(self) -> Path | None:
        """Path of the most recently created temp program."""
        config = self.store.load()
        return config.temp.path if config.temp else None


def _lookup(config: Config, name: str) -> Program:
    try:
        return config.programs[name]
    except KeyError:
        raise ProgramNotFoundError(name) from None


def _target(base: Path, name: str, project: bool, kind: ProgType) -> Path:
    return base / name if project else base / f"{name}{kind.extension}"


def _next_name(config: Config, base: Path, project: bool, kind: ProgType) -> str:
    """First free ``boil{N}``: not catalogued and not already on disk under ``base``."""
    n = len(config.programs)
    while f"boil{n}" in config.programs or _target(base, f"boil{n}", project, kind).exists():
        n += 1
    return f"boil{n}"
