"""Scaffolding for new scripts and projects."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from boil.errors import BoilError
from boil.registry.models import ProgType

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Template content for generated files
# ---------------------------------------------------------------------------

_PY_GITIGNORE_TEMPLATE = """\
__pycache__/
*.py[cod]
*.egg-info/
.eggs/
build/
dist/
.venv/
venv/
.env
.pytest_cache/
.mypy_cache/
"""


def create_program(path: Path, prog_type: ProgType) -> Path:
    """Create a single script, starting it with a shebang where one applies."""
    path.parent.mkdir(parents=True, exist_ok=True)
    shebang = prog_type.shebang
    path.write_text(shebang + "\n" if shebang else "")
    logger.debug("Created %s script %s", prog_type.label, path)
    return path


def create_project(path: Path, prog_type: ProgType) -> Path:
    """Create a project directory with boilerplate for its type."""
    if prog_type is ProgType.PYTHON:
        _create_python_project(path)
    elif prog_type is ProgType.RUST:
        _create_rust_project(path)
    else:
        path.mkdir(parents=True)
    logger.debug("Created %s project %s", prog_type.label, path)
    return path


def _create_python_project(path: Path) -> None:
    """Structure:
        <name>/
        ├── .gitignore
        └── src/
            └── __init__.py
    """
    path.mkdir(parents=True)
    (path / ".gitignore").write_text(_PY_GITIGNORE_TEMPLATE)
    src = path / "src"
    src.mkdir()
    (src / "__init__.py").touch()


def _create_rust_project(path: Path) -> None:
    cargo = shutil.which("cargo")
    if cargo is None:
        logger.warning("cargo not found, creating an empty directory for %s", path)
        path.mkdir(parents=True)
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    result = subprocess.run([cargo, "new", str(path)], capture_output=True, text=True)
    if result.returncode != 0:
        raise BoilError(f"cargo new failed for {path}: {result.stderr.strip()}")
