"""Field access for the query engine.

Every queryable attribute of a :class:`~boil.registry.models.Program` is
projected to ``bytes`` so that filters and sort keys can treat heterogeneous
fields the same way. The whole table of cases lives in :func:`encode`; adding
a field means adding it to :class:`Field`, the alias table and ``encode``.
"""

from __future__ import annotations

from enum import Enum

from boil.errors import UnknownField
from boil.registry.models import Program

# Tags are concatenated with no separator. A substring filter on tags can
# therefore match across a tag boundary (["ab", "cd"] contains "bc").
TAG_SEPARATOR = b""


class Field(Enum):
    """The queryable attributes of a program."""

    NAME = "Name"
    PATH = "Path"
    PROJECT = "Project"
    TYPE = "Type"
    DESCRIPTION = "Description"
    TAGS = "Tags"

    @property
    def header(self) -> str:
        return self.value


_ALIASES = {
    "n": Field.NAME,
    "name": Field.NAME,
    "p": Field.PATH,
    "path": Field.PATH,
    "P": Field.PROJECT,
    "project": Field.PROJECT,
    "t": Field.TYPE,
    "type": Field.TYPE,
    "d": Field.DESCRIPTION,
    "description": Field.DESCRIPTION,
    "T": Field.TAGS,
    "tag": Field.TAGS,
    "tags": Field.TAGS,
}


def resolve_field(token: str) -> Field:
    """Resolve a short or long field alias. Aliases are case sensitive (``p`` vs ``P``)."""
    try:
        return _ALIASES[token]
    except KeyError:
        raise UnknownField(token) from None


def encode(program: Program, field: Field, tag_separator: bytes = TAG_SEPARATOR) -> bytes:
    """Return the ordered byte form of ``field`` on ``program``.

    Absent optional values encode as ``b""``. The result is used for
    equality, substring and ordering comparisons alike.
    """
    if field is Field.NAME:
        return program.name.encode("utf-8")
    if field is Field.PATH:
        return str(program.path).encode("utf-8")
    if field is Field.PROJECT:
        return b"\x01" if program.project else b"\x00"
    if field is Field.TYPE:
        return program.prog_type.label.encode("utf-8")
    if field is Field.DESCRIPTION:
        return (program.description or "").encode("utf-8")
    if field is Field.TAGS:
        return tag_separator.join(t.encode("utf-8") for t in program.tags or [])
    raise AssertionError(f"unhandled field {field!r}")


def typed(program: Program, field: Field):
    """Return the field's Python value, for display."""
    if field is Field.NAME:
        return program.name
    if field is Field.PATH:
        return program.path
    if field is Field.PROJECT:
        return program.project
    if field is Field.TYPE:
        return program.prog_type
    if field is Field.DESCRIPTION:
        return program.description
    if field is Field.TAGS:
        return program.tags
    raise AssertionError(f"unhandled field {field!r}")
