"""Multi-key sorting — ``field[,direction]`` terms and composite sort keys."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from boil.query.fields import Field, encode, resolve_field
from boil.registry.models import Program


class Direction(Enum):
    ASC = "asc"
    DESC = "desc"


_DIRECTIONS = {
    "0": Direction.ASC,
    "asc": Direction.ASC,
    "1": Direction.DESC,
    "desc": Direction.DESC,
}


@dataclass(frozen=True)
class SortTerm:
    """One level of a sort: a field and the order to sort it in."""

    field: Field
    direction: Direction = Direction.ASC


def parse_sort(tokens: Sequence[str]) -> list[SortTerm]:
    """Parse a flat token list such as ``["P", "1", "t", "name", "0"]``.

    A direction token directly after a field applies to that field; otherwise
    the field sorts ascending and the next token starts a new term.
    """
    terms: list[SortTerm] = []
    i = 0
    while i < len(tokens):
        field = resolve_field(tokens[i])
        i += 1
        direction = Direction.ASC
        if i < len(tokens) and tokens[i] in _DIRECTIONS:
            direction = _DIRECTIONS[tokens[i]]
            i += 1
        terms.append(SortTerm(field, direction))
    return terms


def _descending(data: bytes) -> bytes:
    # Each byte b becomes (0x00, 255 - b) and the run ends with 0x01, so a
    # value sorts before its own prefixes, the reverse of ascending order.
    out = bytearray()
    for b in data:
        out.append(0x00)
        out.append(255 - b)
    out.append(0x01)
    return bytes(out)


def sort_key(program: Program, spec: Sequence[SortTerm]) -> tuple[bytes, ...]:
    """Composite key: one byte string per term, compared in term order."""
    key = []
    for term in spec:
        data = encode(program, term.field)
        key.append(_descending(data) if term.direction is Direction.DESC else data)
    return tuple(key)
