"""Tests for sort parsing and composite sort keys."""

from pathlib import Path

import pytest

from boil.errors import UnknownField
from boil.query.fields import Field
from boil.query.sort import Direction, SortTerm, parse_sort, sort_key
from boil.registry.models import ProgType, Program


def _program(name: str, **overrides) -> Program:
    data = {
        "name": name,
        "path": Path(f"/dev/{name}"),
        "project": False,
        "prog_type": ProgType.BASH,
    }
    data.update(overrides)
    return Program(**data)


def _names(programs):
    return [p.name for p in programs]


# --- Parsing ---


def test_parse_defaults_to_ascending():
    assert parse_sort(["n"]) == [SortTerm(Field.NAME, Direction.ASC)]


def test_parse_direction_aliases():
    assert parse_sort(["n", "1"]) == [SortTerm(Field.NAME, Direction.DESC)]
    assert parse_sort(["n", "desc"]) == [SortTerm(Field.NAME, Direction.DESC)]
    assert parse_sort(["n", "0"]) == [SortTerm(Field.NAME, Direction.ASC)]
    assert parse_sort(["n", "asc"]) == [SortTerm(Field.NAME, Direction.ASC)]


def test_parse_mixed_terms():
    spec = parse_sort(["P", "1", "t", "name", "0"])
    assert spec == [
        SortTerm(Field.PROJECT, Direction.DESC),
        SortTerm(Field.TYPE, Direction.ASC),
        SortTerm(Field.NAME, Direction.ASC),
    ]


def test_parse_empty():
    assert parse_sort([]) == []


def test_parse_unknown_field():
    with pytest.raises(UnknownField) as exc:
        parse_sort(["n", "1", "bogus"])
    assert exc.value.token == "bogus"


def test_parse_leading_direction_is_not_a_field():
    with pytest.raises(UnknownField):
        parse_sort(["1", "n"])


# --- Keys ---


def test_key_has_one_entry_per_term():
    spec = parse_sort(["n", "P"])
    key = sort_key(_program("a", project=True), spec)
    assert key == (b"a", b"\x01")


def test_descending_reverses_order():
    spec = [SortTerm(Field.NAME, Direction.DESC)]
    ordered = sorted([_program(n) for n in ["b", "a", "c"]], key=lambda p: sort_key(p, spec))
    assert _names(ordered) == ["c", "b", "a"]


def test_ascending_order():
    spec = [SortTerm(Field.NAME, Direction.ASC)]
    ordered = sorted([_program(n) for n in ["b", "a", "c"]], key=lambda p: sort_key(p, spec))
    assert _names(ordered) == ["a", "b", "c"]


def test_descending_puts_longer_string_before_its_prefix():
    spec = [SortTerm(Field.NAME, Direction.DESC)]
    ordered = sorted([_program(n) for n in ["a", "ab", "a\x00"]], key=lambda p: sort_key(p, spec))
    assert _names(ordered) == ["ab", "a\x00", "a"]


def test_descending_is_monotonic_over_high_bytes():
    # Bytes above 0x7f must not wrap around.
    spec = [SortTerm(Field.NAME, Direction.DESC)]
    names = ["z", "é", "~", "ÿ", "a"]
    ordered = sorted([_program(n) for n in names], key=lambda p: sort_key(p, spec))
    expected = sorted(names, key=lambda n: n.encode("utf-8"), reverse=True)
    assert _names(ordered) == expected


def test_descending_project_puts_true_first():
    spec = parse_sort(["P", "1"])
    progs = [_program("a", project=False), _program("b", project=True)]
    ordered = sorted(progs, key=lambda p: sort_key(p, spec))
    assert _names(ordered) == ["b", "a"]
