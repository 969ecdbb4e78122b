"""Tests for the filter-then-sort query pipeline."""

from pathlib import Path

from boil.query import parse_filters, parse_sort, run
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


def test_no_filter_no_sort_preserves_order():
    progs = [_program(n) for n in ["b", "a", "c"]]
    assert _names(run(progs)) == ["b", "a", "c"]


def test_sort_by_name():
    progs = [_program(n) for n in ["b", "a", "c"]]
    assert _names(run(progs, spec=parse_sort(["name"]))) == ["a", "b", "c"]
    assert _names(run(progs, spec=parse_sort(["name", "desc"]))) == ["c", "b", "a"]


def test_multi_key_sort():
    first = _program("b", project=False)
    second = _program("a", project=True)
    third = _program("a", project=False)
    result = run([first, second, third], spec=parse_sort(["P", "n"]))
    assert result == [third, first, second]


def test_mixed_directions():
    progs = [
        _program("a", prog_type=ProgType.PYTHON),
        _program("b", prog_type=ProgType.BASH),
        _program("c", prog_type=ProgType.PYTHON),
    ]
    result = run(progs, spec=parse_sort(["t", "asc", "n", "desc"]))
    assert _names(result) == ["b", "c", "a"]


def test_sort_is_stable():
    first = _program("same", description="first")
    second = _program("same", description="second")
    other = _program("aaa")
    result = run([first, other, second], spec=parse_sort(["n"]))
    assert result == [other, first, second]

    result = run([second, other, first], spec=parse_sort(["n", "1"]))
    assert result == [second, first, other]


def test_filter_then_sort():
    progs = [
        _program("zeta", tags=["fun"]),
        _program("alpha", tags=["boring"]),
        _program("beta", tags=["fun", "util"]),
    ]
    result = run(progs, parse_filters(["fun:in:T"]), parse_sort(["n"]))
    assert _names(result) == ["beta", "zeta"]


def test_empty_input():
    assert run([], parse_filters(["x:eq:n"]), parse_sort(["n"])) == []


def test_accepts_generator_input():
    progs = (_program(n) for n in ["b", "a"])
    assert _names(run(progs, spec=parse_sort(["n"]))) == ["a", "b"]


def test_everything_filtered_out():
    progs = [_program("a"), _program("b")]
    assert run(progs, parse_filters(["nothing:eq:n"])) == []
