"""Query pipeline — filter, then stable multi-key sort."""

from __future__ import annotations

from typing import Iterable, Sequence

from boil.query.filters import FilterPredicate, accepts
from boil.query.sort import SortTerm, sort_key
from boil.registry.models import Program


def run(
    programs: Iterable[Program],
    predicates: Sequence[FilterPredicate] | None = None,
    spec: Sequence[SortTerm] | None = None,
) -> list[Program]:
    """Return the programs matching every predicate, ordered by ``spec``.

    ``programs`` is consumed once. Without a spec the input order is kept;
    programs with equal keys keep their relative order.
    """
    predicates = predicates or []
    selected = [p for p in programs if accepts(p, predicates)]
    if spec:
        selected.sort(key=lambda p: sort_key(p, spec))
    return selected
