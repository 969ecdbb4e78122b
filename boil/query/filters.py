"""Filter expressions — parsing ``value:expression:field`` triples and evaluating them.

A leading ``*`` on the value makes the comparison case sensitive. For the
``in`` / ``nin`` expressions a ``+`` separates alternative values, e.g.
``tiresome+boring:nin:tags`` keeps programs tagged with neither.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from boil.errors import MalformedFilter, UnknownExpression
from boil.query.fields import Field, encode, resolve_field
from boil.registry.models import Program

CASE_SENSITIVE_MARK = "*"
ALTERNATIVE_SEP = "+"

_TRUE_LITERALS = {"true", "True", "1"}
_FALSE_LITERALS = {"false", "False", "0"}


class Operator(Enum):
    """How a filter compares its value against a field."""

    EQ = "eq"
    NE = "ne"
    CONTAINS = "in"
    NOT_CONTAINS = "nin"
    CONTAINS_ANY = "in_any"
    NOT_CONTAINS_ANY = "nin_any"

    @property
    def is_multi(self) -> bool:
        return self in (Operator.CONTAINS_ANY, Operator.NOT_CONTAINS_ANY)


def _resolve_operator(token: str, literal: str) -> Operator:
    multi = ALTERNATIVE_SEP in literal
    if token in ("eq", "equals"):
        return Operator.EQ
    if token in ("ne", "neq", "nequals"):
        return Operator.NE
    if token == "in":
        return Operator.CONTAINS_ANY if multi else Operator.CONTAINS
    if token in ("nin", "notin"):
        return Operator.NOT_CONTAINS_ANY if multi else Operator.NOT_CONTAINS
    raise UnknownExpression(token)


@dataclass(frozen=True)
class FilterPredicate:
    """One parsed filter condition. ``literal`` is kept exactly as typed."""

    field: Field
    operator: Operator
    literal: str

    @property
    def case_sensitive(self) -> bool:
        return self.literal.startswith(CASE_SENSITIVE_MARK)

    @property
    def value(self) -> str:
        """The literal with the case-sensitivity mark removed."""
        if self.case_sensitive:
            return self.literal[len(CASE_SENSITIVE_MARK):]
        return self.literal

    @property
    def alternatives(self) -> list[str]:
        if self.operator.is_multi:
            return self.value.split(ALTERNATIVE_SEP)
        return [self.value]

    def _needle(self, text: str) -> bytes:
        if self.field is Field.PROJECT:
            probe = text if self.case_sensitive else text.lower()
            if probe in _TRUE_LITERALS:
                return b"\x01"
            if probe in _FALSE_LITERALS:
                return b"\x00"
        return text.encode("utf-8")

    def matches(self, program: Program) -> bool:
        haystack = encode(program, self.field)
        needles = [self._needle(alt) for alt in self.alternatives]
        if not self.case_sensitive:
            haystack = haystack.lower()
            needles = [n.lower() for n in needles]

        op = self.operator
        if op is Operator.EQ:
            return haystack == needles[0]
        if op is Operator.NE:
            return haystack != needles[0]
        if op is Operator.CONTAINS:
            return needles[0] in haystack
        if op is Operator.NOT_CONTAINS:
            return needles[0] not in haystack
        if op is Operator.CONTAINS_ANY:
            return any(n in haystack for n in needles)
        return not any(n in haystack for n in needles)


def parse_filter(token: str) -> FilterPredicate:
    """Parse a single ``value:expression:field`` triple."""
    parts = token.split(":")
    if len(parts) != 3:
        raise MalformedFilter(token)
    literal, expression, field_token = parts

    field = resolve_field(field_token)
    operator = _resolve_operator(expression, literal)
    return FilterPredicate(field, operator, literal)


def parse_filters(tokens: Iterable[str]) -> list[FilterPredicate]:
    return [parse_filter(t) for t in tokens]


def accepts(program: Program, predicates: Iterable[FilterPredicate]) -> bool:
    """True if the program satisfies every predicate. No predicates accepts everything."""
    return all(p.matches(program) for p in predicates)
