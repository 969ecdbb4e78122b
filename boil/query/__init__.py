"""Query engine for the program registry.

Filters and sorts an in-memory list of programs using a compact textual
mini-language:

- Fields: every queryable attribute maps to an ordered byte encoding
- Filters: ``value:expression:field`` triples, joined with AND
- Sort: ``field[,direction]`` terms building a composite, stable sort key
"""

from boil.query.fields import Field, encode, resolve_field, typed
from boil.query.filters import FilterPredicate, Operator, accepts, parse_filter, parse_filters
from boil.query.pipeline import run
from boil.query.sort import Direction, SortTerm, parse_sort, sort_key

__all__ = [
    "Direction",
    "Field",
    "FilterPredicate",
    "Operator",
    "SortTerm",
    "accepts",
    "encode",
    "parse_filter",
    "parse_filters",
    "parse_sort",
    "resolve_field",
    "run",
    "sort_key",
    "typed",
]
