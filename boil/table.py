"""Rich table rendering for ``boil list``."""

from __future__ import annotations

from typing import Sequence

from rich.table import Table
from rich.text import Text

from boil.query.fields import Field, resolve_field, typed
from boil.registry.models import Program

DEFAULT_FORMAT = ["name", "project", "type", "description", "tags"]


def capitalize(text: str) -> str:
    """Upper-case the first character only, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def parse_format(tokens: Sequence[str]) -> list[Field]:
    return [resolve_field(t) for t in tokens]


def _cell(program: Program, field: Field) -> Text:
    value = typed(program, field)
    if field is Field.NAME:
        return Text(capitalize(value), style="bold blue")
    if field is Field.PATH:
        return Text(str(value), style="bold")
    if field is Field.PROJECT:
        return Text("T", style="bold green") if value else Text("F", style="bold red")
    if field is Field.TYPE:
        return Text(value.label, style="bold")
    if field is Field.DESCRIPTION:
        return Text(value or "")
    if not value:
        return Text("None", style="bold")
    return Text(", ".join(capitalize(t) for t in value))


def render_programs(programs: Sequence[Program], fields: Sequence[Field], title: str | None = None) -> Table:
    """Build a table with one column per field, in the order given."""
    table = Table(title=title)
    for field in fields:
        table.add_column(field.header, header_style="bold")
    for program in programs:
        table.add_row(*(_cell(program, f) for f in fields))
    return table
