"""boil CLI — the main entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape

from boil import __version__
from boil.errors import BoilError, ParseError
from boil.query import parse_filters, parse_sort
from boil.registry.programs import ProgramRegistry
from boil.registry.store import ConfigStore
from boil.table import DEFAULT_FORMAT, parse_format, render_programs

console = Console()

FILTER_HELP = """\
A comma delimited list of value:expression:field to filter the list.

\b
Expressions:
    equals | eq            field equals value
    nequals | neq | ne     field does not equal value
    in                     value IS contained in field
    notin | nin            value IS NOT contained in field

\b
Example:
    boil list --filter=my-program:equals:n,fun:in:tags

Searches are case-insensitive; prefix the value with '*' for a
case-sensitive search (--filter='*Program:eq:name'). With in/notin,
'+' separates alternatives (--filter=tiresome+boring:nin:tags).
"""

SORT_HELP = """\
A comma delimited list of field[,asc|desc] to sort the list.

Directions are 0|asc (default) or 1|desc, e.g. --sort=P,1,t,name,0
sorts by project (true first), then type, then name.
"""

FORMAT_HELP = """\
A comma delimited list of fields to show: n|name, p|path, P|project,
t|type, d|description, T|tags.
"""


def _split_commas(ctx, param, value):
    if value is None:
        return None
    return [v for v in value.split(",") if v]


def _filters_option(ctx, param, value):
    tokens = _split_commas(ctx, param, value)
    if tokens is None:
        return []
    try:
        return parse_filters(tokens)
    except ParseError as e:
        raise click.BadParameter(str(e)) from e


def _sort_option(ctx, param, value):
    tokens = _split_commas(ctx, param, value)
    if tokens is None:
        return []
    try:
        return parse_sort(tokens)
    except ParseError as e:
        raise click.BadParameter(str(e)) from e


def _format_option(ctx, param, value):
    tokens = _split_commas(ctx, param, value) or DEFAULT_FORMAT
    try:
        return parse_format(tokens)
    except ParseError as e:
        raise click.BadParameter(str(e)) from e


def _fail(err: BoilError) -> NoReturn:
    console.print(f"[red]Error:[/] {escape(str(err))}", soft_wrap=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Log debug output to stderr")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: $BOIL_DEF_CONFIG or ~/.boil/config.yaml)",
)
@click.pass_context
def main(ctx: click.Context, debug: bool, config_path: Path | None):
    """boil — keep track of your scripts and projects."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="[%(name)s] %(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.obj = ConfigStore(config_path)


# ── Init ─────────────────────────────────────────────────────────────


@main.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config (USE WITH CAUTION!!)")
@click.option("--path", "-p", type=click.Path(file_okay=False, path_type=Path), default=None, help="Project directory")
@click.pass_obj
def init(store: ConfigStore, force: bool, path: Path | None):
    """Initialize a new configuration."""
    try:
        config = store.init(proj_path=path, force=force)
    except BoilError as e:
        _fail(e)
    console.print(f"[green]Initialized[/] {store.path}")
    console.print(f"  Project directory: {config.defaults.proj_path}")


# ── New ──────────────────────────────────────────────────────────────


@main.command()
@click.option("--temp", "-t", is_flag=True, help="Create a temp file/directory")
@click.option("--project", "-D", is_flag=True, help="Create a project directory with boilerplate")
@click.option("--path", "-p", type=click.Path(path_type=Path), default=None, help="Directory to create the program in")
@click.option("--type", "-T", "prog_type", default=None, help="Program type - ie python, rust, etc.")
@click.option("--description", "-d", default=None, help="Description of the program")
@click.option("--tags", "-G", callback=_split_commas, default=None, help="Comma delimited tags")
@click.argument("name", required=False)
@click.pass_obj
def new(store: ConfigStore, temp, project, path, prog_type, description, tags, name):
    """Create a new script or project.

    NAME is required unless --temp is given.
    """
    if not name and not temp:
        raise click.UsageError("NAME is required unless --temp is given")

    try:
        program = ProgramRegistry(store).new(
            name=name,
            project=project,
            temp=temp,
            path=path,
            prog_type=prog_type,
            description=description,
            tags=tags,
        )
    except BoilError as e:
        _fail(e)

    kind = "project" if program.project else "script"
    console.print(f"[green]Created {kind}[/] [magenta]{program.name}[/] at {program.path}")


# ── Add ──────────────────────────────────────────────────────────────


@main.command()
@click.option("--description", "-d", default=None, help="Description of the program")
@click.option("--tags", "-t", callback=_split_commas, default=None, help="Comma delimited tags")
@click.option("--type", "-T", "prog_type", default=None, help="Program type - ie python, rust, etc.")
@click.argument("name")
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def add(store: ConfigStore, description, tags, prog_type, name, path):
    """Add an existing script or project to boil."""
    try:
        program = ProgramRegistry(store).add(
            name, path, prog_type=prog_type, description=description, tags=tags
        )
    except BoilError as e:
        _fail(e)
    console.print(f"[green]Added[/] [magenta]{program.name}[/] ({program.prog_type.label}) {program.path}")


# ── Edit ─────────────────────────────────────────────────────────────


@main.command()
@click.option("--description", "-d", default=None, help="New description")
@click.option("--add-tags", "-t", callback=_split_commas, default=None, help="Comma delimited tags to add")
@click.option("--rm-tags", "-R", callback=_split_commas, default=None, help="Comma delimited tags to remove")
@click.option("--prog-type", "-p", default=None, help="New program type")
@click.argument("name")
@click.pass_obj
def edit(store: ConfigStore, description, add_tags, rm_tags, prog_type, name):
    """Edit an existing entry."""
    if description is None and not add_tags and not rm_tags and prog_type is None:
        raise click.UsageError("At least one of -d, -t, -R or -p is required")

    try:
        ProgramRegistry(store).edit(
            name,
            description=description,
            add_tags=add_tags,
            rm_tags=rm_tags,
            prog_type=prog_type,
        )
    except BoilError as e:
        _fail(e)
    console.print(f"[green]Updated[/] [magenta]{name}[/]")


# ── List ─────────────────────────────────────────────────────────────


@main.command(name="list")
@click.option("--format", "fields", callback=_format_option, default=None, help=FORMAT_HELP)
@click.option("--sort", "sort_spec", callback=_sort_option, default=None, help=SORT_HELP)
@click.option("--filter", "predicates", callback=_filters_option, default=None, help=FILTER_HELP)
@click.option("--temp", "-t", is_flag=True, help="Show the last added temp file")
@click.pass_obj
def list_programs(store: ConfigStore, fields, sort_spec, predicates, temp):
    """View/List the current programs."""
    registry = ProgramRegistry(store)
    try:
        if temp:
            path = registry.temp
            if path is None:
                console.print("[yellow]No temp program.[/]")
            else:
                console.print(str(path))
            return
        programs = registry.query(predicates, sort_spec)
    except BoilError as e:
        _fail(e)

    if not programs:
        console.print("[yellow]No matching programs.[/]")
        return

    console.print(render_programs(programs, fields))


# ── Remove ───────────────────────────────────────────────────────────


@main.command()
@click.option("--force", "-f", is_flag=True, help="Remove without prompting")
@click.argument("name")
@click.pass_obj
def remove(store: ConfigStore, force: bool, name: str):
    """Remove a program from the configuration (files are not deleted)."""
    registry = ProgramRegistry(store)
    try:
        registry.get(name)
        if not force and not click.confirm(f"Remove '{name}' from boil?"):
            console.print("[yellow]Aborted.[/]")
            return
        registry.remove(name)
    except BoilError as e:
        _fail(e)
    console.print(f"[green]Removed[/] [magenta]{name}[/]")


if __name__ == "__main__":
    main()
