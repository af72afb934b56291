"""CLI commands: cssparts parse / module / inspect."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from cssparts.config import ParserConfig
from cssparts.loader import render_module, to_json
from cssparts.model.part import ALL_KINDS, Part, PartKind, Property
from cssparts.parser import EngineFault, parse_with_diagnostics

_KIND_NAMES = [k.name.lower() for k in PartKind]


def _read(cssfile: str) -> str:
    return Path(cssfile).read_text(encoding="utf-8")


def _fail(exc: EngineFault) -> None:
    click.echo(f"Parse error: {exc}", err=True)
    sys.exit(1)


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@click.option(
    "--kind",
    "kinds",
    multiple=True,
    type=click.Choice(_KIND_NAMES),
    help="Only run the matcher for this part kind (repeatable)",
)
@click.option("--drop-blank", is_flag=True, help="Drop whitespace-only literals")
def parse(cssfile: str, kinds: tuple[str, ...], drop_blank: bool) -> None:
    """Tokenize a CSS file and print the segments as JSON."""
    enabled = frozenset(PartKind[k.upper()] for k in kinds) if kinds else ALL_KINDS
    config = ParserConfig(drop_blank_literals=drop_blank, enabled_kinds=enabled)
    try:
        result = parse_with_diagnostics(_read(cssfile), config=config)
    except EngineFault as exc:
        _fail(exc)
        return
    click.echo(json.dumps(to_json(result.segments), indent=2))


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
def module(cssfile: str) -> None:
    """Render a CSS file as a JavaScript module exporting its segments."""
    try:
        click.echo(render_module(_read(cssfile)))
    except EngineFault as exc:
        _fail(exc)


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
def inspect(cssfile: str) -> None:
    """List the parts found in a CSS file along with any diagnostics."""
    css_path = Path(cssfile)
    try:
        result = parse_with_diagnostics(_read(cssfile))
    except EngineFault as exc:
        _fail(exc)
        return

    parts = [s for s in result.segments if isinstance(s, Part)]
    click.echo(f"File:     {css_path.name}")
    click.echo(f"Segments: {len(result.segments)}")
    click.echo(f"Parts:    {len(parts)}")
    click.echo()

    for part in parts:
        if isinstance(part.value, Property):
            line = f"  {part.kind.name.lower():<9} --{part.value.name}: {part.value.value}"
        else:
            line = f"  {part.kind.name.lower():<9} {part.value}"
        if part.escape:
            line += "  (escaped)"
        click.echo(line)

    if result.diagnostics:
        click.echo()
        click.echo("Diagnostics:")
        for diag in result.diagnostics:
            click.echo(f"  {diag}")
