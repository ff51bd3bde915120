"""CLI command: objectkit fmt -- re-emit JSON through the codec."""

from __future__ import annotations

import sys
from dataclasses import replace

import click

from objectkit.codec import JsonCodec
from objectkit.config import ObjectKitConfig
from objectkit.parser import ParseError


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--indent", type=int, default=None, help="Indent width (compact if omitted)")
@click.option("--ascii/--no-ascii", "ensure_ascii", default=False, help="Escape non-ASCII characters")
@click.pass_obj
def fmt(config: ObjectKitConfig | None, source, indent: int | None, ensure_ascii: bool) -> None:
    """Read JSON from SOURCE (default: stdin) and print it re-encoded."""
    config = replace(config or ObjectKitConfig(), json_indent=indent, ensure_ascii=ensure_ascii)
    codec = JsonCodec(config)
    try:
        value = codec.loads(source.read())
    except ParseError as exc:
        click.echo(f"Error: {exc} ({exc.position})", err=True)
        sys.exit(1)
    click.echo(codec.encode(value))
