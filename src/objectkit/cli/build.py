"""CLI command: objectkit build -- evaluate a selector chain expression."""

from __future__ import annotations

import sys

import click

from objectkit.parser import ParseError, parse_chain
from objectkit.selector import SelectorError


@click.command()
@click.argument("expression")
def build(expression: str) -> None:
    """Build a CSS selector from a builder chain expression.

    Example: objectkit build 'element("a").attr("href").pseudo_class("focus")'
    """
    try:
        node = parse_chain(expression)
    except (ParseError, SelectorError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(node.stringify())
