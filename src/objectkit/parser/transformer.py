"""Lark Transformer that turns a chain expression into a SelectorNode."""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from objectkit.parser.errors import ParseError
from objectkit.selector import model
from objectkit.selector.model import SelectorNode

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

log = logging.getLogger("objectkit.parser")

# Chain method name -> SelectorNode method.
_PART_METHODS: dict[str, str] = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo_class": "pseudo_class",
    "pseudoClass": "pseudo_class",
    "pseudo_element": "pseudo_element",
    "pseudoElement": "pseudo_element",
}

_ESCAPE_RE = re.compile(r"\\(.)")


def _unquote(token: Token) -> str:
    raw = str(token)
    return _ESCAPE_RE.sub(r"\1", raw[1:-1])


class ChainTransformer(Transformer):  # type: ignore[type-arg]
    """Apply each parsed call to a SelectorNode, innermost first."""

    def part(self, items: list[Token]) -> tuple[str, str]:
        return (_PART_METHODS[str(items[0])], _unquote(items[1]))

    def combine(self, items: list[object]) -> SelectorNode:
        left, combinator, right = items
        return model.combine(left, _unquote(combinator), right)  # type: ignore[arg-type]

    def chain(self, items: list[object]) -> SelectorNode:
        head, *parts = items
        if isinstance(head, SelectorNode):
            node = head
        else:
            parts.insert(0, head)
            node = SelectorNode()
        for method, value in parts:  # type: ignore[misc]
            node = getattr(node, method)(value)
        return node

    def start(self, items: list[SelectorNode]) -> SelectorNode:
        return items[0]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_chain(source: str) -> SelectorNode:
    """Parse a builder chain expression and build the selector it describes.

    Raises ParseError for malformed expressions. Selector errors such as
    OutOfOrderPart propagate unchanged.
    """
    try:
        tree = _parser().parse(source)
    except UnexpectedInput as e:
        raise ParseError(str(e), line=e.line, column=e.column) from e
    try:
        node = ChainTransformer().transform(tree)
    except VisitError as e:
        raise e.orig_exc from None
    log.debug("parsed chain %r -> %r", source, node.text)
    return node
