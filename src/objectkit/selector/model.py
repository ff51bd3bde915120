"""Selector model: PartKind ranks and the immutable SelectorNode."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum

from objectkit.selector.errors import DuplicateSingletonPart, OutOfOrderPart

__all__ = ["PartKind", "SelectorNode", "combine", "stringify"]

log = logging.getLogger("objectkit.selector")


class PartKind(IntEnum):
    """Compound selector part kinds, valued by their required position."""

    TYPE = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5


# Kinds allowed at most once per compound selector.
SINGLETON_KINDS = frozenset({PartKind.TYPE, PartKind.ID, PartKind.PSEUDO_ELEMENT})


def _check_singletons(kinds: tuple[PartKind, ...]) -> None:
    counts = Counter(kinds)
    for kind in PartKind:
        if kind in SINGLETON_KINDS and counts[kind] > 1:
            raise DuplicateSingletonPart(kind)


def _check_order(kinds: tuple[PartKind, ...]) -> None:
    for previous, current in zip(kinds, kinds[1:]):
        if current < previous:
            raise OutOfOrderPart(previous, current)


@dataclass(frozen=True)
class SelectorNode:
    """One step of a compound selector under construction.

    Every append method returns a new node and leaves ``self`` untouched, so
    a partial selector can be reused as the prefix of several others::

        row = SelectorNode().element("tr")
        even = row.pseudo_class("nth-of-type(even)")
        odd = row.pseudo_class("nth-of-type(odd)")

    Attributes:
        text: The selector text rendered so far.
        used_kinds: Every part kind appended so far, in append order.
    """

    text: str = ""
    used_kinds: tuple[PartKind, ...] = ()

    # --- appending ------------------------------------------------------------

    def _append(self, fragment: str, kind: PartKind) -> SelectorNode:
        kinds = self.used_kinds + (kind,)
        _check_singletons(kinds)
        _check_order(kinds)
        log.debug("append %s %r to %r", kind.name, fragment, self.text)
        return SelectorNode(text=self.text + fragment, used_kinds=kinds)

    def element(self, value: str) -> SelectorNode:
        return self._append(value, PartKind.TYPE)

    def id(self, value: str) -> SelectorNode:
        return self._append(f"#{value}", PartKind.ID)

    def class_(self, value: str) -> SelectorNode:
        return self._append(f".{value}", PartKind.CLASS)

    def attr(self, value: str) -> SelectorNode:
        return self._append(f"[{value}]", PartKind.ATTRIBUTE)

    def pseudo_class(self, value: str) -> SelectorNode:
        return self._append(f":{value}", PartKind.PSEUDO_CLASS)

    def pseudo_element(self, value: str) -> SelectorNode:
        return self._append(f"::{value}", PartKind.PSEUDO_ELEMENT)

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        """Return the selector text."""
        return self.text

    def __str__(self) -> str:
        return self.text


def combine(left: SelectorNode, combinator: str, right: SelectorNode) -> SelectorNode:
    """Join two selectors with *combinator*.

    The combinator is not checked against the CSS combinators. The result
    starts a fresh ordering state, so any part may be appended to it.
    """
    log.debug("combine %r %r %r", left.text, combinator, right.text)
    return SelectorNode(text=f"{left.text} {combinator} {right.text}")


def stringify(node: SelectorNode) -> str:
    return node.text
