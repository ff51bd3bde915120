"""Stateless facade that starts selector chains from the empty node."""

from __future__ import annotations

from objectkit.selector import model
from objectkit.selector.model import SelectorNode

__all__ = ["SelectorBuilder", "css_selector_builder"]

_EMPTY = SelectorNode()


class SelectorBuilder:
    """Entry point for building CSS selectors.

    Example::

        builder = css_selector_builder
        builder.id("main").class_("container").class_("editable").stringify()
        # => '#main.container.editable'
    """

    def element(self, value: str) -> SelectorNode:
        return _EMPTY.element(value)

    def id(self, value: str) -> SelectorNode:
        return _EMPTY.id(value)

    def class_(self, value: str) -> SelectorNode:
        return _EMPTY.class_(value)

    def attr(self, value: str) -> SelectorNode:
        return _EMPTY.attr(value)

    def pseudo_class(self, value: str) -> SelectorNode:
        return _EMPTY.pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorNode:
        return _EMPTY.pseudo_element(value)

    def combine(
        self, left: SelectorNode, combinator: str, right: SelectorNode
    ) -> SelectorNode:
        return model.combine(left, combinator, right)

    def stringify(self, node: SelectorNode) -> str:
        return model.stringify(node)


css_selector_builder = SelectorBuilder()
