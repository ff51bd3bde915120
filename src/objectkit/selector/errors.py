"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objectkit.selector.model import PartKind


class SelectorError(ValueError):
    """Base error for an invalid selector construction step."""


class DuplicateSingletonPart(SelectorError):
    """Raised when element, id or pseudo-element is appended a second time."""

    def __init__(self, kind: PartKind) -> None:
        self.kind = kind
        super().__init__(
            "Element, id and pseudo-element should not occur more then one "
            "time inside the selector"
        )


class OutOfOrderPart(SelectorError):
    """Raised when a part is appended after a part of higher rank."""

    def __init__(self, previous: PartKind, kind: PartKind) -> None:
        self.previous = previous
        self.kind = kind
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )
