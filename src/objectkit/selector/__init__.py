from objectkit.selector.builder import SelectorBuilder, css_selector_builder
from objectkit.selector.errors import DuplicateSingletonPart, OutOfOrderPart, SelectorError
from objectkit.selector.model import PartKind, SelectorNode, combine, stringify

__all__ = [
    "PartKind",
    "SelectorNode",
    "combine",
    "stringify",
    "SelectorBuilder",
    "css_selector_builder",
    "SelectorError",
    "DuplicateSingletonPart",
    "OutOfOrderPart",
]
