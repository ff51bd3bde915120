"""objectkit: rectangle value objects, a JSON codec and a CSS selector builder."""

__version__ = "0.1.0"

from objectkit.codec import JsonCodec, decode, encode, loads  # noqa: E402
from objectkit.config import ObjectKitConfig  # noqa: E402
from objectkit.parser import ParseError, parse_chain  # noqa: E402
from objectkit.rectangle import Rectangle  # noqa: E402
from objectkit.selector import (  # noqa: E402
    DuplicateSingletonPart,
    OutOfOrderPart,
    PartKind,
    SelectorBuilder,
    SelectorError,
    SelectorNode,
    combine,
    css_selector_builder,
    stringify,
)

__all__ = [
    "__version__",
    # rectangle
    "Rectangle",
    # codec
    "JsonCodec",
    "encode",
    "decode",
    "loads",
    # selector
    "PartKind",
    "SelectorNode",
    "SelectorBuilder",
    "css_selector_builder",
    "combine",
    "stringify",
    # errors
    "ParseError",
    "SelectorError",
    "DuplicateSingletonPart",
    "OutOfOrderPart",
    # parser
    "parse_chain",
    # config
    "ObjectKitConfig",
]
