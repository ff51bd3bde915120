"""JSON encode/decode with class binding for decoded objects."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any

from objectkit.config import ObjectKitConfig
from objectkit.parser.errors import ParseError

__all__ = ["JsonCodec", "encode", "decode", "loads"]

log = logging.getLogger("objectkit.codec")


def _reject_constant(name: str) -> Any:
    raise ParseError(f"{name} is not valid JSON")


def _own_fields(obj: Any) -> Any:
    """``default`` hook: serialise an object through its own fields."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return vars(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class JsonCodec:
    """Encode values to JSON text and decode JSON text back onto classes."""

    def __init__(self, config: ObjectKitConfig | None = None) -> None:
        self.config = config or ObjectKitConfig()

    def encode(self, value: Any) -> str:
        """Return the JSON text for *value*, keys in insertion order.

        NaN and infinities raise ValueError instead of producing invalid JSON.
        """
        indent = self.config.json_indent
        separators = (",", ":") if indent is None else (",", ": ")
        return json.dumps(
            value,
            indent=indent,
            separators=separators,
            ensure_ascii=self.config.ensure_ascii,
            allow_nan=False,
            default=_own_fields,
        )

    def loads(self, text: str) -> Any:
        """Parse *text* as JSON, raising ParseError when it is malformed.

        NaN, Infinity and -Infinity are rejected as well.
        """
        try:
            return json.loads(text, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise ParseError(str(e), line=e.lineno, column=e.colno) from e

    def decode(self, prototype: type, text: str) -> Any:
        """Parse *text* and bind a JSON object onto an instance of *prototype*.

        The instance is created without calling ``prototype.__init__``; each
        key of the object becomes an attribute, so the methods of *prototype*
        operate on the decoded data. Arrays and scalars are returned as parsed.
        """
        data = self.loads(text)
        if not isinstance(data, dict):
            return data
        instance = prototype.__new__(prototype)
        if hasattr(instance, "__dict__"):
            vars(instance).update(data)
        else:
            # slotted classes only accept the keys they declare
            for key, value in data.items():
                object.__setattr__(instance, key, value)
        log.debug("decoded %d field(s) onto %s", len(data), prototype.__name__)
        return instance


_default_codec = JsonCodec()


def encode(value: Any) -> str:
    return _default_codec.encode(value)


def loads(text: str) -> Any:
    return _default_codec.loads(text)


def decode(prototype: type, text: str) -> Any:
    return _default_codec.decode(prototype, text)
