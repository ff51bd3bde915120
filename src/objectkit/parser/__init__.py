from objectkit.parser.errors import ParseError
from objectkit.parser.transformer import parse_chain

__all__ = ["ParseError", "parse_chain"]
