"""Parser error types."""

from __future__ import annotations


class ParseError(Exception):
    """Raised when a chain expression or JSON document is malformed.

    ``line`` and ``column`` are 1-based when the underlying parser reports
    them and ``None`` otherwise.
    """

    def __init__(
        self, message: str, *, line: int | None = None, column: int | None = None
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column

    @property
    def position(self) -> str:
        if self.line is None:
            return "unknown position"
        return f"line {self.line}, column {self.column}"
