from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObjectKitConfig:
    json_indent: int | None = None  # None keeps output compact
    ensure_ascii: bool = False
    log_level: str = "WARNING"
