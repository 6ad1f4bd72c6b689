from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CssBuilderConfig:
    log_level: str = "WARNING"
    json_indent: int | None = None  # None = compact output
    sort_keys: bool = False
