"""Render pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class RenderOptions:
    """Groups rendering configuration."""

    indent: int = constants.DEFAULT_INDENT
    trace: bool = constants.DEFAULT_TRACE

    def __post_init__(self):
        if self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")
