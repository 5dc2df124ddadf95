"""Immutable listing options resolved before rendering starts."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import UsageError


@dataclass(frozen=True)
class TreeOptions:
    """Filter and formatting switches for one listing run."""

    show_hidden: bool = False
    max_depth: int | None = None
    directories_only: bool = False
    exclude_pattern: str | None = None
    include_pattern: str | None = None
    show_full_path: bool = False
    quote_names: bool = False
    show_size: bool = False
    show_permissions: bool = False

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth <= 0:
            raise UsageError("Invalid level, must be greater than 0.")
