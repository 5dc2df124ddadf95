"""Error types raised by the walker, option validation, and the CLI parser."""

from __future__ import annotations

from pathlib import Path


class TreeError(Exception):
    """Base class for failures that abort a listing run."""


class UsageError(TreeError):
    """Malformed or incomplete command-line option."""


class WalkError(TreeError):
    """A directory could not be listed or one of its entries could not be stat'ed.

    ``reason`` is the OS-level explanation; the original ``OSError`` is
    chained as ``__cause__`` by the raiser.
    """

    def __init__(self, path: Path, error: OSError) -> None:
        self.path = path
        self.reason = error.strerror or str(error)
        super().__init__(f"{path}: {self.reason}")


__all__ = [
    "TreeError",
    "UsageError",
    "WalkError",
]
