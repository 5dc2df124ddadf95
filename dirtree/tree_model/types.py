"""Tree entry and counter datatypes shared by the walker and renderer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TreeEntry:
    """One filesystem node discovered below the traversal root.

    ``depth`` is 1 for direct children of the root. ``path`` is the root as
    given joined with the relative path, so it is only absolute when the root
    was. ``file_size`` is the raw ``st_size`` for directories too.
    """

    path: Path
    depth: int
    is_dir: bool
    file_size: int = 0
    permissions: str = ""

    @property
    def name(self) -> str:
        return self.path.name


@dataclass
class TreeCounts:
    """Directory/file tallies for rendered rows."""

    directories: int = 0
    files: int = 0

    def record(self, entry: TreeEntry) -> None:
        if entry.is_dir:
            self.directories += 1
        else:
            self.files += 1
