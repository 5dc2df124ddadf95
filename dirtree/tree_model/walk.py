"""Depth-first filesystem traversal producing ``TreeEntry`` sequences."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path
from stat import filemode

from ..errors import WalkError
from .types import TreeEntry

logger = logging.getLogger(__name__)


def list_directory(directory: Path) -> list[os.DirEntry[str]]:
    """Return the children of ``directory`` in case-insensitive name order.

    Raises ``WalkError`` when the directory is missing, unreadable, or not a
    directory.
    """
    try:
        with os.scandir(directory) as entries:
            children = list(entries)
    except OSError as exc:
        raise WalkError(directory, exc) from exc
    children.sort(key=lambda child: (child.name.casefold(), child.name))
    return children


def _entry_for(child: os.DirEntry[str], depth: int) -> TreeEntry:
    child_path = Path(child.path)
    try:
        is_dir = child.is_dir(follow_symlinks=False)
        stat = child.stat(follow_symlinks=False)
    except OSError as exc:
        raise WalkError(child_path, exc) from exc
    return TreeEntry(
        child_path,
        depth,
        is_dir,
        file_size=int(stat.st_size),
        permissions=filemode(stat.st_mode),
    )


def _iter_children(directory: Path, depth: int) -> Iterator[os.DirEntry[str]]:
    children = list_directory(directory)
    logger.debug("listed %s: %d entries at depth %d", directory, len(children), depth)
    return iter(children)


def walk_tree(root: Path) -> list[TreeEntry]:
    """Collect every entry below ``root``.

    Each directory is descended into before its own entry is appended, so a
    directory's record follows its entire subtree. Symlinks are not followed.
    An explicit stack keeps deep trees clear of the recursion limit.
    """
    root = Path(root)
    entries: list[TreeEntry] = []
    # (remaining children, their depth, directory entry appended once they are done)
    stack: list[tuple[Iterator[os.DirEntry[str]], int, TreeEntry | None]] = [
        (_iter_children(root, 1), 1, None)
    ]
    while stack:
        children, depth, pending = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            if pending is not None:
                entries.append(pending)
            continue

        entry = _entry_for(child, depth)
        if entry.is_dir:
            stack.append((_iter_children(entry.path, depth + 1), depth + 1, entry))
        else:
            entries.append(entry)
    return entries


def iter_render_order(entries: Sequence[TreeEntry]) -> Iterator[TreeEntry]:
    """Yield walker output back to front.

    Reversing the walker sequence puts every directory ahead of its subtree;
    siblings come out in reverse listing order.
    """
    return reversed(entries)
