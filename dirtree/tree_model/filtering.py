"""Name patterns and visibility predicates applied to walker entries."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from .options import TreeOptions
from .types import TreeEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreePatterns:
    """Compiled include/exclude patterns.

    A pattern that is configured but failed to compile is stored as ``None``
    and matches no name.
    """

    include: re.Pattern[str] | None = None
    exclude: re.Pattern[str] | None = None


def compile_pattern(text: str) -> re.Pattern[str] | None:
    """Compile ``text`` as a regular expression, or return ``None`` if malformed."""
    try:
        return re.compile(text)
    except re.error as exc:
        logger.warning("ignoring malformed pattern %r (%s); it matches nothing", text, exc)
        return None


def compile_patterns(options: TreeOptions) -> TreePatterns:
    include = compile_pattern(options.include_pattern) if options.include_pattern is not None else None
    exclude = compile_pattern(options.exclude_pattern) if options.exclude_pattern is not None else None
    return TreePatterns(include=include, exclude=exclude)


def name_matches(pattern: re.Pattern[str] | None, name: str) -> bool:
    """Return whether ``pattern`` occurs anywhere in ``name``."""
    if pattern is None:
        return False
    return pattern.search(name) is not None


def entry_is_visible(entry: TreeEntry, options: TreeOptions, patterns: TreePatterns) -> bool:
    """Apply hidden, directory-only, depth, exclude, and include checks in order."""
    name = entry.name
    if not options.show_hidden and name.startswith("."):
        return False
    if options.directories_only and not entry.is_dir:
        return False
    if options.max_depth is not None and entry.depth > options.max_depth:
        return False
    if options.exclude_pattern is not None and name_matches(patterns.exclude, name):
        return False
    # Directories are matched like files; a non-matching directory is dropped
    # even when a descendant matches.
    if options.include_pattern is not None and not name_matches(patterns.include, name):
        return False
    return True


def filter_tree_entries(
    entries: Iterable[TreeEntry],
    options: TreeOptions,
    patterns: TreePatterns | None = None,
) -> list[TreeEntry]:
    """Return entries passing every active filter, preserving input order."""
    active_patterns = patterns if patterns is not None else compile_patterns(options)
    return [entry for entry in entries if entry_is_visible(entry, options, active_patterns)]
