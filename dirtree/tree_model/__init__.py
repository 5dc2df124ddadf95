"""Tree-model traversal, filtering, and row formatting.

Defines ``TreeEntry``/``TreeOptions`` and the walk → filter → render pipeline
used by the command-line front door.
"""

from __future__ import annotations

from .filtering import (
    TreePatterns,
    compile_pattern,
    compile_patterns,
    entry_is_visible,
    filter_tree_entries,
    name_matches,
)
from .options import TreeOptions
from .rendering import display_name, format_summary, format_tree_entry, render_tree
from .types import TreeCounts, TreeEntry
from .walk import iter_render_order, list_directory, walk_tree

__all__ = [
    "TreeEntry",
    "TreeCounts",
    "TreeOptions",
    "TreePatterns",
    "list_directory",
    "walk_tree",
    "iter_render_order",
    "compile_pattern",
    "compile_patterns",
    "name_matches",
    "entry_is_visible",
    "filter_tree_entries",
    "display_name",
    "format_tree_entry",
    "format_summary",
    "render_tree",
]
