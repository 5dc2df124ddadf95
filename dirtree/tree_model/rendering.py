"""Formatting helpers for tree rows and the trailing summary."""

from __future__ import annotations

from collections.abc import Sequence

from ..ui_theme import PLAIN_THEME, UITheme
from .filtering import compile_patterns, filter_tree_entries
from .options import TreeOptions
from .types import TreeCounts, TreeEntry
from .walk import iter_render_order

INDENT_UNIT = "  "
DIRECTORY_MARKER = "+- "
FILE_MARKER = "-- "


def display_name(entry: TreeEntry, options: TreeOptions) -> str:
    """Return the bare name or full path, quoted when requested."""
    name = str(entry.path) if options.show_full_path else entry.name
    if options.quote_names:
        name = f'"{name}"'
    return name


def format_tree_entry(entry: TreeEntry, options: TreeOptions, theme: UITheme | None = None) -> str:
    """Render one entry row; directory rows go through the theme decorator."""
    active_theme = theme or PLAIN_THEME
    marker = DIRECTORY_MARKER if entry.is_dir else FILE_MARKER
    line = f"{INDENT_UNIT * entry.depth}{marker}{display_name(entry, options)}"
    if options.show_size:
        line += f" [{entry.file_size}]"
    if options.show_permissions:
        line += f" [{entry.permissions}]"
    if entry.is_dir:
        return active_theme.decorate_directory(line)
    return line


def format_summary(counts: TreeCounts) -> str:
    """Return ``"N directories, M files"`` with singular forms for a count of one."""
    directories = "1 directory" if counts.directories == 1 else f"{counts.directories} directories"
    files = "1 file" if counts.files == 1 else f"{counts.files} files"
    return f"{directories}, {files}"


def render_tree(
    entries: Sequence[TreeEntry],
    options: TreeOptions,
    theme: UITheme | None = None,
) -> tuple[str, TreeCounts]:
    """Render walker output as listing text plus the counts it printed.

    Entries are consumed in render order (see ``iter_render_order``). Only
    rows that pass every filter are counted. The text ends with a blank
    separator line, the summary, and a newline.
    """
    counts = TreeCounts()
    lines: list[str] = []
    visible = filter_tree_entries(iter_render_order(entries), options, compile_patterns(options))
    for entry in visible:
        counts.record(entry)
        lines.append(format_tree_entry(entry, options, theme))
    lines.append("")
    lines.append(format_summary(counts))
    return "\n".join(lines) + "\n", counts
