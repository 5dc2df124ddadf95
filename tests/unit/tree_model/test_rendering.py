"""Tree row formatting and full render pass tests."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from dirtree.tree_model import (
    TreeCounts,
    TreeEntry,
    TreeOptions,
    format_summary,
    format_tree_entry,
    render_tree,
    walk_tree,
)
from dirtree.ui_theme import DEFAULT_THEME, PLAIN_THEME


def _make_sample_tree(root: Path) -> None:
    (root / "a.txt").write_bytes(b"0123456789")
    (root / "b").mkdir()
    (root / "b" / "c.txt").write_bytes(b"01234")


def _listing_rows(text: str) -> list[str]:
    rows = text.split("\n")
    return rows[: rows.index("")]


class FormatTreeEntryTests(unittest.TestCase):
    def test_rows_indent_by_depth_with_type_marker(self) -> None:
        options = TreeOptions()
        self.assertEqual(format_tree_entry(TreeEntry(Path("r/b"), 1, True), options), "  +- b")
        self.assertEqual(format_tree_entry(TreeEntry(Path("r/b/c.txt"), 2, False), options), "    -- c.txt")

    def test_size_then_permissions_suffixes(self) -> None:
        entry = TreeEntry(Path("r/a.txt"), 1, False, file_size=10, permissions="-rw-r--r--")
        options = TreeOptions(show_size=True, show_permissions=True)

        self.assertEqual(format_tree_entry(entry, options), "  -- a.txt [10] [-rw-r--r--]")

    def test_quoting_wraps_full_path(self) -> None:
        entry = TreeEntry(Path("r") / "b" / "c.txt", 2, False)
        options = TreeOptions(show_full_path=True, quote_names=True)

        self.assertEqual(format_tree_entry(entry, options), f'    -- "{Path("r") / "b" / "c.txt"}"')

    def test_only_directory_rows_are_decorated(self) -> None:
        directory = format_tree_entry(TreeEntry(Path("r/b"), 1, True), TreeOptions(), DEFAULT_THEME)
        plain_file = format_tree_entry(TreeEntry(Path("r/a"), 1, False), TreeOptions(), DEFAULT_THEME)

        self.assertEqual(directory, DEFAULT_THEME.decorate_directory("  +- b"))
        self.assertTrue(directory.startswith("\x1b["))
        self.assertEqual(plain_file, "  -- a")

    def test_plain_theme_leaves_directory_rows_untouched(self) -> None:
        row = format_tree_entry(TreeEntry(Path("r/b"), 1, True), TreeOptions(), PLAIN_THEME)
        self.assertEqual(row, "  +- b")


class FormatSummaryTests(unittest.TestCase):
    def test_singular_and_plural_forms(self) -> None:
        self.assertEqual(format_summary(TreeCounts(1, 2)), "1 directory, 2 files")
        self.assertEqual(format_summary(TreeCounts(0, 1)), "0 directories, 1 file")
        self.assertEqual(format_summary(TreeCounts(3, 0)), "3 directories, 0 files")


class RenderTreeTests(unittest.TestCase):
    def test_default_listing_of_sample_tree(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_sample_tree(root)

            text, counts = render_tree(walk_tree(root), TreeOptions())

            self.assertEqual(text, "  +- b\n    -- c.txt\n  -- a.txt\n\n1 directory, 2 files\n")
            self.assertEqual((counts.directories, counts.files), (1, 2))

    def test_directories_only_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_sample_tree(root)

            text, counts = render_tree(walk_tree(root), TreeOptions(directories_only=True))

            self.assertEqual(text, "  +- b\n\n1 directory, 0 files\n")
            self.assertEqual(counts.files, 0)

    def test_depth_limit_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_sample_tree(root)

            text, _counts = render_tree(walk_tree(root), TreeOptions(max_depth=1))

            self.assertEqual(text, "  +- b\n  -- a.txt\n\n1 directory, 1 file\n")

    def test_hidden_directory_toggles_with_show_hidden(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_sample_tree(root)
            (root / ".git").mkdir()

            hidden_text, _ = render_tree(walk_tree(root), TreeOptions())
            shown_text, _ = render_tree(walk_tree(root), TreeOptions(show_hidden=True))

            self.assertNotIn(".git", hidden_text)
            self.assertIn("  +- .git", _listing_rows(shown_text))

    def test_quote_names_applies_to_every_row(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_sample_tree(root)

            text, _ = render_tree(walk_tree(root), TreeOptions(quote_names=True, show_size=True))

            for row in _listing_rows(text):
                name_part = row.lstrip().split(" ", 1)[1]
                self.assertTrue(name_part.startswith('"'), row)
                self.assertIn('" [', name_part)

    def test_counts_match_rendered_rows_across_options(self) -> None:
        option_sets = [
            TreeOptions(),
            TreeOptions(show_hidden=True),
            TreeOptions(max_depth=2),
            TreeOptions(directories_only=True, show_hidden=True),
            TreeOptions(exclude_pattern="log"),
            TreeOptions(include_pattern="a"),
            TreeOptions(include_pattern="(", show_hidden=True),
        ]
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _make_sample_tree(root)
            (root / ".cache").mkdir()
            (root / ".cache" / "data.bin").write_bytes(b"x")
            (root / "b" / "deep").mkdir()
            (root / "b" / "deep" / "app.log").write_text("log\n", encoding="utf-8")
            entries = walk_tree(root)

            for options in option_sets:
                with self.subTest(options=options):
                    text, counts = render_tree(entries, options)
                    rows = [row.lstrip() for row in _listing_rows(text)]
                    self.assertEqual(sum(1 for row in rows if row.startswith("+- ")), counts.directories)
                    self.assertEqual(sum(1 for row in rows if row.startswith("-- ")), counts.files)
                    self.assertTrue(text.endswith(format_summary(counts) + "\n"))


if __name__ == "__main__":
    unittest.main()
