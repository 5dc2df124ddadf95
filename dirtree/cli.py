"""Command-line front door for dirtree.

Parses flags into ``TreeOptions``, resolves the root directory, and prints
the rendered listing. Every failure aborts before anything is written.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn, TextIO

from .config import load_default_root, load_theme_name, save_default_root
from .errors import TreeError, UsageError
from .logging_setup import setup_logger
from .tree_model import TreeOptions, render_tree, walk_tree
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

VALUE_FLAGS = ("-L", "-P", "-I")
VALUE_FLAG_LETTERS = frozenset("LPI")
SWITCH_FLAG_LETTERS = frozenset("adspfQvh")


class TreeArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises ``UsageError`` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _positive_level(value: str) -> int:
    """argparse type for the ``-L`` depth limit."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected [number], got {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("Invalid level, must be greater than 0.")
    return parsed


def strip_quotes(value: str) -> str:
    """Drop one leading and one trailing double quote, independently."""
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def build_parser() -> TreeArgumentParser:
    parser = TreeArgumentParser(
        prog="dirtree",
        description="List the contents of a directory as an indented tree.",
        allow_abbrev=False,
    )
    parser.add_argument("path", nargs="?", default=None, help="Root directory. Defaults to the configured root or cwd.")
    parser.add_argument("-a", dest="show_hidden", action="store_true", help="Include names starting with '.'.")
    parser.add_argument("-d", dest="directories_only", action="store_true", help="List directories only.")
    parser.add_argument("-L", dest="max_depth", metavar="LEVEL", type=_positive_level, help="Max display depth.")
    parser.add_argument("-s", dest="show_size", action="store_true", help="Print the size in bytes.")
    parser.add_argument("-p", dest="show_permissions", action="store_true", help="Print type and permissions.")
    parser.add_argument(
        "-P",
        dest="include_pattern",
        metavar="PATTERN",
        type=strip_quotes,
        help="List only names matching the regular expression.",
    )
    parser.add_argument(
        "-I",
        dest="exclude_pattern",
        metavar="PATTERN",
        type=strip_quotes,
        help="Do not list names matching the regular expression.",
    )
    parser.add_argument("-f", dest="show_full_path", action="store_true", help="Print the full path prefix.")
    parser.add_argument("-Q", dest="quote_names", action="store_true", help="Quote names in double quotes.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--remember",
        action="store_true",
        help="Store the listed root as the default for later runs.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def _is_unknown_cluster(token: str) -> bool:
    """Return whether a clustered short-flag token contains an unknown letter.

    Letters after the first value flag (``-L``/``-P``/``-I``) are its value.
    """
    if not token.startswith("-") or token.startswith("--") or len(token) <= 2:
        return False
    for letter in token[1:]:
        if letter in VALUE_FLAG_LETTERS:
            return False
        if letter not in SWITCH_FLAG_LETTERS:
            return True
    return False


def normalize_argv(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Prepare raw tokens for argparse.

    A value flag always takes the next token as its value, even one starting
    with ``-``, so both are joined into one ``-I-x`` token. Short-flag
    clusters with an unknown letter are dropped. Returns ``(tokens, dropped)``.
    """
    tokens: list[str] = []
    dropped: list[str] = []
    idx = 0
    while idx < len(argv):
        token = argv[idx]
        if token == "--":
            tokens.extend(argv[idx:])
            break
        if token in VALUE_FLAGS and idx + 1 < len(argv):
            tokens.append(token + argv[idx + 1])
            idx += 2
            continue
        if _is_unknown_cluster(token):
            dropped.append(token)
        else:
            tokens.append(token)
        idx += 1
    return tokens, dropped


def parse_arguments(argv: Sequence[str] | None = None) -> tuple[argparse.Namespace, list[str]]:
    """Parse known flags; unknown ones are returned rather than rejected."""
    tokens, dropped = normalize_argv(sys.argv[1:] if argv is None else argv)
    args, unknown = build_parser().parse_known_args(tokens)
    return args, dropped + unknown


def options_from_args(args: argparse.Namespace) -> TreeOptions:
    return TreeOptions(
        show_hidden=args.show_hidden,
        max_depth=args.max_depth,
        directories_only=args.directories_only,
        exclude_pattern=args.exclude_pattern,
        include_pattern=args.include_pattern,
        show_full_path=args.show_full_path,
        quote_names=args.quote_names,
        show_size=args.show_size,
        show_permissions=args.show_permissions,
    )


def resolve_root(path_arg: str | None, default_path: Path | None = None) -> Path:
    """Pick the listing root: explicit argument, caller default, config, then cwd."""
    if path_arg:
        return Path(path_arg).expanduser()
    if default_path is not None:
        return default_path
    configured = load_default_root()
    if configured is not None:
        return configured
    return Path.cwd()


def write_listing(text: str, stream: TextIO) -> None:
    """Write ``text``, escaping names the stream encoding cannot represent.

    Undecodable filenames arrive as surrogate escapes and are written as
    backslash escapes instead of aborting the run.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="backslashreplace")
    stream.write(text)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the tree for the resolved root.

    ``default_path`` is primarily for tests; when omitted the configured
    default root or the current working directory is used.
    """
    try:
        args, unknown = parse_arguments()
        setup_logger("DEBUG" if args.verbose else "WARNING")
        for extra in unknown:
            logger.debug("ignoring unknown argument %r", extra)

        options = options_from_args(args)
        root = resolve_root(args.path, default_path)
        theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color, stream=sys.stdout)
        logger.debug("listing %s with %s (theme %s)", root, options, theme.name)

        entries = walk_tree(root)
        text, counts = render_tree(entries, options, theme)
    except TreeError as exc:
        raise SystemExit(f"tree: {exc}") from exc

    if args.remember:
        save_default_root(root.resolve())
    logger.debug("rendered %d directories and %d files", counts.directories, counts.files)
    write_listing(text, sys.stdout)


if __name__ == "__main__":
    main()
