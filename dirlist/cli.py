"""Command-line front door for dirlist.

Parses ``-l -a -R -i`` flags plus display options, builds listing options,
and dispatches each path to the listing controller. Only this module maps
listing failures to a process exit status.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import TextIO

from . import config
from .entry_model import ListingOptions
from .listing import PROGRAM_NAME, list_paths
from .ui_theme import ListingTheme, available_theme_names, resolve_theme

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="List directory contents sorted by name, optionally recursively.",
    )
    parser.add_argument("-l", dest="long_format", action="store_true", help="Use long listing format.")
    parser.add_argument("-a", dest="include_hidden", action="store_true", help="Include entries starting with '.'.")
    parser.add_argument("-R", dest="recursive", action="store_true", help="List subdirectories recursively.")
    parser.add_argument("-i", dest="show_inode", action="store_true", help="Print the inode number of each entry.")
    parser.add_argument(
        "--color",
        choices=config.COLOR_MODES,
        default=None,
        help="Highlight directory names: always, auto (terminal only) or never.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Directory highlight theme ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--debug", action="store_true", help="Log skipped entries and failed lookups to stderr.")
    parser.add_argument("paths", nargs="+", metavar="PATH", help="Directory to list.")
    return parser


def options_from_args(args: argparse.Namespace) -> ListingOptions:
    """Build immutable listing options from parsed flags."""
    return ListingOptions(
        long_format=args.long_format,
        include_hidden=args.include_hidden,
        recursive=args.recursive,
        show_inode=args.show_inode,
    )


def color_enabled(mode: str, stream: TextIO) -> bool:
    """Resolve ``always``/``auto``/``never`` against ``stream``."""
    if mode == "never":
        return False
    if mode == "auto":
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())
    return True


def theme_from_args(args: argparse.Namespace, stream: TextIO) -> ListingTheme:
    """Pick the theme from flags, falling back to persisted config."""
    mode = args.color if args.color is not None else config.load_color_mode()
    theme_name = args.theme if args.theme is not None else config.load_theme_name()
    return resolve_theme(theme_name, no_color=not color_enabled(mode, stream))


def _prepare_stdout() -> None:
    # Non-UTF-8 names decode to surrogates; write them back as the raw bytes.
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def _silence_stdout() -> None:
    # Point the stdout descriptor at devnull so the interpreter's final flush
    # does not raise again on the closed pipe.
    try:
        stdout_fd = sys.stdout.fileno()
    except (OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, stdout_fd)
    finally:
        os.close(devnull)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, list every path, and return the exit status.

    Usage errors exit with status 2 through ``argparse`` before any listing.
    Returns ``EXIT_FAILURE`` when any directory could not be read or when the
    reader of stdout goes away mid-listing.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format=f"{PROGRAM_NAME}: %(levelname)s: %(message)s",
    )
    _prepare_stdout()

    try:
        failures = list_paths(
            args.paths,
            options_from_args(args),
            out=sys.stdout,
            err=sys.stderr,
            theme=theme_from_args(args, sys.stdout),
        )
        sys.stdout.flush()
    except BrokenPipeError:
        _silence_stdout()
        return EXIT_FAILURE
    return EXIT_FAILURE if failures else EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
