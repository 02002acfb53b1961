"""Listing controller: read, sort and render directories, then descend.

Each directory block is a blank line, a ``<path>:`` header and one line per
visible entry. Recursive descent is pre-order and depth-first with siblings in
name order; names starting with ``.`` are never descended into, which also
keeps the walk away from self and parent links.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from .entry_model import DirectoryUnreadable, Entry, ListingOptions, read_directory, sort_entries
from .render import identity
from .render.entry import write_entry
from .ui_theme import DEFAULT_THEME, ListingTheme

PROGRAM_NAME = "dirlist"


def report_unreadable(error: DirectoryUnreadable, err: TextIO) -> None:
    """Write a one-line diagnostic for an unreadable directory."""
    err.write(f"{PROGRAM_NAME}: {error}\n")


def _descend_targets(path: str, entries: list[Entry]) -> list[str]:
    return [
        os.path.join(path, entry.display_name)
        for entry in entries
        if entry.is_dir and not entry.is_hidden
    ]


def list_directory(
    path: str,
    options: ListingOptions,
    *,
    out: TextIO | None = None,
    err: TextIO | None = None,
    theme: ListingTheme = DEFAULT_THEME,
    user_name: Callable[[int], str] = identity.user_name,
    group_name: Callable[[int], str] = identity.group_name,
) -> list[DirectoryUnreadable]:
    """Print the listing for ``path`` and, when recursive, its subdirectories.

    Unreadable directories are reported on ``err`` and skipped; the walk
    continues with the next pending directory. Returns the failures in the
    order they were encountered.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    failures: list[DirectoryUnreadable] = []
    pending: list[str] = [path]

    while pending:
        current = pending.pop()
        try:
            entries = sort_entries(read_directory(current, options))
        except DirectoryUnreadable as exc:
            report_unreadable(exc, err)
            failures.append(exc)
            continue

        out.write(f"\n{current}:\n")
        for entry in entries:
            write_entry(entry, options, out, theme=theme, user_name=user_name, group_name=group_name)

        if options.recursive:
            # Stack pops last-in first, so push in reverse to visit siblings in order.
            pending.extend(reversed(_descend_targets(current, entries)))

    return failures


def list_paths(
    paths: Iterable[str],
    options: ListingOptions,
    *,
    out: TextIO | None = None,
    err: TextIO | None = None,
    theme: ListingTheme = DEFAULT_THEME,
    user_name: Callable[[int], str] = identity.user_name,
    group_name: Callable[[int], str] = identity.group_name,
) -> list[DirectoryUnreadable]:
    """List each of ``paths`` independently, in order, collecting all failures."""
    failures: list[DirectoryUnreadable] = []
    for path in paths:
        failures.extend(
            list_directory(
                path,
                options,
                out=out,
                err=err,
                theme=theme,
                user_name=user_name,
                group_name=group_name,
            )
        )
    return failures


__all__ = [
    "PROGRAM_NAME",
    "report_unreadable",
    "list_directory",
    "list_paths",
]
