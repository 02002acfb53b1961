"""Render one listing entry as a single output line.

Long-format fields follow a fixed order: permissions, links, owner, group,
size and modification time. Names of directories are wrapped in the theme's
directory style. Nothing here touches the filesystem.
"""

from __future__ import annotations

import stat
import time
from collections.abc import Callable
from typing import TextIO

from ..entry_model import Entry, ListingOptions, MetadataSnapshot
from ..ui_theme import DEFAULT_THEME, ListingTheme
from . import identity

SIZE_FIELD_WIDTH = 7
MTIME_FORMAT = "%b %d %H:%M"

_PERMISSION_FLAGS: tuple[tuple[int, str], ...] = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


def permission_string(metadata: MetadataSnapshot) -> str:
    """Return ``drwxr-xr-x`` style mode text.

    The first column is ``d`` for directories and ``-`` for everything else;
    setuid, setgid and sticky bits are not rendered.
    """
    type_char = "d" if metadata.is_dir else "-"
    return type_char + "".join(letter if metadata.mode & bit else "-" for bit, letter in _PERMISSION_FLAGS)


def format_mtime(mtime: float) -> str:
    """Format a modification time in local time, e.g. ``Mar 07 14:05``."""
    return time.strftime(MTIME_FORMAT, time.localtime(mtime))


def format_name(entry: Entry, theme: ListingTheme) -> str:
    if entry.is_dir:
        return f"{theme.directory}{entry.display_name}{theme.reset}"
    return entry.display_name


def format_entry(
    entry: Entry,
    options: ListingOptions,
    *,
    theme: ListingTheme = DEFAULT_THEME,
    user_name: Callable[[int], str] = identity.user_name,
    group_name: Callable[[int], str] = identity.group_name,
) -> str:
    """Render ``entry`` as one newline-terminated line for ``options``."""
    metadata = entry.metadata
    parts: list[str] = []
    if options.show_inode:
        parts.append(f"{metadata.inode} ")
    if options.long_format:
        parts.append(permission_string(metadata))
        parts.append(f" {metadata.nlink}")
        parts.append(f" {user_name(metadata.uid)}")
        parts.append(f" {group_name(metadata.gid)}")
        parts.append(f" {metadata.size:>{SIZE_FIELD_WIDTH}}")
        parts.append(f" {format_mtime(metadata.mtime)}")
    parts.append(f" {format_name(entry, theme)}\n")
    return "".join(parts)


def write_entry(
    entry: Entry,
    options: ListingOptions,
    out: TextIO,
    *,
    theme: ListingTheme = DEFAULT_THEME,
    user_name: Callable[[int], str] = identity.user_name,
    group_name: Callable[[int], str] = identity.group_name,
) -> None:
    """Write the rendered line for ``entry`` to ``out``."""
    out.write(format_entry(entry, options, theme=theme, user_name=user_name, group_name=group_name))


__all__ = [
    "SIZE_FIELD_WIDTH",
    "MTIME_FORMAT",
    "permission_string",
    "format_mtime",
    "format_name",
    "format_entry",
    "write_entry",
]
