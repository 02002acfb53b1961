"""Filesystem scanning for one directory: hidden filter plus per-entry stat."""

from __future__ import annotations

import logging
import os

from .types import Entry, ListingOptions, MetadataSnapshot

logger = logging.getLogger(__name__)


class DirectoryUnreadable(Exception):
    """The directory itself could not be opened for enumeration."""

    def __init__(self, path: str | bytes | os.PathLike, error: OSError) -> None:
        self.path = os.fsdecode(path)
        self.error = error
        super().__init__(f"cannot open directory '{self.path}': {error.strerror or error}")

    @property
    def reason(self) -> str:
        """OS error text, e.g. ``No such file or directory``."""
        return self.error.strerror or str(self.error)


def stat_entry(directory: bytes, name: bytes) -> Entry | None:
    """Stat ``directory/name`` and return an entry, or ``None`` on failure.

    The query follows symlinks, so a dangling link has no metadata and is
    dropped along with permission denials and entries deleted mid-scan.
    """
    full_path = os.path.join(directory, name)
    try:
        st = os.stat(full_path)
    except OSError as exc:
        logger.debug("Dropping %r: metadata unavailable (%s)", full_path, exc)
        return None
    return Entry(name=name, metadata=MetadataSnapshot.from_stat_result(st))


def read_directory(path: str | bytes | os.PathLike, options: ListingOptions) -> list[Entry]:
    """List visible entries of ``path`` in platform order.

    Hidden names are skipped unless ``options.include_hidden`` is set.
    Raises ``DirectoryUnreadable`` when ``path`` cannot be opened; per-entry
    stat failures only drop that entry.
    """
    directory = os.fsencode(path)
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as it:
            for child in it:
                name = child.name
                if not options.include_hidden and name.startswith(b"."):
                    continue
                entry = stat_entry(directory, name)
                if entry is not None:
                    entries.append(entry)
    except OSError as exc:
        raise DirectoryUnreadable(path, exc) from exc
    return entries


__all__ = [
    "DirectoryUnreadable",
    "stat_entry",
    "read_directory",
]
