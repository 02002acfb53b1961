"""Domain datatypes for one directory listing pass."""

from __future__ import annotations

import enum
import os
import stat
from dataclasses import dataclass

PERMISSION_BITS = 0o777


class EntryKind(enum.Enum):
    """Coarse file type used for rendering and recursion decisions."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> "EntryKind":
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.REGULAR
        return cls.OTHER


@dataclass(frozen=True)
class MetadataSnapshot:
    """Point-in-time ``stat`` capture for one entry."""

    kind: EntryKind
    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    mtime: float
    inode: int

    @classmethod
    def from_stat_result(cls, st: os.stat_result) -> "MetadataSnapshot":
        """Build a snapshot, keeping only the nine rwx permission bits of ``st_mode``."""
        return cls(
            kind=EntryKind.from_mode(st.st_mode),
            mode=st.st_mode & PERMISSION_BITS,
            nlink=int(st.st_nlink),
            uid=int(st.st_uid),
            gid=int(st.st_gid),
            size=int(st.st_size),
            mtime=float(st.st_mtime),
            inode=int(st.st_ino),
        )

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class Entry:
    """One directory member: raw filesystem name plus captured metadata."""

    name: bytes
    metadata: MetadataSnapshot

    @property
    def display_name(self) -> str:
        """Name decoded with ``os.fsdecode``; undecodable bytes become surrogates."""
        return os.fsdecode(self.name)

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(b".")

    @property
    def is_dir(self) -> bool:
        return self.metadata.is_dir


@dataclass(frozen=True)
class ListingOptions:
    """Display and traversal flags threaded through the whole pipeline."""

    long_format: bool = False
    include_hidden: bool = False
    recursive: bool = False
    show_inode: bool = False


__all__ = [
    "EntryKind",
    "MetadataSnapshot",
    "Entry",
    "ListingOptions",
    "PERMISSION_BITS",
]
