"""Domain model for directory listings.

This package contains the non-rendering listing primitives:
- entry and metadata-snapshot datatypes plus listing options
- single-directory scanning with hidden filtering and per-entry stat
- byte-wise name ordering
"""

from __future__ import annotations

from .types import Entry, EntryKind, ListingOptions, MetadataSnapshot
from .fs import DirectoryUnreadable, read_directory, stat_entry
from .sorting import entry_sort_key, sort_entries

__all__ = [
    "Entry",
    "EntryKind",
    "ListingOptions",
    "MetadataSnapshot",
    "DirectoryUnreadable",
    "read_directory",
    "stat_entry",
    "entry_sort_key",
    "sort_entries",
]
