"""Text rendering for listing entries.

Exposes the single-line entry formatter and the identity lookups it uses.
"""

from __future__ import annotations

from .entry import format_entry, format_mtime, format_name, permission_string, write_entry
from .identity import clear_identity_cache, group_name, user_name

__all__ = [
    "format_entry",
    "format_mtime",
    "format_name",
    "permission_string",
    "write_entry",
    "clear_identity_cache",
    "group_name",
    "user_name",
]
