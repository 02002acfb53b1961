"""Owner and group name lookup with numeric fallback and a small cache."""

from __future__ import annotations

import grp
import logging
import pwd
from functools import lru_cache

logger = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def user_name(uid: int) -> str:
    """Return login name for ``uid``, or the id itself when it has no passwd entry."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        logger.debug("No passwd entry for uid %d", uid)
        return str(uid)


@lru_cache(maxsize=256)
def group_name(gid: int) -> str:
    """Return group name for ``gid``, or the id itself when it has no group entry."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        logger.debug("No group entry for gid %d", gid)
        return str(gid)


def clear_identity_cache() -> None:
    """Clear in-memory uid/gid name caches."""
    user_name.cache_clear()
    group_name.cache_clear()


__all__ = [
    "user_name",
    "group_name",
    "clear_identity_cache",
]
