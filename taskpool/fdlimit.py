"""Raise the soft limit on open file descriptors."""

from __future__ import annotations

try:
    import resource
except ImportError:
    resource = None

MIN_OPEN_FILES_LIMIT = 1024


def raise_limit() -> int | None:
    """Lift the soft open-files limit to MIN_OPEN_FILES_LIMIT if the hard limit allows.

    Returns the soft limit afterwards, or None where there are no resource limits.
    """
    if resource is None:
        return None
    soft, hard = resource.getrlimit(resource.RLIMIT_NOFILE)
    infinity = resource.RLIM_INFINITY
    if soft == infinity or soft >= MIN_OPEN_FILES_LIMIT:
        return soft
    if hard != infinity and hard < MIN_OPEN_FILES_LIMIT:
        return soft
    resource.setrlimit(resource.RLIMIT_NOFILE, (MIN_OPEN_FILES_LIMIT, hard))
    return MIN_OPEN_FILES_LIMIT