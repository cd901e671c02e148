"""A process-wide Manager."""

from __future__ import annotations

from taskpool.fdlimit import raise_limit
from taskpool.parallel import Manager, Task, Waiter

_manager: Manager | None = None


def init(workercount: int) -> None:
    """Try to raise the open-files limit and create the shared Manager."""
    global _manager
    try:
        raise_limit()
    except (OSError, ValueError):
        pass
    _manager = Manager(workercount)


def _current() -> Manager:
    if _manager is None:
        raise RuntimeError("shared manager is not initialised")
    return _manager


def close() -> None:
    """Wait for the shared Manager's tasks to finish and close it."""
    _current().close()


def run(task: Task, waiter: Waiter) -> None:
    """Run `task` on the shared Manager."""
    _current().run(task, waiter)