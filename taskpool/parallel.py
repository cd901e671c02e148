"""Run tasks on threads with a bound on how many run at once."""

from __future__ import annotations

import os
import queue
import threading
from collections.abc import Callable, Iterator
from typing import Any

MIN_NUM_WORKERS = 2

Task = Callable[[], Any]

_CLOSED = object()


class _WaitGroup:
    def __init__(self) -> None:
        self._count = 0
        self._cond = threading.Condition()

    def add(self, delta: int = 1) -> None:
        with self._cond:
            self._count += delta
            if self._count == 0:
                self._cond.notify_all()

    def wait(self) -> None:
        with self._cond:
            self._cond.wait_for(lambda: self._count == 0)


class Waiter:
    """Tracks a batch of tasks and collects the exceptions they raise."""

    def __init__(self) -> None:
        self._pending = _WaitGroup()
        self._errors: queue.Queue = queue.Queue()

    def wait(self) -> None:
        """Block until every task has finished, then close the error stream."""
        self._pending.wait()
        self._errors.put(_CLOSED)

    def errors(self) -> Iterator[BaseException]:
        """Yield task exceptions until wait() closes the stream."""
        while (item := self._errors.get()) is not _CLOSED:
            yield item
        self._errors.put(_CLOSED)


class Manager:
    """Runs tasks concurrently, at most `workercount` at a time."""

    def __init__(self, workercount: int) -> None:
        if workercount < 0:
            workercount = (os.cpu_count() or 1) * -workercount
        self.workercount = max(workercount, MIN_NUM_WORKERS)
        self._semaphore = threading.BoundedSemaphore(self.workercount)
        self._active = _WaitGroup()
        self._closed = False

    def run(self, task: Task, waiter: Waiter) -> None:
        """Start `task` once a slot is free; its exception goes to `waiter`."""
        if self._closed:
            raise RuntimeError("manager is closed")
        waiter._pending.add()
        self._semaphore.acquire()
        self._active.add()

        def work() -> None:
            try:
                task()
            except Exception as exc:
                waiter._errors.put(exc)
            finally:
                self._active.add(-1)
                self._semaphore.release()
                waiter._pending.add(-1)

        threading.Thread(target=work, daemon=True).start()

    def close(self) -> None:
        """Wait for all tasks to finish and refuse new ones."""
        self._active.wait()
        self._closed = True

    def __enter__(self) -> Manager:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()