import threading

import pytest

from taskpool import shared
from taskpool.parallel import Waiter


def test_runs_tasks_on_shared_manager():
    shared.init(3)
    waiter = Waiter()
    done = []
    lock = threading.Lock()

    def make(i):
        def task():
            with lock:
                done.append(i)
        return task

    for i in range(6):
        shared.run(make(i), waiter)
    waiter.wait()
    shared.close()
    assert sorted(done) == list(range(6))
    assert list(waiter.errors()) == []


def test_errors_reach_waiter():
    shared.init(2)
    waiter = Waiter()

    def task():
        raise ValueError("boom")

    shared.run(task, waiter)
    waiter.wait()
    shared.close()
    errors = list(waiter.errors())
    assert [str(e) for e in errors] == ["boom"]


def test_run_after_close_raises_and_init_renews():
    shared.init(2)
    shared.close()
    with pytest.raises(RuntimeError):
        shared.run(lambda: None, Waiter())

    shared.init(2)
    waiter = Waiter()
    ran = threading.Event()
    shared.run(ran.set, waiter)
    waiter.wait()
    shared.close()
    assert ran.is_set()