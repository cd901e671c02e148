# taskpool

Run many small tasks on a bounded number of worker threads and collect the
errors they raise.

## Install

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Usage

A `Manager` limits how many tasks run at once. A `Waiter` tracks a batch of
tasks and hands back the exceptions they raised.

```python
from taskpool.parallel import Manager, Waiter

def fetch(n):
    def task():
        if n == 3:
            raise ValueError("bad item 3")
    return task

with Manager(4) as manager:
    waiter = Waiter()
    for n in range(10):
        manager.run(fetch(n), waiter)
    waiter.wait()
    for err in waiter.errors():
        print("failed:", err)
```

`Manager(workercount)` treats the worker count like this:

- a negative number means that many workers per CPU (`-2` on an 8-CPU machine
  gives 16);
- anything below 2 is raised to 2.

`Manager.run` blocks while all worker slots are busy. `Manager.close` waits for
every task it started to finish.

### Process-wide pool

`taskpool.shared` keeps one manager for the whole process:

```python
from taskpool import shared
from taskpool.parallel import Waiter

shared.init(8)
waiter = Waiter()
shared.run(lambda: None, waiter)
waiter.wait()
shared.close()
```

`shared.init` also tries to raise the soft limit on open files.

### Open-file limit

`taskpool.fdlimit.raise_limit()` raises the soft limit on open files to 1024
if it is lower and the hard limit allows it. On platforms without resource
limits it does nothing.