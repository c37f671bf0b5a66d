# goconc

Go-style concurrency building blocks for Python threads.

- `goconc.chan`: buffered and unbuffered channels (`Chan`). They support
  blocking and non-blocking send and receive, closing, and iteration.
- `goconc.select_case`: `select` over channel operations. It takes receive,
  send and default cases and picks at random among the ready ones.
- `goconc.sync`: `WaitGroup`, `Once`, `Pool` and `RWMutex`, plus the aliases
  `Mutex` (`threading.Lock`) and `Cond` (`threading.Condition`).
- `goconc.defer`: `Defer`, which runs cleanup calls when a `with` block ends.
- `goconc.result`: `Result`, a container that holds a value or an error.
- `goconc.duration`: `Duration`, a whole number of nanoseconds with unit
  helpers and arithmetic.

The package uses only the standard library.

## Installation

```
pip install goconc
```

## Channels

```python
import threading
from goconc.chan import Chan

ch = Chan(2)          # buffered, capacity 2
ch.send("hello")
ch.send("world")
print(ch.recv(), ch.recv())

unbuffered = Chan()   # capacity 0: each send waits for a receiver
threading.Thread(target=lambda: unbuffered.send(42)).start()
print(unbuffered.recv())

ch.close()
print(ch.is_closed())
```

- Sending on a closed channel raises `ChannelClosedError`.
- Values buffered before the close can still be received. After that,
  `recv` raises `ChannelClosedError`.
- Iterating over a channel (`for v in ch`) yields values until it is closed
  and drained.
- `try_send` and `try_recv` never block. They raise `WouldBlockError` when
  the operation cannot go ahead at once, and `ChannelClosedError` when the
  channel is closed.
- `can_send()` and `can_recv()` report whether an operation would block.
- A negative capacity raises `ValueError`.

## Select

```python
from goconc.chan import Chan
from goconc.select_case import select, recv, send, default_case

a, b = Chan(1), Chan(1)
b.send(7)

select(
    recv(a, lambda v: print("from a", v)),
    recv(b, lambda v: print("from b", v)),
    default_case(lambda: print("nothing ready")),
)
```

- Exactly one case runs.
- When several cases are ready, one is chosen at random.
- A default case runs only when no other case is ready.
- Without a default case, `select` blocks until a channel becomes ready or
  is closed.
- A receive case's callback gets `None` when its channel is closed.
- A send case's callback gets `True` or `False`, telling whether the value
  was sent.

For finer control, build a `Select` yourself, call `add_case` for each case,
then call `run()`.

## Synchronisation

```python
import threading
from goconc.sync import WaitGroup, Once, Pool, RWMutex

wg = WaitGroup()
once = Once()

def worker():
    once.do(lambda: print("initialised once"))
    wg.done()

for _ in range(4):
    wg.add(1)
    threading.Thread(target=worker).start()
wg.wait()

pool = Pool(list)           # creates a new list when empty
buf = pool.get()
pool.put(buf)               # reused by the next get()

rw = RWMutex()
with rw.read_lock():
    pass                    # many readers at once
with rw.write_lock():
    pass                    # one writer; waiting writers go before new readers
```

- `WaitGroup.add` raises `ValueError` if the counter would go negative.
- If the function given to `Once.do` raises, it does not count as having
  run, so a later call tries it again.

## Defer and Result

```python
from goconc.defer import Defer

with Defer() as d:
    d.defer(print, "runs last")
    d.defer(print, "runs first")
```

Deferred calls run in reverse order, even when the block raises. If a
deferred call raises, the remaining calls still run, and the first exception
is raised again at the end.

```python
from goconc.result import Result

r = Result(value=42)
print(r.ok(), r.unwrap_or(0))          # True 42
bad = Result(err=ValueError("fail"))
print(bad.failed(), bad.unwrap_or(0))  # True 0
print(bool(bad))                       # False
```

## Durations

```python
from goconc.duration import Duration, seconds, milliseconds

d = seconds(1) + milliseconds(500)
print(d.milliseconds())     # 1500
print((d / 3).milliseconds())
print(d > Duration(Duration.SECOND))
print(d.to_timedelta())
```

- `seconds`, `minutes` and `hours` accept floats.
- Dividing by an integer truncates toward zero.

## What is not included

The package has no networking. It offers no TCP or UDP sockets and no HTTP
server or client. The `goconc.net` subpackage is present but contains no
modules.

## Running the tests

```
pip install goconc[test]
pytest
```