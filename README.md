# utilkit

A collection of small, dependency-free data structures and helpers for
Python 3.10 and newer.

| Module | What it provides |
| --- | --- |
| `utilkit.simpleset` | `SimpleSet`: an open-addressing set of `str` or `bytes` keys with union, intersection, difference, symmetric difference, subset/superset checks and `compare`; `default_hash` (64-bit FNV-1a); `SetComparison`; `SetFullError` |
| `utilkit.hashmap` | `HashMap`: an open-addressing map with string keys, `fnv1a_64` hashing and `stats()` returning a `HashMapStats`; `HashMapFullError` |
| `utilkit.llist` | `LinkedList` and `LinkedListNode`: a singly linked list with index-based `insert` and `remove` |
| `utilkit.fifo` | `Queue` and `QueueNode`: a first-in first-out queue that can be walked forwards and with `reversed()` |
| `utilkit.stack` | `Stack` and `StackNode`: a last-in first-out stack |
| `utilkit.permutations` | `Permutations`: steps through every string of a fixed length over an alphabet |
| `utilkit.timing` | `Timing`, `TimeVal` and `timeval_diff`: measure elapsed wall time and format it as `HH:MM:SS:mmm.uuu` |
| `utilkit.vec` | `Vec`: a bounds-checked growable array that tracks its capacity |
| `utilkit.result` | `Result` and `ResultError`: an ok/error value with `unwrap` and `check` |
| `utilkit.logger` | `Logger` and `LogLevel`: a levelled logger writing `file:line message` lines to a stream and, optionally, a file |
| `utilkit.minicli` | `CliParser` and `CliArgument`: a minimal flag-to-callback dispatcher |

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Examples

### Sets

```python
from utilkit.simpleset import SetComparison, SimpleSet

a = SimpleSet()
b = SimpleSet()
for word in ("red", "green", "blue"):
    a.add(word)          # True when added, False if already present
b.add("blue")

assert "red" in a
assert b.is_subset(a) and b.is_strict_subset(a)
print(sorted(a.difference(b)))          # ['green', 'red']
assert a.compare(b) is SetComparison.LEFT_GREATER
a.remove("red")                         # KeyError if absent
```

The table starts with 1024 slots and doubles once more than a quarter of
them are used. A custom hash function taking `bytes` may be passed as
`SimpleSet(num_els, hash_function)`.

### Hash map

```python
from utilkit.hashmap import HashMap

m = HashMap()
m["answer"] = 42
previous = m.set("answer", 43)   # returns the replaced value (42)
assert m.get("missing") is None
assert m.pop("missing", "default") == "default"
print(m.fullness())              # percentage of slots in use
print(m.stats().report())
```

`HashMap` supports `in`, `len()`, iteration over keys, `keys()`, `del`
and `clear()`.

### Lists, queues, stacks and vectors

```python
from utilkit.fifo import Queue
from utilkit.llist import LinkedList
from utilkit.stack import Stack
from utilkit.vec import Vec

ll = LinkedList([0, 1, 2])
ll.insert(1, 99)        # an index at or past the end appends
assert list(ll) == [0, 99, 1, 2]
assert ll.remove(1) == 99

q = Queue([1, 2, 3])
assert q.pop() == 1
assert list(reversed(q)) == [3, 2]

s = Stack([1, 2, 3])
assert s.pop() == 3

v = Vec([3, 1, 2])
v.sort()
assert v.capacity() == 8
assert v.remove_fast(0) == 1   # moves the last item into the gap
```

Popping an empty `Queue`, `Stack` or `Vec`, and out-of-range indexes on
`LinkedList` and `Vec`, raise `IndexError`.

### Permutations

```python
from utilkit.permutations import Permutations

p = Permutations(3, "AB")
p.inc()
print(str(p))        # AAB
print(p.current())   # (0, 0, 1)
p.add(7)             # adding wraps past the last permutation
p.sub(100)           # subtracting stops at the first permutation
```

### Timing

```python
from utilkit.timing import Timing

with Timing() as t:
    ...  # work
print(t.timing_double, t.format_time_diff())
```

`start()` and `end()` may be called directly; `calc_difference()` recomputes
the breakdown from `start_time` and `end_time`.

### Results

```python
from utilkit.result import Result, ResultError

ok = Result.success(10)
assert ok.unwrap("load") == 10

bad = Result.failure("could not read %s", "config")
assert bad.check("load") is False     # writes "[result] ERROR in load: ..." to stderr
try:
    bad.unwrap("load")
except ResultError as exc:
    print(exc)                        # FATAL in load: could not read config
```

Failure messages are truncated to 255 characters.

### Logging

```python
from utilkit.logger import Logger, LogLevel

with Logger(LogLevel.DEBUG, "app.log") as log:
    log.info("processed %d items", 10)
```

Messages below the logger's level are dropped; `LogLevel.NONE` silences
everything. Lines go to the given `stream` (stderr by default) and, if a
file path is given, are appended to that file.

### Command-line dispatch

```python
from utilkit.minicli import CliArgument, CliParser

def show(rest, data):
    print(data, rest)

parser = CliParser("tool", "demo")
parser.add_argument(CliArgument("--show", show, shorthand="-s", user_data="x"))
parser.parse(["tool", "-s", "a", "b"])   # prints: x ['a', 'b']
```

`parse` runs only the callback of the first registered flag it finds after
`argv[0]` and returns that `CliArgument`, or `None`.

## What it does not do

utilkit is a library only: it installs no command. `CliParser` does not
print help or usage text, does not reject unknown flags and does not parse
option values; it hands the remaining tokens to a callback. `Logger` does
not rotate or trim its file.

## Running the tests

```
pytest
```