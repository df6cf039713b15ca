# callcenter

An interactive call-center simulator for the terminal. Incoming calls are
placed in one of three queues by priority (high, medium, low). They are
answered in priority order, and within each queue the oldest call goes first.
Every answered call is kept in a history together with a simulated wait time
of 1 to 10 minutes. When you leave, a report shows how many calls were
answered per priority, the average wait for each, and the clients who were
served.

The menu and all messages are in Portuguese.

## Installation

```
pip install .
```

## Running

```
callcenter
```

The command takes no options other than `--help`. The menu offers:

1. Add a new call. You enter the client name (at most 99 characters are
   kept), the reason for the call (at most 199 characters are kept) and the
   priority (1 = high, 2 = medium, 3 = low). Any other number goes to the low
   queue. Input that is not a number counts as low too.
2. Show the three queues.
3. Answer the next call.
4. Show the attendance history, newest first.
5. Print the final report and quit.

The program also stops when standard input ends.

## Using it as a library

```python
import random

from callcenter.calls import Call, Priority
from callcenter.service import CallCenter

center = CallCenter(random.Random(42))
center.add_call(Call("Ana", "Billing question", Priority.LOW))
center.add_call(Call("Bruno", "Service outage", Priority.HIGH))

entry = center.attend_next()        # Bruno is answered first
print(entry.call.name, entry.wait_minutes)

print(center.statistics.total(), center.statistics.average(Priority.HIGH))
print(center.report())
```

- `callcenter.calls` provides `Priority`, `Call`, `describe_priority()` and
  `CallQueues`. `CallQueues` has the methods `add()`, `pop_next()`,
  `is_empty()`, `calls()` and `format_queue()`, and supports `len()` and
  iteration.
- `callcenter.history.History` is the stack of answered calls. It has the
  methods `push()`, `pop()`, `is_empty()`, `count()`, `clear()` and
  `format()`. Iterating over it with `for entry in history` yields
  `HistoryEntry` objects, most recent first.
- `callcenter.service` provides `Statistics`, `CallCenter` and
  `format_attendance()`. `CallCenter.attend_next()` returns `None` when every
  queue is empty. The wait time is drawn with the `randint` method of the
  random source passed to `CallCenter`.
- `callcenter.cli.run(stdin, stdout, center=None)` runs the menu on any pair
  of text streams.

## What it does not do

Queues, history and statistics are kept in memory only. Nothing is saved to
disk, so everything is lost when the program exits. Choosing option 5 also
clears the history.

## Tests

```
pip install .[test]
pytest
```