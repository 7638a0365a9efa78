# boundedsims

A collection of small producer/consumer simulations. Each one runs a
producer and a consumer in separate threads that talk through a
thread-safe bounded buffer: the producer blocks while the buffer is full,
the consumer blocks while it is empty.

## The buffers

`boundedsims.buffer` provides the building blocks:

- `RingBuffer(capacity)` – a fixed-size first-in, first-out queue.
- `StackBuffer(capacity)` – a fixed-size last-in, first-out stack.
- `SyncBuffer(buffer)` – wraps either of the above with a lock and two
  condition variables, so `push` waits for free space and `pop` waits for
  an item.

`RingBuffer` and `StackBuffer` offer `push`, `pop`, `len()`, `is_full()`
and `is_empty()`. Pushing into a full one raises `BufferFullError`,
popping from an empty one raises `BufferEmptyError`, and a capacity below
1 raises `ValueError`.

```python
from boundedsims.buffer import RingBuffer, SyncBuffer

queue = SyncBuffer(RingBuffer(3))
queue.push(1)
queue.push(2)
assert queue.pop() == 1
assert len(queue) == 1
```

## The simulations

Install the package (`pip install .`) and run any of these commands. The
simulations print their messages in Slovak.

Number crunchers (no waiting, finish immediately):

| Command | Arguments | What it does |
| --- | --- | --- |
| `boundedsims-fibonacci` | `MIN MAX COUNT` | draws `COUNT` random numbers in `[MIN, MAX]` and prints those that are Fibonacci numbers, in the order drawn |
| `boundedsims-combinations` | `A B N` | draws `N` random pairs in `[A, B]` (at most 20) and prints each binomial coefficient as `(sCr) => value`, last pair first |
| `boundedsims-primes` | `A B N` | draws `N` random numbers in `[A, B]` (at most 10) and prints each as `n -> factors`, last number first |
| `boundedsims-columbo` | – | tallies 50 random pieces of evidence and names the guilty suspect |
| `boundedsims-teletubbies` | – | counts odd numbers among 1000 random ones and names the winner |

These three-argument commands print an error and exit with status 1 when
given the wrong number of arguments, a non-numeric argument, a range
whose maximum is below its minimum, or more pairs or numbers than the
buffer holds.

Timed scenes (they sleep between steps, so they take a while):

| Command | Arguments | What it does |
| --- | --- | --- |
| `boundedsims-bar` | `[CUSTOMERS]` (default 10) | a barman sets drinks on a one-slot bar, customers take them |
| `boundedsims-bakery` | `[CUSTOMERS [BAKE_TIME]]` (defaults 10 and 4) | a baker fills a two-loaf shelf, customers buy |
| `boundedsims-kitchen` | `[CAPACITY]` (default 10) | a cook hands dishes to two waiters over a counter of the given size; runs until interrupted with Ctrl-C |
| `boundedsims-election` | `[COUNT]` (default 15) | ballots are laid out, voters take them and vote; the result is printed with percentages |
| `boundedsims-investigation` | `[DETECTIVES [DELAY]]` (defaults 10 and 6) | a suspect plants evidence, detectives collect it; the verdict follows |

For the timed scenes, extra arguments beyond those listed are ignored
and the defaults are used; a non-numeric argument prints an error and
exits with status 1.

## Using the simulations from Python

Every simulation module exposes a `run` function that accepts a
`random.Random` instance, which makes the results reproducible:

```python
import random
from boundedsims import fibonacci

fibonacci.run(1, 100, 20, random.Random(42))
```

The timed scenes also take a `sleep` function and an `out` callable that
receives each message line, so they can run without delays and with their
output collected:

```python
import random
from boundedsims import election

lines = []
result = election.run(5, random.Random(1), sleep=lambda _: None, out=lines.append)
print(result.lines())
```

`kitchen.run` accepts `dishes=` to stop after that many dishes; it then
returns how many the waiters served.

Helper functions such as `fibonacci.is_fibonacci`,
`combinations.combination_count` and `primes.prime_factors` can be used on
their own.

## Running the tests

```
pip install .[test]
pytest
```