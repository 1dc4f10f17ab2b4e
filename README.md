# xtlo

Small helpers for everyday work with lists, numbers and strings, plus
retry, debounce, throttle, saga-style transaction and timing utilities.
It uses only the standard library.

## Modules

### `xtlo.transform`: building and reshaping lists

`filter_by`, `map_items`, `uniq_map`, `filter_map`, `flat_map`, `reduce`,
`reduce_right`, `for_each`, `for_each_while`, `times`, `uniq`, `uniq_by`,
`group_by`, `group_by_map`, `chunk`, `partition_by`, `flatten`,
`interleave`, `shuffle`, `reverse`, `fill`, `repeat`, `repeat_by`, `key_by`,
`associate`, `slice_to_map`, `filter_slice_to_map`, `keyify`.

Callbacks named `predicate` or `iteratee` that work item by item receive
`(item, index)` where the name says so in the docstring; grouping and keying
callbacks receive only the item. `chunk` raises `ValueError` for a size
below 1; `times`, `repeat` and `repeat_by` raise `ValueError` for a negative
count. `fill` and `repeat` hand out deep copies of the initial value.
`shuffle` and `reverse` work in place and return the same list.

### `xtlo.slicing`: dropping, counting and cutting

`drop`, `drop_right`, `drop_while`, `drop_right_while`, `drop_by_index`,
`reject`, `reject_map`, `filter_reject`, `count`, `count_by`,
`count_values`, `count_values_by`, `subset`, `slice_range`, `replace`,
`replace_all`, `compact`, `is_sorted`, `is_sorted_by_key`, `splice`.

`subset`, `slice_range` and `splice` never fail on indexes out of range;
negative offsets count back from the end. `replace` with a negative `n`
replaces every occurrence. `compact` drops falsy items.

### `xtlo.mutable`: in-place variants

`filter_in_place`, `filter_in_place_indexed`, `map_in_place`,
`map_in_place_indexed`, `shuffle`, `reverse`, `fill`.

`filter_in_place` moves the kept items to the front of the list, leaves the
positions after them untouched and returns the kept prefix:

```python
from xtlo.mutable import filter_in_place

items = [1, 2, 3, 4]
filter_in_place(items, lambda n: n % 2 == 0)  # [2, 4]
items                                          # [2, 4, 3, 4]
```

### `xtlo.parallel`: callbacks on threads

`map_items`, `for_each`, `times`, `group_by`, `partition_by`. The callbacks
run on a thread pool; results keep the order of the input.

### `xtlo.arith`: ranges and aggregates

`range_n`, `range_from`, `range_with_steps`, `clamp`, `sum_of`, `sum_by`,
`product`, `product_by`, `mean`, `mean_by`.

`product` of an empty or missing collection is 1; `mean` of an empty one
is 0, and integer means are truncated toward zero.

### `xtlo.text`: strings

`random_string`, `substring`, `chunk_string`, `rune_length`, `words`,
`capitalize`, `pascal_case`, `camel_case`, `kebab_case`, `snake_case`,
`ellipsis`, and the charsets `LOWER_CASE_LETTERS_CHARSET`,
`UPPER_CASE_LETTERS_CHARSET`, `LETTERS_CHARSET`, `NUMBERS_CHARSET`,
`ALPHANUMERIC_CHARSET`, `SPECIAL_CHARSET`, `ALL_CHARSET`.

`random_string` and `chunk_string` raise `ValueError` for a size below 1;
`random_string` also for an empty charset.

### `xtlo.retry`: retrying, debouncing, throttling, transactions

- `attempt(max_iteration, func)` calls `func(index)` until it returns
  without raising and gives back the number of calls. With `max_iteration`
  below 1 it tries forever; otherwise the last exception is re-raised.
- `attempt_with_delay(max_iteration, delay, func)` does the same, sleeping
  `delay` seconds between calls; `func` gets `(index, elapsed_seconds)` and
  the result is `(calls, elapsed_seconds)`.
- `attempt_while` and `attempt_while_with_delay` take a `func` that returns
  `(error_or_None, should_continue)`; the error is raised when `func` stops
  with one or the tries run out.
- `Debounce(duration, *callbacks)` runs the callbacks once `duration`
  seconds pass without a call; `cancel()` stops it for good.
- `DebounceBy(duration, *callbacks)` debounces per key; callbacks get
  `(key, count)`, and `cancel(key)` drops one key.
- `Throttle(interval, *callbacks, count=1)` and
  `ThrottleBy(interval, *callbacks, count=1)` run the callbacks at most
  `count` times (per key for `ThrottleBy`) in each interval; `reset()`
  starts a fresh interval.
- `Transaction` chains steps with `then(execute, on_rollback)`.
  `process(state)` returns the final state; when a step raises, the
  rollbacks of the completed steps run in reverse order and
  `TransactionFailed` is raised with the rolled-back value in `.state`. A
  step may raise `TransactionFailed(state)` itself to fail with an updated
  state.

### `xtlo.timing`

`duration(callback)` returns the seconds a call took; `timed(callback)`
returns `(result, seconds)`.

## Examples

```python
from xtlo.transform import chunk, uniq
from xtlo.slicing import splice
from xtlo.text import snake_case, camel_case
from xtlo.arith import range_with_steps

chunk([0, 1, 2, 3, 4, 5, 6], 2)      # [[0, 1], [2, 3], [4, 5], [6]]
uniq([1, 2, 2, 1])                   # [1, 2]
splice(["a", "b", "c"], 1, "1", "2") # ['a', '1', '2', 'b', 'c']
snake_case("HTTPStatusCode")         # 'http_status_code'
camel_case("Hello world!")           # 'helloWorld'
range_with_steps(0, 20, 6)           # [0, 6, 12, 18]
```

A transaction that rolls back on failure:

```python
from xtlo.retry import Transaction, TransactionFailed

def fail(state):
    raise RuntimeError("step failed")

tx = (
    Transaction()
    .then(lambda s: s + 100, lambda s: s - 100)
    .then(fail, lambda s: s - 21)
)
try:
    tx.process(21)
except TransactionFailed as exc:
    exc.state  # 21
```

Retrying until a call succeeds:

```python
from xtlo.retry import attempt

def flaky(index):
    if index < 3:
        raise RuntimeError("not yet")

attempt(10, flaky)  # 4
```

## What it does not do

This is a library only: it has no command-line tool. Durations and delays
are plain seconds as floats.

## Tests

The tests are written for pytest and live in `tests/`; the `test` extra
installs pytest.