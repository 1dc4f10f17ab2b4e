import threading

import pytest

from xtlo.parallel import for_each, group_by, map_items, partition_by, times


def odd_even(x):
    if x < 0:
        return "negative"
    if x % 2 == 0:
        return "even"
    return "odd"


class _Recorder:
    def __init__(self):
        self.lock = threading.Lock()
        self.calls = []

    def record(self, item, index):
        with self.lock:
            self.calls.append((item, index))


def test_map_items():
    result1 = map_items([1, 2, 3, 4], lambda x, _i: "Hello")
    result2 = map_items([1, 2, 3, 4], lambda x, _i: str(x))
    assert result1 == ["Hello", "Hello", "Hello", "Hello"]
    assert result2 == ["1", "2", "3", "4"]


def test_map_items_passes_index():
    assert map_items(["a", "b", "c"], lambda x, i: f"{x}{i}") == ["a0", "b1", "c2"]


def test_map_items_empty():
    assert map_items([], lambda x, _i: x) == []


def test_map_items_propagates_errors():
    def fail(x, _i):
        if x == 3:
            raise ValueError("bad item")
        return x

    with pytest.raises(ValueError, match="bad item"):
        map_items([1, 2, 3, 4], fail)


def test_for_each():
    recorder = _Recorder()
    outcome = (for_each([1, 2, 3, 4], recorder.record), sorted(recorder.calls))
    assert outcome == (None, [(1, 0), (2, 1), (3, 2), (4, 3)])


def test_times():
    assert times(3, str) == ["0", "1", "2"]
    assert times(0, str) == []


def test_group_by():
    result = group_by([0, 1, 2, 3, 4, 5], lambda i: i % 3)
    assert {key: sorted(values) for key, values in result.items()} == {
        0: [0, 3],
        1: [1, 4],
        2: [2, 5],
    }


def test_group_by_single_key():
    assert group_by(["", "foo", "bar"], lambda _s: 42) == {42: ["", "foo", "bar"]}


def test_partition_by():
    result1 = partition_by([-2, -1, 0, 1, 2, 3, 4, 5], odd_even)
    result2 = partition_by([], odd_even)
    assert result1 == [[-2, -1], [0, 2, 4], [1, 3, 5]]
    assert result2 == []


def test_partition_by_length():
    assert partition_by(["", "foo", "bar"], len) == [[""], ["foo", "bar"]]