import pytest

from xtlo import transform


class _Visitor:
    def __init__(self, stop_at):
        self.stop_at = stop_at
        self.items = []
        self.indexes = []

    def visit(self, item, index):
        if item == self.stop_at:
            return False
        self.items.append(item)
        self.indexes.append(index)
        return True


def test_filter_by():
    assert transform.filter_by([1, 2, 3, 4], lambda x, _i: x % 2 == 0) == [2, 4]
    assert transform.filter_by(["", "foo", "", "bar", ""], lambda x, _i: len(x) > 0) == [
        "foo",
        "bar",
    ]


def test_map_items():
    assert transform.map_items([1, 2, 3, 4], lambda x, _i: "Hello") == ["Hello"] * 4
    assert transform.map_items([1, 2, 3, 4], lambda x, _i: str(x)) == ["1", "2", "3", "4"]


def test_uniq_map():
    users = [("Alice", 20), ("Alex", 21), ("Alex", 22)]
    assert transform.uniq_map(users, lambda user, _i: user[0]) == ["Alice", "Alex"]


def test_filter_map():
    r1 = transform.filter_map([1, 2, 3, 4], lambda x, _i: (str(x), True) if x % 2 == 0 else ("", False))
    r2 = transform.filter_map(
        ["cpu", "gpu", "mouse", "keyboard"],
        lambda x, _i: ("xpu", True) if x.endswith("pu") else ("", False),
    )
    assert r1 == ["2", "4"]
    assert r2 == ["xpu", "xpu"]


def test_flat_map():
    r1 = transform.flat_map([0, 1, 2, 3, 4], lambda x, _i: ["Hello"])
    r2 = transform.flat_map([0, 1, 2, 3, 4], lambda x, _i: [str(x)] * x)
    assert r1 == ["Hello"] * 5
    assert r2 == ["1", "2", "2", "3", "3", "3", "4", "4", "4", "4"]


def test_flat_map_none_adds_nothing():
    assert transform.flat_map([1, 2, 3], lambda x, _i: None if x == 2 else [x]) == [1, 3]


def test_times():
    assert transform.times(3, str) == ["0", "1", "2"]


def test_times_negative_count():
    with pytest.raises(ValueError):
        transform.times(-1, str)


def test_reduce():
    assert transform.reduce([1, 2, 3, 4], lambda agg, item, _i: agg + item, 0) == 10
    assert transform.reduce([1, 2, 3, 4], lambda agg, item, _i: agg + item, 10) == 20


def test_reduce_right():
    result = transform.reduce_right([[0, 1], [2, 3], [4, 5]], lambda agg, item, _i: agg + item, [])
    assert result == [4, 5, 2, 3, 0, 1]
    assert transform.reduce_right([1, 2, 3, 4], lambda agg, item, _i: agg + item, 10) == 20


def test_for_each():
    items, indexes = [], []
    transform.for_each(["a", "b", "c"], lambda item, i: (items.append(item), indexes.append(i)))
    assert items == ["a", "b", "c"]
    assert indexes == [0, 1, 2]


def test_for_each_while():
    visitor = _Visitor("c")
    outcome = (
        transform.for_each_while(["a", "b", "c"], visitor.visit),
        visitor.items,
        visitor.indexes,
    )
    assert outcome == (None, ["a", "b"], [0, 1])


def test_uniq():
    assert transform.uniq([1, 2, 2, 1]) == [1, 2]


def test_uniq_by():
    assert transform.uniq_by([0, 1, 2, 3, 4, 5], lambda i: i % 3) == [0, 1, 2]


def test_group_by():
    assert transform.group_by([0, 1, 2, 3, 4, 5], lambda i: i % 3) == {
        0: [0, 3],
        1: [1, 4],
        2: [2, 5],
    }


def test_group_by_map():
    result = transform.group_by_map([0, 1, 2, 3, 4, 5], lambda i: (i % 3, str(i)))
    assert result == {0: ["0", "3"], 1: ["1", "4"], 2: ["2", "5"]}

    result2 = transform.group_by_map([1, 0, 2, 3, 4, 5], lambda i: (i % 3, str(i)))
    assert result2 == {0: ["0", "3"], 1: ["1", "4"], 2: ["2", "5"]}

    products = [(1, 1), (2, 1), (3, 2), (4, 3), (5, 3)]
    result3 = transform.group_by_map(products, lambda p: (p[1], f"Product {p[0]}"))
    assert result3 == {
        1: ["Product 1", "Product 2"],
        2: ["Product 3"],
        3: ["Product 4", "Product 5"],
    }


def test_chunk():
    assert transform.chunk([0, 1, 2, 3, 4, 5], 2) == [[0, 1], [2, 3], [4, 5]]
    assert transform.chunk([0, 1, 2, 3, 4, 5, 6], 2) == [[0, 1], [2, 3], [4, 5], [6]]
    assert transform.chunk([], 2) == []
    assert transform.chunk([0], 2) == [[0]]


def test_chunk_invalid_size():
    with pytest.raises(ValueError, match="Second parameter must be greater than 0"):
        transform.chunk([0], 0)


def test_chunk_does_not_alias_original():
    original = [0, 1, 2, 3, 4, 5]
    chunks = transform.chunk(original, 2)
    chunks[0].append(6)
    assert original == [0, 1, 2, 3, 4, 5]


def test_partition_by():
    def odd_even(x):
        if x < 0:
            return "negative"
        return "even" if x % 2 == 0 else "odd"

    assert transform.partition_by([-2, -1, 0, 1, 2, 3, 4, 5], odd_even) == [
        [-2, -1],
        [0, 2, 4],
        [1, 3, 5],
    ]
    assert transform.partition_by([], odd_even) == []


def test_flatten():
    assert transform.flatten([[0, 1], [2, 3, 4, 5]]) == [0, 1, 2, 3, 4, 5]


@pytest.mark.parametrize(
    "collections, expected",
    [
        ([[]], []),
        ([], []),
        ([[], []], []),
        ([[1, 3, 5], [2, 4, 6]], [1, 2, 3, 4, 5, 6]),
        ([[1, 3, 5, 6], [2, 4]], [1, 2, 3, 4, 5, 6]),
        ([[1], [2, 5, 8], [3, 6], [4, 7, 9, 10]], [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]),
    ],
)
def test_interleave(collections, expected):
    assert transform.interleave(*collections) == expected


def test_shuffle():
    data = list(range(11))
    result = transform.shuffle(data)
    assert result is data
    assert sorted(result) == list(range(11))
    assert transform.shuffle([]) == []


def test_reverse():
    assert transform.reverse([0, 1, 2, 3, 4, 5]) == [5, 4, 3, 2, 1, 0]
    assert transform.reverse([0, 1, 2, 3, 4, 5, 6]) == [6, 5, 4, 3, 2, 1, 0]
    assert transform.reverse([]) == []


def test_fill():
    assert transform.fill([{"v": "a"}, {"v": "a"}], {"v": "b"}) == [{"v": "b"}, {"v": "b"}]
    assert transform.fill([], {"v": "a"}) == []


def test_fill_makes_independent_copies():
    result = transform.fill([0, 0], {"v": "b"})
    result[0]["v"] = "changed"
    assert result[1] == {"v": "b"}


def test_repeat():
    assert transform.repeat(2, {"v": "a"}) == [{"v": "a"}, {"v": "a"}]
    assert transform.repeat(0, {"v": "a"}) == []


def test_repeat_by():
    square = lambda i: i**2  # noqa: E731
    assert transform.repeat_by(0, square) == []
    assert transform.repeat_by(2, square) == [0, 1]
    assert transform.repeat_by(5, square) == [0, 1, 4, 9, 16]


def test_key_by():
    assert transform.key_by(["a", "aa", "aaa"], len) == {1: "a", 2: "aa", 3: "aaa"}


ASSOCIATE_CASES = [
    ([("apple", 1)], {"apple": 1}),
    ([("apple", 1), ("banana", 2)], {"apple": 1, "banana": 2}),
    ([("apple", 1), ("apple", 2)], {"apple": 2}),
]


@pytest.mark.parametrize("items, expected", ASSOCIATE_CASES)
def test_associate(items, expected):
    assert transform.associate(items, lambda f: (f[0], f[1])) == expected


@pytest.mark.parametrize("items, expected", ASSOCIATE_CASES)
def test_slice_to_map(items, expected):
    assert transform.slice_to_map(items, lambda f: (f[0], f[1])) == expected


@pytest.mark.parametrize(
    "items, expected",
    [
        ([("apple", 1)], {}),
        ([("apple", 1), ("banana", 2)], {"banana": 2}),
        ([("apple", 1), ("apple", 2)], {"apple": 2}),
    ],
)
def test_filter_slice_to_map(items, expected):
    assert transform.filter_slice_to_map(items, lambda f: (f[0], f[1], f[1] > 1)) == expected


def test_keyify():
    assert transform.keyify([1, 2, 3, 4]) == {1, 2, 3, 4}
    assert transform.keyify([1, 1, 1, 2]) == {1, 2}
    assert transform.keyify([]) == set()