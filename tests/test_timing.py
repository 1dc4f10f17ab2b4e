import time

from xtlo.timing import duration, timed


def sleepy(value):
    def run():
        time.sleep(0.01)
        return value

    return run


def test_duration():
    elapsed = duration(lambda: time.sleep(0.01))
    assert 0.009 <= elapsed < 0.5


def test_timed_single_value():
    result, elapsed = timed(sleepy("a"))
    assert result == "a"
    assert 0.009 <= elapsed < 0.5


def test_timed_many_values():
    letters = ("a", "b", "c", "d", "e", "f", "g", "h", "i", "j")
    result, elapsed = timed(sleepy(letters))
    assert result == letters
    assert 0.009 <= elapsed < 0.5


def test_timed_propagates_errors():
    def fail():
        raise ValueError("boom")

    try:
        timed(fail)
    except ValueError as error:
        assert str(error) == "boom"
    else:
        raise AssertionError("expected ValueError")