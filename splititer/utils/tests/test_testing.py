import pytest

from splititer.utils.testing import CountingIterator, assert_partition, drain


def test_CountingIterator():
    it = CountingIterator("ab")
    assert iter(it) is it
    assert it.pulls == 0
    assert list(it) == ["a", "b"]
    assert it.pulls == 3
    assert repr(it) == "CountingIterator(pulls=3)"


@pytest.mark.parametrize("pattern, expected", [
    ((False,), ([0, 1], ["a"])),
    ((True,), ([0, 1], ["a"])),
    ((), ([0, 1], ["a"])),
])
def test_drain(pattern, expected):
    assert drain(iter([0, 1]), iter(["a"]), pattern) == expected


def test_drain_order():
    pulled = []

    def tracker(name, values):
        for value in values:
            pulled.append(name)
            yield value

    drain(tracker("L", range(3)), tracker("R", range(3)), (True, False, False))
    assert pulled == ["R", "L", "L", "R", "L", "R"]


def test_assert_partition():
    assert_partition([1, 2, 3], bool, [], [1, 2, 3])
    with pytest.raises(AssertionError):
        assert_partition([1, 2, 3], lambda n: n > 1, [1], [3, 2])
