"""Utility functions for testing purposes"""
import itertools
from contextlib import contextmanager
from typing import Any, Callable, Iterable, Iterator, List, Sequence, Tuple


class CountingIterator:
    """Iterator over `iterable`, counting the number of pulls.

    Each call to `next` is counted, including the one signaling exhaustion.
    """

    def __init__(self, iterable: Iterable) -> None:
        self._iterator = iter(iterable)
        self.pulls = 0

    def __iter__(self):
        return self

    def __next__(self):
        self.pulls += 1
        return next(self._iterator)

    def __repr__(self) -> str:
        return f"CountingIterator(pulls={self.pulls})"


def drain(left: Iterator, right: Iterator, pattern: Sequence[bool]) -> Tuple[List, List]:
    """Drain `left` and `right` iterators into two lists.

    Iterators are pulled alternatively according to `pattern` (cycled), where
    `True` denotes a pull on `right`, and `False` a pull on `left`.
    Once an iterator is exhausted, the other one is drained.
    """
    drained = ([], [])
    iterators = (left, right)
    active = {False, True}
    if not pattern:
        pattern = (False,)

    for is_right in itertools.cycle(pattern):
        if not active:
            break
        if is_right not in active:
            is_right = not is_right
        try:
            drained[is_right].append(next(iterators[is_right]))
        except StopIteration:
            active.discard(is_right)

    return drained


def assert_partition(
    source: Sequence[Any],
    predicate: Callable[[Any], bool],
    left: List[Any],
    right: List[Any],
) -> None:
    """Asserts that `left` and `right` are the ordered partition of `source` by `predicate`"""
    assert left == [elem for elem in source if not predicate(elem)]
    assert right == [elem for elem in source if predicate(elem)]
    assert len(left) + len(right) == len(source)


@contextmanager
def no_exception():
    """Context manager to assert that a block does not raise any exception"""
    try:
        yield

    except Exception as error:
        raise AssertionError(f"Unexpected exception raised: {error!r}")
