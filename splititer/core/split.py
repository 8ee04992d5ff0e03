"""
Lazy partition of an iterable into two iterators, according to a predicate.

>>> left, right = split(range(1, 10), lambda v: v % 2 == 0)
>>> list(left)
[1, 3, 5, 7, 9]
>>> list(right)
[2, 4, 6, 8]
"""
import logging
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional, Tuple

from splititer.core.config import get_configuration
from splititer.utils.context import ContextLock
from splititer.utils.helpers import check_arg
from splititer.utils.logging import LogLevel, branch_name

logger = logging.getLogger(__name__)


DEFAULT_BUFFER_SIZE = object()


class SplitBufferOverflow(RuntimeError):
    """Raised when a bounded split buffer cannot receive more elements."""


class SharedSplitState:
    """Inner state shared by the two branches of a split.

    Parameters
    ----------
    iterator : Iterator
        Source iterator; owned by the shared state from now on.
    predicate : Callable[[Any], bool]
        Function choosing whether an element goes left (`False`)
        or right (`True`).
    maxsize : int, optional
        Maximum number of elements buffered for the branch lagging
        behind; default None (unbounded).
    """

    __slots__ = (
        "_iterator", "_predicate", "_maxsize",
        "_cache", "_is_right_cached", "_exhausted", "_lock",
    )

    def __init__(self, iterator: Iterator, predicate: Callable, maxsize: Optional[int] = None):
        self._iterator = iterator
        self._predicate = predicate
        self._maxsize = maxsize
        # FIFO of elements awaiting branch `_is_right_cached`
        self._cache = deque()
        self._is_right_cached = False
        self._exhausted = False
        self._lock = ContextLock(
            "Split iterators cannot be pulled while their predicate is evaluated"
        )

    @property
    def iterator(self) -> Iterator:
        """Iterator : source iterator"""
        return self._iterator

    @property
    def maxsize(self) -> Optional[int]:
        """Optional[int] : buffer capacity; None if unbounded"""
        return self._maxsize

    @property
    def buffered(self) -> int:
        """int : number of elements currently buffered"""
        return len(self._cache)

    @property
    def is_exhausted(self) -> bool:
        """bool : has the source iterator been exhausted?"""
        return self._exhausted

    def next_item(self, is_right: bool) -> Any:
        """Returns next element for the branch identified by `is_right`.

        Raises
        ------
        StopIteration
            If no element is left for the requested branch.
        SplitBufferOverflow
            If the source must be pulled while the buffer is full.
        RuntimeError
            If called from within the predicate.
        """
        with self._lock:
            return self.__next_item(is_right)

    def __next_item(self, is_right: bool) -> Any:
        cache = self._cache

        if cache and self._is_right_cached == is_right:
            return cache.popleft()

        if self._exhausted:
            raise StopIteration

        predicate = self._predicate
        maxsize = self._maxsize

        while True:
            if maxsize is not None and len(cache) >= maxsize:
                other = branch_name(not is_right)
                raise SplitBufferOverflow(
                    f"Buffer of {other} branch is full ({maxsize} element(s));"
                    f" consume {other} branch before pulling {branch_name(is_right)} branch"
                )
            try:
                element = next(self._iterator)
            except StopIteration:
                self._exhausted = True
                logger.log(
                    LogLevel.DEBUG,
                    "Source exhausted; %d element(s) left in buffer",
                    len(cache),
                    extra={"branch": branch_name(is_right)},
                )
                raise

            if bool(predicate(element)) == is_right:
                return element

            self._is_right_cached = not is_right
            cache.append(element)
            logger.log(
                LogLevel.FULL_DEBUG,
                "Buffered %r for %s branch",
                element,
                branch_name(not is_right),
                extra={"branch": branch_name(is_right)},
            )

    def __repr__(self) -> str:
        return "{}(iter={!r}, buffered={}, exhausted={})".format(
            type(self).__name__, self._iterator, len(self._cache), self._exhausted,
        )


class Splittable(Iterable):
    """Mixin providing method `split` to iterable classes.

    Concrete subclasses must implement `__iter__`, which supplies
    the source iterator of the split.
    """

    __slots__ = ()

    def split(self, predicate: Callable[[Any], bool], maxsize=DEFAULT_BUFFER_SIZE) -> Tuple["Split", "Split"]:
        """Splits the iterable into two iterators.

        See :py:func:`~splititer.core.split.split`.
        """
        return split(self, predicate, maxsize)


class Split(Splittable, Iterator):
    """One of a pair of iterators. One returns the elements for which the
    predicate returns `False` (left), the other one returns the elements for
    which the predicate returns `True` (right).

    Splits are created by :py:func:`~splititer.core.split.split`.
    """

    __slots__ = ("_shared", "_is_right")

    def __init__(self, shared: SharedSplitState, is_right: bool) -> None:
        self._shared = shared
        self._is_right = bool(is_right)

    @property
    def is_right(self) -> bool:
        """bool : is the iterator the right one or the left one?"""
        return self._is_right

    @property
    def shared(self) -> SharedSplitState:
        """SharedSplitState : state shared with the opposite iterator"""
        return self._shared

    def __next__(self) -> Any:
        return self._shared.next_item(self._is_right)

    def __repr__(self) -> str:
        return "Split({}, iter={!r})".format(
            branch_name(self._is_right), self._shared.iterator,
        )


class SplittableIterator(Splittable, Iterator):
    """Iterator over any iterable, providing method `split`.

    Parameters
    ----------
    iterable : Iterable
        Wrapped iterable collection.
    """

    __slots__ = ("_iterator",)

    def __init__(self, iterable: Iterable) -> None:
        self._iterator = iter(iterable)

    def __next__(self) -> Any:
        return next(self._iterator)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._iterator!r})"


def splittable(iterable: Iterable) -> Splittable:
    """Returns `iterable` if it already provides method `split`,
    or a :py:class:`SplittableIterator` wrapping it otherwise.
    """
    if isinstance(iterable, Splittable):
        return iterable
    return SplittableIterator(iterable)


def split(
    iterable: Iterable,
    predicate: Callable[[Any], bool],
    maxsize=DEFAULT_BUFFER_SIZE,
) -> Tuple[Split, Split]:
    """Splits `iterable` into two lazy iterators, according to `predicate`.

    The left iterator yields all elements for which `predicate` returns
    `False`; the right iterator yields all elements for which `predicate`
    returns `True`. Both preserve the original order. No element is drawn
    from `iterable` before one of the iterators is pulled, and each element
    is drawn (and tested) exactly once.

    Elements drawn by one iterator on behalf of the other one are buffered
    until requested. Exceptions raised by `predicate` or by the source
    iterator propagate through the iterator being pulled.

    Parameters
    ----------
    iterable : Iterable
        Collection to split.
    predicate : Callable[[Any], bool]
        Boolean function routing elements.
    maxsize : int or None, optional
        Capacity of the buffer; None for unbounded.
        Default is the configured `buffer_size`.

    Returns
    -------
    left, right : tuple[Split, Split]

    Raises
    ------
    TypeError
        If `iterable` is not iterable, if `predicate` is not callable,
        or if `maxsize` is neither an int nor None.
    ValueError
        If `maxsize` is a bool, or is not strictly positive.
    """
    if maxsize is DEFAULT_BUFFER_SIZE:
        maxsize = get_configuration().buffer_size
    check_arg(predicate, "predicate", Callable)
    check_arg(maxsize, "maxsize", (int, type(None)),
        lambda n: n is None or (not isinstance(n, bool) and n > 0))

    shared = SharedSplitState(iter(iterable), predicate, maxsize)

    left = Split(shared, is_right=False)
    right = Split(shared, is_right=True)

    return left, right
