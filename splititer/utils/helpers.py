"""
Various small helper functions.
"""
import os
import inspect
import numpy
from typing import Any, Callable, Iterable, Type, Union, Tuple


def get_typename(dtype: Union[Type, Tuple[Type]], multiformat="({})") -> str:
    if inspect.isclass(dtype):
        return dtype.__qualname__
    return multiformat.format(", ".join(sorted(set(t.__qualname__ for t in dtype))))


def check_arg(
    arg: Any,
    argname: str,
    dtype: Union[Type, Iterable[Type]],
    value_ok: Callable[[Any], bool] = None,
    stack_shift: int = 0,
):
    """
    Utility function for argument type and value validation.
    Raises a TypeError exception if type(arg) is not in type list given by 'dtype'.
    Raises a ValueError exception if value_ok(arg) is False, where 'value_ok' is a
    boolean function defining a validity criterion.

    For example:
    >>> check_arg(3, 'maxsize', int)
    does not raise any exception, as 3 is an int

    >>> check_arg(3, 'maxsize', (float, str))
    raises TypeError, as first argument is neither a float, nor a str

    >>> check_arg(-3, 'maxsize', int, value_ok = lambda n: n > 0)
    raises ValueError, as first argument is not strictly positive
    """
    def get_caller():
        level = 3 + max(0, stack_shift)
        stack = inspect.stack()
        return stack[level] if len(stack) > level else stack[-1]

    def get_context(caller):
        context = caller.code_context[0] if caller.code_context else ""
        return os.path.basename(caller.filename), caller.lineno, context

    # Check type
    if not isinstance(arg, dtype):
        valid = get_typename(dtype, multiformat="one of ({})")
        caller = get_caller()
        raise TypeError("argument '{}' should be {}; got {} {!r}\nIn {}, line #{}: \n{}".format(
            argname, valid, type(arg).__qualname__, arg, *get_context(caller)))
    # Check value
    if value_ok is not None and not value_ok(arg):
        caller = get_caller()
        raise ValueError("argument {!r} was given invalid value {!r}\nIn {}, line #{}: \n{}".format(
            argname, arg, *get_context(caller)))


def partition(iterable: Iterable[Any], predicate: Callable[[Any], bool]):
    """Partition a collection into two lists, using filter function `predicate`.

    Eager counterpart of :py:func:`~splititer.core.split.split`; note that
    elements satisfying `predicate` come first here.

    Parameters:
    -----------
    - iterable: Iterable[Any]
        Iterable collection of elements confronted to predicate.
        If `iterable` is a numpy array, it is partitioned along its first axis.
    - predicate: Callable[[Any], bool]
        Boolean function used to partition the collection.

    Returns:
    --------
    yays, nays: tuple[list, list] or tuple[numpy.ndarray, numpy.ndarray]
        Elements for which predicate is `True` (yays) and `False` (nays).
    """
    if isinstance(iterable, numpy.ndarray) and iterable.ndim > 0:
        mask = numpy.fromiter(
            (bool(predicate(element)) for element in iterable),
            dtype=bool,
            count=len(iterable),
        )
        return iterable[mask], iterable[~mask]

    yays, nays = [], []

    for element in iterable:
        if predicate(element):
            yays.append(element)
        else:
            nays.append(element)

    return yays, nays
