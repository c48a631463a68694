"""Lazy enumeration of index subsets (used by leave-p-out)."""

import itertools
import math
import operator
from collections.abc import Iterator

from domain.errors import InvalidParameterError


def _as_int(name: str, value: int) -> int:
    # bool is an int subclass but never a valid size
    if isinstance(value, bool):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError as err:
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}") from err


def _validate(p: int, n: int) -> tuple[int, int]:
    p = _as_int("p", p)
    n = _as_int("n", n)
    if n < 0:
        raise InvalidParameterError(f"n must be a non-negative integer, got {n!r}")
    if p < 1:
        raise InvalidParameterError(f"p must be >= 1, got {p}")
    if p > n:
        raise InvalidParameterError(f"p={p} must not exceed the population size n={n}")
    return p, n


def _iter_subsets(p: int, n: int) -> Iterator[list[int]]:
    for subset in itertools.combinations(range(n), p):
        yield list(subset)


def combinations(p: int, n: int) -> Iterator[list[int]]:
    """
    Yield every subset of size p drawn from range(n), exactly once.

    Subsets come out in lexicographic order, each as a list of increasing indices.
    The returned iterator is single-use. Arguments are validated immediately,
    not on the first call to next().

    Args:
        p: Subset size (1 <= p <= n)
        n: Population size

    Returns:
        Iterator over C(n, p) index lists

    Raises:
        InvalidParameterError: If p < 1 or p > n
    """
    p, n = _validate(p, n)
    return _iter_subsets(p, n)


def count_combinations(p: int, n: int) -> int:
    """Number of subsets produced by combinations(p, n)."""
    p, n = _validate(p, n)
    return math.comb(n, p)
