"""
Partition strategies producing (test, train) index splits.

All generators are lazy: splits are produced one at a time so that leave-p-out
over large populations never materializes every subset.
"""

import logging
import operator
from collections.abc import Iterator

import numpy as np

from domain.combinations import combinations
from domain.errors import InvalidParameterError
from domain.schemas import Split

logger = logging.getLogger(__name__)


def _require_positive_int(name: str, value: int) -> int:
    # bool is an int subclass but never a valid size
    if isinstance(value, bool):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    try:
        value = operator.index(value)
    except TypeError as err:
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}") from err
    if value < 1:
        raise InvalidParameterError(f"{name} must be >= 1, got {value}")
    return value


def validate_leave_p_out(n_samples: int, p: int) -> int:
    """
    Check p against the population size.

    An empty population accepts any p >= 1 (it simply yields no split).

    Returns:
        p as a plain int

    Raises:
        InvalidParameterError: If p is not an integer in [1, n_samples]
    """
    p = _require_positive_int("p", p)
    if n_samples and p > n_samples:
        raise InvalidParameterError(f"p={p} must not exceed the number of samples ({n_samples})")
    return p


def validate_k_fold(n_samples: int, k: int) -> int:
    """
    Check k. k larger than the number of samples is allowed but logged.

    Returns:
        k as a plain int

    Raises:
        InvalidParameterError: If k is not an integer >= 1
    """
    k = _require_positive_int("k", k)
    if n_samples and k > n_samples:
        logger.warning(
            "k=%d exceeds the number of samples (%d); all samples end up in a single fold.",
            k,
            n_samples,
        )
    return k


def leave_p_out_splits(n_samples: int, p: int) -> Iterator[Split]:
    """
    Yield one split per p-subset of range(n_samples).

    The test indices come in the order produced by the combination generator;
    train indices keep their original relative order.

    Raises:
        InvalidParameterError: If p is invalid (raised on creation, before any split)
    """
    p = validate_leave_p_out(n_samples, p)
    if n_samples == 0:
        return iter(())
    subsets = combinations(p, n_samples)
    return (Split(test=test, train=_complement(n_samples, test)) for test in subsets)


def leave_one_out_splits(n_samples: int) -> Iterator[Split]:
    """Leave-one-out is leave-p-out with p=1."""
    return leave_p_out_splits(n_samples, 1)


def _complement(n_samples: int, subset: list[int]) -> list[int]:
    excluded = set(subset)
    return [i for i in range(n_samples) if i not in excluded]


def make_folds(n_samples: int, k: int, rng: np.random.Generator | None = None) -> list[list[int]]:
    """
    Randomly distribute range(n_samples) into at most k folds of n_samples // k indices.

    Indices are drawn uniformly without replacement and appended to the current
    fold until it is full. A trailing partial fold is kept, then only the first
    k folds survive: leftover samples are excluded from the experiment entirely.
    When n_samples < k the fold size is 0 and every index lands in a single fold.

    Args:
        n_samples: Population size
        k: Number of folds
        rng: Randomness source; a fresh unseeded generator when None

    Returns:
        List of folds (lists of indices)
    """
    k = _require_positive_int("k", k)
    if rng is None:
        rng = np.random.default_rng()

    fold_size = n_samples // k
    remaining = list(range(n_samples))
    folds: list[list[int]] = []
    current: list[int] = []

    while remaining:
        pick = int(rng.integers(len(remaining)))
        current.append(remaining.pop(pick))
        if len(current) == fold_size:
            folds.append(current)
            current = []

    if current:
        folds.append(current)

    dropped = sum(len(fold) for fold in folds[k:])
    if dropped:
        logger.debug("k-fold: %d sample(s) beyond fold %d are left out of the experiment", dropped, k)

    return folds[:k]


def k_fold_splits(n_samples: int, k: int, rng: np.random.Generator | None = None) -> Iterator[Split]:
    """
    Yield one split per fold: the fold is the test set, the remaining folds
    concatenated in fold order form the train set.

    Raises:
        InvalidParameterError: If k is invalid (raised on creation, before any split)
    """
    k = validate_k_fold(n_samples, k)
    folds = make_folds(n_samples, k, rng)
    return (_fold_split(folds, i) for i in range(len(folds)))


def _fold_split(folds: list[list[int]], test_fold: int) -> Split:
    train: list[int] = []
    for j, fold in enumerate(folds):
        if j != test_fold:
            train.extend(fold)
    return Split(test=list(folds[test_fold]), train=train)
