"""Label set construction and input shape checks."""

from collections.abc import Hashable, Iterable, Sequence, Sized
from typing import Any

from domain.errors import ShapeMismatchError, UnknownLabelError


def get_distinct(labels: Iterable[Hashable]) -> list[Hashable]:
    """
    Deduplicate labels, keeping the order of first appearance.

    Examples:
        >>> get_distinct(["b", "a", "b", "c", "a"])
        ['b', 'a', 'c']
    """
    # dict preserves insertion order
    return list(dict.fromkeys(labels))


def check(features: Sized, labels: Sized) -> None:
    """
    Fail fast when features and labels differ in length.

    Raises:
        ShapeMismatchError: If len(features) != len(labels)
    """
    n_features = len(features)
    n_labels = len(labels)
    if n_features != n_labels:
        raise ShapeMismatchError(
            f"features and labels should have the same length (got {n_features} features, {n_labels} labels)"
        )


class LabelIndex:
    """Ordered label set used as the row/column index of the confusion matrix."""

    __slots__ = ("_labels", "_positions")

    def __init__(self, labels: Iterable[Hashable]) -> None:
        self._labels: tuple[Hashable, ...] = tuple(get_distinct(labels))
        self._positions: dict[Hashable, int] = {label: i for i, label in enumerate(self._labels)}

    @property
    def labels(self) -> tuple[Hashable, ...]:
        return self._labels

    def index_of(self, label: Any) -> int:
        """Return the position of label, raising UnknownLabelError if it is not in the set."""
        try:
            return self._positions[label]
        except (KeyError, TypeError) as err:
            raise UnknownLabelError(
                f"Label {label!r} is not one of the dataset labels {list(self._labels)!r}"
            ) from err

    def __contains__(self, label: object) -> bool:
        try:
            return label in self._positions
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self):
        return iter(self._labels)

    def __repr__(self) -> str:
        return f"LabelIndex({list(self._labels)!r})"


def to_label_list(labels: Sequence[Any]) -> list[Any]:
    """Convert numpy scalar labels to plain Python values for serialization."""
    return [label.item() if hasattr(label, "item") else label for label in labels]
