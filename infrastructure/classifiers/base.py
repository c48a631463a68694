"""Base interface for classifiers driven by the cross-validation engine."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from typing import Any


class Classifier(ABC):
    """
    Abstract base class for classifiers evaluated by cross-validation.

    A classifier is built from an options mapping (opaque to the engine),
    trained once on a labeled sample set, then queried for predictions.
    The engine builds a fresh instance for every split.

    All concrete classifiers must implement:
    - train(): fit on features/labels of equal length
    - predict(): return one label per feature vector, in order
    """

    name: str = "classifier"

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self.options: dict[str, Any] = dict(options or {})

    @abstractmethod
    def train(self, features: Sequence[Any], labels: Sequence[Any]) -> None:
        """Prepare the instance for prediction."""
        raise NotImplementedError

    @abstractmethod
    def predict(self, features: Sequence[Any]) -> list[Any]:
        """
        Predict labels for the given feature vectors.

        Precondition on implementations: the returned list has the same length
        and order as ``features``.
        """
        raise NotImplementedError


# Anything that turns an options mapping into a trainable/predictable instance
ClassifierFactory = Callable[[Mapping[str, Any] | None], Any]
