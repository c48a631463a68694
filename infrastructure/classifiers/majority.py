"""Majority-vote baseline classifier."""

import logging
from collections import Counter
from collections.abc import Mapping, Sequence
from typing import Any

from .base import Classifier
from .registry import register_classifier

logger = logging.getLogger(__name__)


class MajorityClassifier(Classifier):
    """Predicts the most frequent training label for every sample.

    Ties go to the label seen first in the training set. Features are ignored.
    """

    name = "majority"

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        super().__init__(options)
        self.majority_label: Any = None

    def train(self, features: Sequence[Any], labels: Sequence[Any]) -> None:
        if len(labels) == 0:
            raise ValueError("MajorityClassifier cannot be trained on an empty training set")
        # Counter keeps first-seen order among equal counts
        self.majority_label = Counter(labels).most_common(1)[0][0]

    def predict(self, features: Sequence[Any]) -> list[Any]:
        if self.majority_label is None:
            raise RuntimeError("MajorityClassifier must be trained before predicting")
        return [self.majority_label] * len(features)


register_classifier(MajorityClassifier.name, MajorityClassifier)
