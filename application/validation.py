"""Train/predict cycle for a single split."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from domain.evaluation.confusion import ConfusionTally
from domain.schemas import Split, SplitOutcome
from infrastructure.classifiers.base import ClassifierFactory

logger = logging.getLogger(__name__)


def take(values: Sequence[Any], indices: list[int]) -> Any:
    """
    Project values through an index list, preserving the index order.

    numpy arrays and pandas objects keep their type (fancy indexing / iloc);
    any other sequence becomes a list.
    """
    if hasattr(values, "iloc"):
        return values.iloc[indices]
    if isinstance(values, np.ndarray):
        return values[np.asarray(indices, dtype=np.intp)]
    return [values[i] for i in indices]


def validate_split(
    classifier_factory: ClassifierFactory,
    features: Sequence[Any],
    labels: Sequence[Any],
    split: Split,
    tally: ConfusionTally,
    classifier_options: Mapping[str, Any] | None = None,
) -> SplitOutcome:
    """
    Train a fresh classifier on the train indices and score it on the test indices.

    Every (true, predicted) pair is recorded in the shared tally. The classifier
    must return one prediction per test sample; this is not checked. Exceptions
    raised by the classifier propagate unchanged and earlier splits already
    recorded in the tally are not rolled back.

    Args:
        classifier_factory: Builds a classifier from classifier_options
        features: All feature vectors of the dataset
        labels: All labels of the dataset
        split: Test and train indices
        tally: Shared confusion matrix (mutated in place)
        classifier_options: Options passed to the factory

    Returns:
        SplitOutcome(total=len(split.test), correct=number of exact matches)

    Raises:
        UnknownLabelError: If the classifier predicts a label outside the dataset labels
    """
    train_features = take(features, split.train)
    train_labels = take(labels, split.train)
    test_features = take(features, split.test)
    test_labels = take(labels, split.test)

    classifier = classifier_factory(classifier_options)
    classifier.train(train_features, train_labels)
    predicted_labels = classifier.predict(test_features)

    if hasattr(test_labels, "tolist"):
        test_labels = test_labels.tolist()
    if hasattr(predicted_labels, "tolist"):
        predicted_labels = predicted_labels.tolist()

    correct = 0
    for true_label, predicted_label in zip(test_labels, predicted_labels, strict=False):
        if tally.record(true_label, predicted_label):
            correct += 1

    logger.debug(
        "Split done: n_train=%d n_test=%d correct=%d",
        len(split.train),
        len(split.test),
        correct,
    )
    return SplitOutcome(total=len(split.test), correct=correct)
