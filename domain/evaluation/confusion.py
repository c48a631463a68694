"""Accumulation of per-split outcomes into a confusion matrix and accuracy."""

import numpy as np

from domain.labels import LabelIndex, to_label_list
from domain.schemas import CrossValidationResult, SplitOutcome


class ConfusionTally:
    """
    Running confusion matrix and prediction counters for one cross-validation run.

    The tally is owned by a single top-level call and mutated sequentially by the
    validation of each split. It is never reset mid-run.
    """

    def __init__(self, label_index: LabelIndex) -> None:
        self.label_index = label_index
        n = len(label_index)
        self.matrix = np.zeros((n, n), dtype=np.int64)
        self.total = 0
        self.correct = 0
        self.nb_splits = 0

    def record(self, true_label: object, predicted_label: object) -> bool:
        """
        Count one prediction in the matrix.

        Returns:
            True when the prediction matches the true label

        Raises:
            UnknownLabelError: If either label is not in the label set
        """
        row = self.label_index.index_of(true_label)
        col = self.label_index.index_of(predicted_label)
        self.matrix[row, col] += 1
        return bool(true_label == predicted_label)

    def add_outcome(self, outcome: SplitOutcome) -> None:
        self.total += outcome.total
        self.correct += outcome.correct
        self.nb_splits += 1

    @property
    def accuracy(self) -> float:
        if self.total == 0:
            return float("nan")
        return self.correct / self.total

    def to_result(self) -> CrossValidationResult:
        return CrossValidationResult(
            confusion_matrix=self.matrix.tolist(),
            accuracy=self.accuracy,
            labels=to_label_list(self.label_index.labels),
            nb_prediction=self.total,
            correct=self.correct,
            nb_splits=self.nb_splits,
        )
