import math

import numpy as np
import pytest
from pydantic import ValidationError
from sklearn.metrics import precision_recall_fscore_support

from domain.evaluation import ConfusionTally, confusion_matrix_frame, per_class_metrics, summarize_result
from domain.labels import LabelIndex
from domain.schemas import CrossValidationResult, SplitOutcome


def _result(matrix: list[list[int]], labels: list[str]) -> CrossValidationResult:
    total = int(np.sum(matrix))
    correct = int(np.trace(np.asarray(matrix))) if matrix else 0
    return CrossValidationResult(
        confusion_matrix=matrix,
        accuracy=correct / total if total else float("nan"),
        labels=labels,
        nb_prediction=total,
        correct=correct,
        nb_splits=1,
    )


def test_tally_records_into_matrix_and_counts() -> None:
    tally = ConfusionTally(LabelIndex(["a", "b"]))

    assert tally.record("a", "a") is True
    assert tally.record("a", "b") is False
    assert tally.record("b", "b") is True
    tally.add_outcome(SplitOutcome(total=3, correct=2))

    result = tally.to_result()
    assert result.confusion_matrix == [[1, 1], [0, 1]]
    assert result.accuracy == pytest.approx(2 / 3)
    assert result.nb_prediction == 3
    assert result.nb_splits == 1
    assert result.labels == ["a", "b"]


def test_tally_accuracy_is_nan_without_predictions() -> None:
    tally = ConfusionTally(LabelIndex([]))
    result = tally.to_result()

    assert math.isnan(result.accuracy)
    assert result.nb_prediction == 0
    assert result.confusion_matrix == []
    assert result.has_predictions is False


def test_result_is_immutable() -> None:
    result = _result([[1]], ["a"])
    with pytest.raises(ValidationError):
        result.accuracy = 0.5  # type: ignore[misc]


def test_confusion_matrix_frame_labels() -> None:
    df = confusion_matrix_frame(_result([[2, 1], [0, 3]], ["x", "y"]))

    assert list(df.index) == ["true_x", "true_y"]
    assert list(df.columns) == ["pred_x", "pred_y"]
    assert df.loc["true_x", "pred_y"] == 1


def test_per_class_metrics_match_sklearn() -> None:
    y_true = ["a", "a", "a", "b", "b", "c", "c", "c", "c"]
    y_pred = ["a", "b", "a", "b", "c", "c", "c", "a", "c"]
    labels = ["a", "b", "c"]

    tally = ConfusionTally(LabelIndex(labels))
    for t, p in zip(y_true, y_pred, strict=True):
        tally.record(t, p)
    tally.add_outcome(SplitOutcome(total=len(y_true), correct=sum(t == p for t, p in zip(y_true, y_pred))))
    metrics = per_class_metrics(tally.to_result())

    precision, recall, f1, support = precision_recall_fscore_support(y_true, y_pred, labels=labels, zero_division=0)
    for i, label in enumerate(labels):
        assert metrics["precision_per_class"][label] == pytest.approx(precision[i], abs=1e-4)
        assert metrics["recall_per_class"][label] == pytest.approx(recall[i], abs=1e-4)
        assert metrics["f1_per_class"][label] == pytest.approx(f1[i], abs=1e-4)
        assert metrics["support_per_class"][label] == support[i]


def test_per_class_metrics_zero_division() -> None:
    metrics = per_class_metrics(_result([[0, 2], [0, 0]], ["a", "b"]))
    assert metrics["precision_per_class"] == {"a": 0.0, "b": 0.0}
    assert metrics["recall_per_class"] == {"a": 0.0, "b": 0.0}


def test_summarize_result_writes_null_accuracy_when_empty() -> None:
    summary = summarize_result(_result([], []))
    assert summary["accuracy"] is None
    assert summary["nb_prediction"] == 0


def test_per_class_metrics_without_predictions() -> None:
    result = CrossValidationResult(
        confusion_matrix=[[0, 0], [0, 0]],
        accuracy=float("nan"),
        labels=["a", "b"],
        nb_prediction=0,
    )

    metrics = per_class_metrics(result)

    assert metrics["precision_per_class"] == {"a": 0.0, "b": 0.0}
    assert metrics["f1_per_class"] == {"a": 0.0, "b": 0.0}
    assert metrics["support_per_class"] == {"a": 0, "b": 0}


def test_per_class_support_is_integer_count() -> None:
    metrics = per_class_metrics(_result([[3, 1], [2, 4]], ["x", "y"]))

    assert metrics["support_per_class"] == {"x": 4, "y": 6}
    assert all(type(v) is int for v in metrics["support_per_class"].values())
    assert metrics["precision_per_class"]["x"] == pytest.approx(0.6)
    assert metrics["recall_per_class"]["y"] == pytest.approx(0.6667, abs=1e-4)
