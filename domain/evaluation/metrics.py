"""Per-class metrics derived from an aggregated confusion matrix."""

import warnings

import numpy as np
import pandas as pd
from sklearn.exceptions import UndefinedMetricWarning
from sklearn.metrics import precision_recall_fscore_support

from domain.schemas import CrossValidationResult


def confusion_matrix_frame(result: CrossValidationResult) -> pd.DataFrame:
    """Confusion matrix as a DataFrame (rows=true, cols=pred)."""
    labels = result.labels
    return pd.DataFrame(
        np.asarray(result.confusion_matrix, dtype=np.int64).reshape(len(labels), len(labels)),
        index=[f"true_{label}" for label in labels],
        columns=[f"pred_{label}" for label in labels],
    )


def per_class_metrics(result: CrossValidationResult) -> dict[str, dict]:
    """
    Compute precision, recall, F1 and support per label from the confusion matrix.

    Each non-zero cell becomes one (true position, predicted position) pair
    weighted by its count, so scikit-learn sees exactly the recorded predictions.
    Labels never predicted (or never present) get 0.0 (zero_division=0).

    Args:
        result: Aggregated cross-validation result

    Returns:
        Dict with 'precision_per_class', 'recall_per_class', 'f1_per_class',
        'support_per_class', each keyed by the label's string form
    """
    labels = [str(label) for label in result.labels]
    n_labels = len(labels)
    cm = np.asarray(result.confusion_matrix, dtype=np.int64).reshape(n_labels, n_labels)

    if cm.sum() == 0:
        zeros = [0.0] * n_labels
        precision, recall, f1_per_class = zeros, zeros, zeros
        support = [0] * n_labels
    else:
        rows, cols = np.nonzero(cm)
        with warnings.catch_warnings():
            warnings.filterwarnings(
                "ignore",
                category=UserWarning,
                message="y_pred contains classes not in y_true",
            )
            warnings.filterwarnings("ignore", category=UndefinedMetricWarning)

            precision, recall, f1_per_class, support = precision_recall_fscore_support(
                rows,
                cols,
                labels=list(range(n_labels)),
                sample_weight=cm[rows, cols],
                zero_division=0,
            )
        precision = np.round(precision.astype(float), 4).tolist()
        recall = np.round(recall.astype(float), 4).tolist()
        f1_per_class = np.round(f1_per_class.astype(float), 4).tolist()
        # weighted support comes back as float counts
        support = np.rint(support).astype(np.int64).tolist()

    return {
        "precision_per_class": dict(zip(labels, precision, strict=False)),
        "recall_per_class": dict(zip(labels, recall, strict=False)),
        "f1_per_class": dict(zip(labels, f1_per_class, strict=False)),
        "support_per_class": dict(zip(labels, support, strict=False)),
    }


def summarize_result(result: CrossValidationResult) -> dict:
    """Flat, JSON-friendly summary: the raw result plus per-class metrics."""
    accuracy = result.accuracy if result.has_predictions else None
    summary = {
        "labels": [str(label) for label in result.labels],
        "confusion_matrix": result.confusion_matrix,
        "accuracy": accuracy,
        "correct": result.correct,
        "nb_prediction": result.nb_prediction,
        "nb_splits": result.nb_splits,
    }
    summary.update(per_class_metrics(result))
    return summary
