"""
Evaluation: aggregation of predictions across splits.

Provides:
- ConfusionTally: running confusion matrix and counters for one run
- Per-class metrics and a DataFrame view of the confusion matrix

All functions are pure (depend only on numpy, pandas, sklearn).
"""

from domain.evaluation.confusion import ConfusionTally
from domain.evaluation.metrics import confusion_matrix_frame, per_class_metrics, summarize_result

__all__ = [
    "ConfusionTally",
    "confusion_matrix_frame",
    "per_class_metrics",
    "summarize_result",
]
