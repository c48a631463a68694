"""Cross-validation summary logging."""

import logging
from pathlib import Path

from domain.evaluation.metrics import confusion_matrix_frame, per_class_metrics
from domain.schemas import CrossValidationResult

logger = logging.getLogger(__name__)


def log_evaluation_summary(
    result: CrossValidationResult,
    strategy: str,
    metrics_path: Path | None = None,
    confusion_matrix_path: Path | None = None,
) -> None:
    """
    Log a concise, human-readable evaluation summary.

    Args:
        result: Aggregated cross-validation result
        strategy: Strategy label for the header (e.g. 'k_fold (k=5)')
        metrics_path: Path to metrics JSON file (optional)
        confusion_matrix_path: Path to confusion matrix CSV file (optional)
    """
    logger.info("=== Cross-validation Summary (%s) ===", strategy)
    logger.info("Splits: %d, predictions: %d, correct: %d", result.nb_splits, result.nb_prediction, result.correct)

    if not result.has_predictions:
        logger.info("No prediction was made; accuracy is undefined.")
    else:
        logger.info("Accuracy: %.4f", result.accuracy)
        logger.debug("Confusion matrix (rows=true, cols=pred):\n%s", confusion_matrix_frame(result))

        per_class = per_class_metrics(result)
        logger.info("Per-class precision: %s", per_class["precision_per_class"])
        logger.info("Per-class recall: %s", per_class["recall_per_class"])
        logger.info("Per-class F1: %s", per_class["f1_per_class"])
        logger.info("Per-class support: %s", per_class["support_per_class"])

    if metrics_path is not None or confusion_matrix_path is not None:
        logger.info("--- Artifacts ---")
    if metrics_path is not None:
        logger.info("Metrics JSON: %s", metrics_path)
    if confusion_matrix_path is not None:
        logger.info("Confusion matrix CSV: %s", confusion_matrix_path)
