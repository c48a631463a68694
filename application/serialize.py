"""Result serialization utilities."""

import logging
from pathlib import Path
from typing import Any

from application.constants import CONFUSION_MATRIX_FILENAME, METRICS_FILENAME
from domain.evaluation.metrics import confusion_matrix_frame, summarize_result
from domain.schemas import CrossValidationResult
from infrastructure.io.fs import write_json
from infrastructure.observability.logging import get_log_context

logger = logging.getLogger(__name__)


def save_result_artifacts(
    result: CrossValidationResult,
    run_dir: Path,
    extra: dict[str, Any] | None = None,
) -> tuple[Path, Path]:
    """
    Write metrics JSON and confusion matrix CSV for a run.

    NaN accuracy is written as null. The current logging context (run id,
    strategy, classifier) is stored under "log_context".

    Args:
        result: Aggregated cross-validation result
        run_dir: Output directory of the run
        extra: Additional keys merged into the metrics JSON (e.g. strategy, classifier)

    Returns:
        Tuple of (metrics_path, confusion_matrix_path)
    """
    metrics = summarize_result(result)
    metrics["log_context"] = get_log_context()
    if extra:
        metrics.update(extra)

    metrics_path = write_json(run_dir / METRICS_FILENAME, metrics)
    logger.info("Saved metrics to %s", metrics_path)

    cm_path = run_dir / CONFUSION_MATRIX_FILENAME
    confusion_matrix_frame(result).to_csv(cm_path, encoding="utf-8")
    logger.info("Saved confusion matrix to %s", cm_path)

    return metrics_path, cm_path
