"""
CLI entrypoint for the cross-validation pipeline.

This script performs the following steps:
- loads .env (if present) and configs/experiment.yaml
- creates a per-run output folder under outputs/
- loads the dataset and extracts features/labels
- resolves the classifier and runs the configured cross-validation strategy
- saves metrics JSON and the confusion matrix CSV
- logs a human-readable summary of results
"""

import argparse
import logging
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import log_evaluation_summary, run_cross_validation, save_result_artifacts
from application.constants import (
    CONFIG_SNAPSHOT_FILENAME,
    DATA_FINGERPRINT_FILENAME,
    LOG_FILENAME,
    OUTPUT_ROOT,
)
from infrastructure.classifiers import make_classifier_factory
from infrastructure.config import Strategy, load_experiment_config
from infrastructure.constants import EXPERIMENT_FILE
from infrastructure.io import ensure_exists, read_table, split_features_labels, write_json
from infrastructure.observability import configure_logging, make_run_tag, set_log_context
from infrastructure.utils import make_rng

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run classifier cross-validation")
    p.add_argument(
        "--experiment",
        type=str,
        default=str(EXPERIMENT_FILE),
        help="Path to experiment.yaml (default: configs/experiment.yaml)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file with CV_* overrides (default: .env, skipped if missing)",
    )
    p.add_argument(
        "--output-root",
        type=str,
        default=str(OUTPUT_ROOT),
        help="Directory receiving per-run output folders (default: outputs)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="File log level",
    )
    return p.parse_args()


def _strategy_label(strategy: Strategy, p: int | None, k: int | None) -> str:
    if strategy is Strategy.LEAVE_P_OUT:
        return f"{strategy.value} (p={p})"
    if strategy is Strategy.K_FOLD:
        return f"{strategy.value} (k={k})"
    return strategy.value


def main() -> None:
    args = _parse_args()

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    experiment_path = Path(args.experiment)
    ensure_exists(experiment_path, "experiment.yaml")

    cfg = load_experiment_config(experiment_path)

    # ---- Per-run output folder ----
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    param = {Strategy.LEAVE_P_OUT: f"_p{cfg.p}", Strategy.K_FOLD: f"_k{cfg.k}"}.get(cfg.strategy, "")
    run_id = f"{ts}_{cfg.strategy.value}{param}_{cfg.classifier.name}"

    run_dir = Path(args.output_root) / run_id
    run_dir.mkdir(parents=True, exist_ok=True)

    log_path = run_dir / LOG_FILENAME
    configure_logging(
        log_file=log_path,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )

    set_log_context(
        run_id_full=run_id,
        strategy=cfg.strategy.value,
        classifier=cfg.classifier.name,
    )

    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))
    logger.info("Run output directory: %s", run_dir)
    if cfg.strategy is Strategy.K_FOLD and cfg.seed is None:
        logger.info("No seed configured: k-fold assignment is random and differs between runs.")

    # Load data
    logger.info("Loading dataset from %s...", cfg.data.file_path)
    df = read_table(cfg.data.file_path)
    logger.info("Dataset loaded: %d rows, %d columns", df.shape[0], df.shape[1])
    features, labels = split_features_labels(df, cfg.data.label_col, cfg.data.feature_cols)

    # Save snapshot config + data fingerprint
    write_json(run_dir / CONFIG_SNAPSHOT_FILENAME, cfg.model_dump(mode="json"))
    write_json(
        run_dir / DATA_FINGERPRINT_FILENAME,
        {
            "data_file": str(cfg.data.file_path),
            "rows": int(df.shape[0]),
            "columns": [str(c) for c in df.columns],
            "n_samples": len(labels),
            "n_features": int(features.shape[1]) if features.ndim == 2 else None,
        },
    )

    # Resolve classifier
    logger.info("Resolving classifier '%s'...", cfg.classifier.name)
    classifier_factory = make_classifier_factory(cfg.classifier.name)

    result = run_cross_validation(
        cfg,
        classifier_factory,
        features,
        labels,
        rng=make_rng(cfg.seed),
    )

    strategy_label = _strategy_label(cfg.strategy, cfg.p, cfg.k)
    metrics_path, cm_path = save_result_artifacts(
        result,
        run_dir,
        extra={
            "strategy": strategy_label,
            "classifier": cfg.classifier.name,
            "seed": cfg.seed,
            "run_id": run_id,
        },
    )

    # Human-readable summary
    log_evaluation_summary(
        result,
        strategy_label,
        metrics_path=metrics_path,
        confusion_matrix_path=cm_path,
    )

    logger.info("Detailed log: %s", log_path)


if __name__ == "__main__":
    main()
