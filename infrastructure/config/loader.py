"""Configuration loading from YAML files and environment overrides."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import ClassifierConfig, DataConfig, ExperimentConfig, Strategy
from infrastructure.constants import DATA_DIR, ENV_PREFIX

logger = logging.getLogger(__name__)

# experiment.yaml key -> environment variable suffix
_ENV_OVERRIDES = {
    "strategy": "STRATEGY",
    "p": "P",
    "k": "K",
    "seed": "SEED",
    "data_dir": "DATA_DIR",
}


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def apply_env_overrides(exp: dict[str, Any], environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """
    Return a copy of the experiment mapping with CV_* environment variables applied.

    Empty variables are ignored. Values stay strings; pydantic coerces them.
    """
    env = os.environ if environ is None else environ
    out = dict(exp)
    for key, suffix in _ENV_OVERRIDES.items():
        value = env.get(f"{ENV_PREFIX}{suffix}")
        if value is None or not value.strip():
            continue
        logger.info("Overriding '%s' from environment (%s%s=%s)", key, ENV_PREFIX, suffix, value)
        out[key] = value.strip()
    return out


def load_experiment_config(experiment_path: Path, environ: Mapping[str, str] | None = None) -> ExperimentConfig:
    """
    Load experiment.yaml and construct a fully-resolved ExperimentConfig.

    Expected keys:
    - strategy: leave_one_out | leave_p_out | k_fold
    - p / k: strategy parameter
    - seed: optional seed for k-fold
    - classifier: {name, options}
    - data_file, label_col, feature_cols (optional), data_dir (optional)
    """
    exp = apply_env_overrides(_load_yaml(experiment_path), environ)

    if "data_file" not in exp or not exp.get("data_file"):
        raise ValueError("experiment.yaml missing required key: data_file")
    if "label_col" not in exp or not exp.get("label_col"):
        raise ValueError("experiment.yaml missing required key: label_col")

    strategy = Strategy(str(exp.get("strategy", Strategy.K_FOLD.value)).strip().lower())
    data_dir = Path(exp.get("data_dir", str(DATA_DIR)))

    classifier_raw = exp.get("classifier") or {}
    if isinstance(classifier_raw, str):
        classifier_raw = {"name": classifier_raw}
    if not isinstance(classifier_raw, dict):
        raise ValueError(f"classifier must be a name or a mapping, got {type(classifier_raw)}")

    classifier = ClassifierConfig(
        name=str(classifier_raw.get("name", "majority")).strip().lower(),
        options=dict(classifier_raw.get("options") or {}),
    )

    feature_cols = exp.get("feature_cols")
    data = DataConfig(
        file_path=data_dir / exp["data_file"],
        label_col=str(exp["label_col"]),
        feature_cols=[str(c) for c in feature_cols] if feature_cols else None,
    )

    return ExperimentConfig(
        strategy=strategy,
        p=exp.get("p"),
        k=exp.get("k"),
        seed=exp.get("seed"),
        classifier=classifier,
        data=data,
    )
