from pathlib import Path

import pytest
from pydantic import ValidationError

from infrastructure.config import (
    ClassifierConfig,
    DataConfig,
    ExperimentConfig,
    Strategy,
    apply_env_overrides,
    load_experiment_config,
)


def _data() -> DataConfig:
    return DataConfig(file_path=Path("dataset/data.csv"), label_col="label")


def test_leave_p_out_requires_p() -> None:
    with pytest.raises(ValidationError, match="p is required"):
        ExperimentConfig(strategy=Strategy.LEAVE_P_OUT, data=_data())


def test_k_fold_requires_positive_k() -> None:
    with pytest.raises(ValidationError, match="k is required"):
        ExperimentConfig(strategy=Strategy.K_FOLD, data=_data())
    with pytest.raises(ValidationError, match="k must be >= 1"):
        ExperimentConfig(strategy=Strategy.K_FOLD, k=0, data=_data())


def test_empty_feature_cols_fall_back_to_all_columns() -> None:
    cfg = ExperimentConfig(
        strategy=Strategy.LEAVE_ONE_OUT,
        data=DataConfig(file_path=Path("d.csv"), label_col="label", feature_cols=[]),
    )
    assert cfg.data.feature_cols is None
    assert cfg.classifier == ClassifierConfig(name="majority", options={})


def test_label_column_cannot_be_a_feature() -> None:
    with pytest.raises(ValidationError, match="must not contain the label column"):
        ExperimentConfig(
            strategy=Strategy.LEAVE_ONE_OUT,
            data=DataConfig(file_path=Path("d.csv"), label_col="label", feature_cols=["x", "label"]),
        )


def test_env_overrides_skip_empty_values() -> None:
    out = apply_env_overrides({"k": 5, "strategy": "k_fold"}, {"CV_K": "3", "CV_STRATEGY": "  "})
    assert out == {"k": "3", "strategy": "k_fold"}


def test_load_experiment_config(tmp_path: Path) -> None:
    path = tmp_path / "experiment.yaml"
    path.write_text(
        "\n".join(
            [
                "strategy: leave_p_out",
                "p: 2",
                "classifier:",
                "  name: Estimator",
                "  options:",
                "    params: {n_neighbors: 1}",
                f"data_dir: {tmp_path.as_posix()}",
                "data_file: data.csv",
                "label_col: species",
                "feature_cols: [x1, x2]",
            ]
        ),
        encoding="utf-8",
    )

    cfg = load_experiment_config(path, environ={})

    assert cfg.strategy is Strategy.LEAVE_P_OUT
    assert cfg.p == 2
    assert cfg.classifier.name == "estimator"
    assert cfg.classifier.options == {"params": {"n_neighbors": 1}}
    assert cfg.data.file_path == tmp_path / "data.csv"
    assert cfg.data.feature_cols == ["x1", "x2"]
    assert cfg.seed is None


def test_load_experiment_config_applies_env(tmp_path: Path) -> None:
    path = tmp_path / "experiment.yaml"
    path.write_text("strategy: leave_one_out\nclassifier: majority\ndata_file: d.csv\nlabel_col: y\n", encoding="utf-8")

    cfg = load_experiment_config(path, environ={"CV_STRATEGY": "k_fold", "CV_K": "4", "CV_SEED": "7"})

    assert cfg.strategy is Strategy.K_FOLD
    assert cfg.k == 4
    assert cfg.seed == 7
    assert cfg.classifier.name == "majority"


def test_load_experiment_config_missing_keys(tmp_path: Path) -> None:
    path = tmp_path / "experiment.yaml"
    path.write_text("strategy: leave_one_out\nlabel_col: y\n", encoding="utf-8")

    with pytest.raises(ValueError, match="data_file"):
        load_experiment_config(path, environ={})

    with pytest.raises(FileNotFoundError):
        load_experiment_config(tmp_path / "missing.yaml", environ={})
