import json
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from application.crossvalidation import leave_one_out
from application.serialize import save_result_artifacts
from infrastructure.classifiers.majority import MajorityClassifier
from infrastructure.io import read_table, split_features_labels
from infrastructure.observability import set_log_context


def test_read_table_csv(tmp_path: Path) -> None:
    path = tmp_path / "data.csv"
    pd.DataFrame({"x": [1, 2], "y": ["a", "b"]}).to_csv(path, index=False)

    df = read_table(path)
    assert list(df.columns) == ["x", "y"]


def test_read_table_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_table(tmp_path / "nope.csv")

    bad = tmp_path / "data.parquet"
    bad.write_bytes(b"")
    with pytest.raises(ValueError, match="Unsupported file format"):
        read_table(bad)


def test_split_features_labels_defaults_to_all_other_columns() -> None:
    df = pd.DataFrame({"x1": [0.0, 1.0, 2.0], "label": ["a", None, "b"], "x2": [3.0, 4.0, 5.0]})

    features, labels = split_features_labels(df, "label")

    # the row with a missing label is dropped
    assert labels == ["a", "b"]
    assert features.shape == (2, 2)
    np.testing.assert_array_equal(features[:, 1], [3.0, 5.0])


def test_split_features_labels_missing_columns() -> None:
    df = pd.DataFrame({"x": [1], "y": ["a"]})
    with pytest.raises(KeyError, match="label_col"):
        split_features_labels(df, "z")
    with pytest.raises(KeyError, match="feature_cols"):
        split_features_labels(df, "y", ["w"])


def test_save_result_artifacts(tmp_path: Path) -> None:
    set_log_context(run_id_full="run-artifacts", strategy="leave_one_out", classifier="majority")
    result = leave_one_out(MajorityClassifier, [[1], [2], [3], [4]], ["a", "a", "b", "b"])

    metrics_path, cm_path = save_result_artifacts(result, tmp_path / "run", extra={"strategy": "leave_one_out"})

    metrics = json.loads(metrics_path.read_text(encoding="utf-8"))
    assert metrics["accuracy"] == 0.0
    assert metrics["confusion_matrix"] == [[0, 2], [2, 0]]
    assert metrics["nb_prediction"] == 4
    assert metrics["strategy"] == "leave_one_out"
    assert metrics["support_per_class"] == {"a": 2, "b": 2}
    assert metrics["log_context"]["run_id_full"] == "run-artifacts"
    assert metrics["log_context"]["strategy"] == "leave_one_out"
    assert metrics["log_context"]["classifier"] == "majority"

    cm = pd.read_csv(cm_path, index_col=0)
    assert list(cm.index) == ["true_a", "true_b"]
    assert cm.loc["true_a", "pred_b"] == 2
