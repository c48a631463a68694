"""Dataset loading utilities."""

import logging
from pathlib import Path

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def read_table(path: Path) -> pd.DataFrame:
    """
    Read tabular data file (Excel or CSV) based on file extension.

    Supported formats:
    - Excel: .xlsx, .xls
    - CSV: .csv

    Args:
        path: Path to data file

    Returns:
        pandas DataFrame

    Raises:
        ValueError: If file format is not supported
        FileNotFoundError: If file does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in [".xlsx", ".xls"]:
        return pd.read_excel(path)
    elif suffix == ".csv":
        return pd.read_csv(path)
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .xlsx, .xls, .csv")


def split_features_labels(
    df: pd.DataFrame,
    label_col: str,
    feature_cols: list[str] | None = None,
) -> tuple[np.ndarray, list]:
    """
    Extract the feature matrix and the label list from a dataset.

    Args:
        df: Dataset
        label_col: Column holding the class label
        feature_cols: Feature columns; every other column when None

    Returns:
        Tuple of (features array of shape (n_samples, n_features), labels list)

    Raises:
        KeyError: If a configured column is not in the DataFrame
    """
    if label_col not in df.columns:
        raise KeyError(f"Configured label_col='{label_col}' not found in dataset columns: {list(df.columns)}")

    if feature_cols is None:
        feature_cols = [c for c in df.columns if c != label_col]
    else:
        missing = [c for c in feature_cols if c not in df.columns]
        if missing:
            raise KeyError(f"Configured feature_cols {missing} not found in dataset columns: {list(df.columns)}")

    rows_with_missing_label = int(df[label_col].isna().sum())
    if rows_with_missing_label:
        logger.warning("Dropping %d row(s) with a missing label in '%s'", rows_with_missing_label, label_col)
        df = df[df[label_col].notna()]

    features = df[feature_cols].to_numpy()
    labels = df[label_col].tolist()
    logger.debug("Extracted %d samples with %d feature(s)", features.shape[0], len(feature_cols))
    return features, labels
