"""I/O utilities: filesystem operations and dataset loading."""

from infrastructure.io.datasets import read_table, split_features_labels
from infrastructure.io.fs import ensure_exists, write_json

__all__ = [
    "ensure_exists",
    "write_json",
    "read_table",
    "split_features_labels",
]
