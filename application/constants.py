"""Application-level constants."""

from pathlib import Path

# Output filenames
METRICS_FILENAME = "metrics.json"
CONFUSION_MATRIX_FILENAME = "confusion_matrix.csv"
CONFIG_SNAPSHOT_FILENAME = "config.resolved.json"
DATA_FINGERPRINT_FILENAME = "data_fingerprint.json"

# Output directory structure
OUTPUT_ROOT = Path("outputs")
LOG_FILENAME = "run.log"
