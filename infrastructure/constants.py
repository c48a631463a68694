from pathlib import Path

# Repo-root conventional directories/files (overrideable via experiment.yaml)
CONFIG_DIR = Path("configs")
EXPERIMENT_FILE = CONFIG_DIR / "experiment.yaml"

DATA_DIR = Path("dataset")

# Environment variables that override experiment.yaml values
ENV_PREFIX = "CV_"
