"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Classifiers (majority baseline, scikit-learn estimators)
- Configuration loading (YAML, environment)
- Dataset loading (CSV, Excel)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.classifiers import Classifier, make_classifier_factory
from infrastructure.config import (
    ExperimentConfig,
    Strategy,
    load_experiment_config,
)

__all__ = [
    # Classifier adapters (most commonly used)
    "make_classifier_factory",
    "Classifier",
    # Configuration (most commonly used)
    "load_experiment_config",
    "ExperimentConfig",
    "Strategy",
]
