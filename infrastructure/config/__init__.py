"""
Configuration management: models, loading, and validation.

Handles:
- ExperimentConfig: Main experiment configuration
- ClassifierConfig / DataConfig: classifier selection and dataset mapping
- Environment variable overrides (CV_*)

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import apply_env_overrides, load_experiment_config
from infrastructure.config.models import (
    ClassifierConfig,
    DataConfig,
    # Main config
    ExperimentConfig,
    # Enums
    Strategy,
)

__all__ = [
    # Main config (most commonly used)
    "ExperimentConfig",
    "load_experiment_config",
    # Enums
    "Strategy",
    # Sections
    "ClassifierConfig",
    "DataConfig",
    # Loaders
    "apply_env_overrides",
]
