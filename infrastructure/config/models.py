"""Configuration models (Pydantic classes)."""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator


class Strategy(str, Enum):
    """Supported partitioning strategies."""

    LEAVE_ONE_OUT = "leave_one_out"
    LEAVE_P_OUT = "leave_p_out"
    K_FOLD = "k_fold"


class ClassifierConfig(BaseModel):
    """Which classifier to build for every split, and with which options."""

    name: str = Field(default="majority", description="Registered classifier name (module under classifiers/).")
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Options mapping passed unchanged to the classifier constructor.",
    )


class DataConfig(BaseModel):
    """Dataset location and column mapping."""

    file_path: Path = Field(..., description="Path to the dataset file (Excel or CSV).")
    label_col: str = Field(..., description="Column holding the class label.")
    feature_cols: list[str] | None = Field(
        default=None,
        description="Feature columns. If missing/None, every column except label_col is used.",
    )


class ExperimentConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from experiment.yaml
    - Environment overrides applied by the configuration loader
    - Consumed by the CLI and the cross-validation dispatcher
    """

    strategy: Strategy = Field(default=Strategy.K_FOLD, description="Partitioning strategy.")
    p: int | None = Field(default=None, description="Held-out subset size for leave_p_out.")
    k: int | None = Field(default=None, description="Number of folds for k_fold.")
    seed: int | None = Field(
        default=None,
        description="Seed for fold assignment. None keeps k-fold unseeded (different folds on each run).",
    )

    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    data: DataConfig

    @model_validator(mode="after")
    def _validate(self) -> "ExperimentConfig":
        if self.strategy is Strategy.LEAVE_P_OUT:
            if self.p is None:
                raise ValueError("p is required when strategy=leave_p_out")
            if self.p < 1:
                raise ValueError(f"p must be >= 1, got {self.p}")

        if self.strategy is Strategy.K_FOLD:
            if self.k is None:
                raise ValueError("k is required when strategy=k_fold")
            if self.k < 1:
                raise ValueError(f"k must be >= 1, got {self.k}")

        if not str(self.data.label_col).strip():
            raise ValueError("data.label_col is required in experiment.yaml")

        if self.data.feature_cols is not None:
            if not self.data.feature_cols:
                self.data.feature_cols = None
            elif self.data.label_col in self.data.feature_cols:
                raise ValueError(f"data.feature_cols must not contain the label column '{self.data.label_col}'")

        return self
