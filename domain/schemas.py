"""Value types exchanged between partitioning, validation and aggregation."""

import math
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class Split(NamedTuple):
    """One train/test pairing: disjoint index lists into the sample set."""

    test: list[int]
    train: list[int]


class SplitOutcome(NamedTuple):
    """Counts reported by the validation of a single split."""

    total: int
    correct: int


class CrossValidationResult(BaseModel):
    """Aggregated outcome of one cross-validation run."""

    model_config = ConfigDict(frozen=True)

    confusion_matrix: list[list[int]] = Field(
        ...,
        description="Square matrix indexed by label position: rows are true labels, columns predicted labels.",
    )
    accuracy: float = Field(
        ...,
        description="correct / nb_prediction across all splits; NaN when no prediction was made.",
    )
    labels: list[Any] = Field(
        ...,
        description="Distinct labels in order of first appearance in the dataset.",
    )
    nb_prediction: int = Field(..., ge=0, description="Total number of predictions made.")
    correct: int = Field(default=0, ge=0, description="Number of correct predictions.")
    nb_splits: int = Field(default=0, ge=0, description="Number of train/test splits evaluated.")

    @property
    def has_predictions(self) -> bool:
        # accuracy is only meaningful when this is True
        return self.nb_prediction > 0 and not math.isnan(self.accuracy)
