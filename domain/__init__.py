"""
Domain layer: Cross-validation logic with minimal external dependencies.

Contains:
- combinations: lazy enumeration of index subsets
- partitioning: leave-one-out, leave-p-out and k-fold split generators
- labels: label set construction and shape checks
- schemas: Split / SplitOutcome / CrossValidationResult
- evaluation: confusion matrix accumulation and derived metrics
"""

from domain.errors import (
    CrossValidationError,
    InvalidParameterError,
    ShapeMismatchError,
    UnknownLabelError,
)
from domain.schemas import CrossValidationResult, Split, SplitOutcome

__all__ = [
    "CrossValidationResult",
    "Split",
    "SplitOutcome",
    "CrossValidationError",
    "ShapeMismatchError",
    "InvalidParameterError",
    "UnknownLabelError",
]
