"""Error taxonomy for cross-validation runs."""


class CrossValidationError(ValueError):
    """Base class for input errors detected before or during a cross-validation run."""


class ShapeMismatchError(CrossValidationError):
    """Features and labels do not have the same length."""


class InvalidParameterError(CrossValidationError):
    """A partitioning parameter (p, k) is outside its valid range."""


class UnknownLabelError(CrossValidationError, KeyError):
    """A predicted label is not part of the label set of the dataset."""

    def __str__(self) -> str:
        # KeyError quotes its message; keep it readable
        return str(self.args[0]) if self.args else ""
