"""Adapter running any scikit-learn classifier inside the cross-validation engine."""

import importlib
import logging
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np
from sklearn.base import ClassifierMixin, is_classifier

from .base import Classifier
from .registry import register_classifier

logger = logging.getLogger(__name__)

DEFAULT_ESTIMATOR = "sklearn.neighbors.KNeighborsClassifier"


def _import_estimator(path: str) -> type[ClassifierMixin]:
    module_name, _, class_name = path.rpartition(".")
    if not module_name:
        raise ValueError(f"Estimator must be a dotted path like 'sklearn.tree.DecisionTreeClassifier', got {path!r}")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, class_name)
    except AttributeError as err:
        raise ValueError(f"Module {module_name!r} has no estimator {class_name!r}") from err


class EstimatorClassifier(Classifier):
    """
    Wraps a scikit-learn estimator.

    Options:
        estimator: dotted path of the estimator class (default: KNeighborsClassifier)
        params: keyword arguments passed to the estimator constructor
    """

    name = "estimator"

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        super().__init__(options)
        path = str(self.options.get("estimator", DEFAULT_ESTIMATOR))
        params = dict(self.options.get("params") or {})

        estimator_cls = _import_estimator(path)
        self.estimator = estimator_cls(**params)
        if not is_classifier(self.estimator):
            raise ValueError(f"{path} is not a scikit-learn classifier")

    def train(self, features: Sequence[Any], labels: Sequence[Any]) -> None:
        self.estimator.fit(np.asarray(features), np.asarray(labels))

    def predict(self, features: Sequence[Any]) -> list[Any]:
        if len(features) == 0:
            return []
        return self.estimator.predict(np.asarray(features)).tolist()


register_classifier(EstimatorClassifier.name, EstimatorClassifier)
