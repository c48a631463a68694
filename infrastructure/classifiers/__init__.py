"""
Classifier adapters.

Implements the adapter pattern for classifiers evaluated by cross-validation:
- MajorityClassifier (majority-vote baseline)
- EstimatorClassifier (any scikit-learn classifier)

All adapters implement the Classifier interface.
"""

from infrastructure.classifiers.base import Classifier, ClassifierFactory
from infrastructure.classifiers.estimator import EstimatorClassifier
from infrastructure.classifiers.factory import make_classifier_factory
from infrastructure.classifiers.majority import MajorityClassifier
from infrastructure.classifiers.registry import get_classifier_class, register_classifier

__all__ = [
    # Abstract base
    "Classifier",
    "ClassifierFactory",
    # Concrete implementations
    "MajorityClassifier",
    "EstimatorClassifier",
    # Registry / factory (most commonly used)
    "make_classifier_factory",
    "register_classifier",
    "get_classifier_class",
]
