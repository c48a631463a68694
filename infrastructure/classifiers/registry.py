import logging

from .base import Classifier

logger = logging.getLogger(__name__)

# Classifier name -> Classifier class
_CLASSIFIER_REGISTRY: dict[str, type[Classifier]] = {}


def register_classifier(name: str, classifier_cls: type[Classifier], *, override: bool = False) -> None:
    """Register a classifier class under a name.

    This is the plugin hook: classifier modules call this at import time.
    """
    key = name.strip().lower()
    if (key in _CLASSIFIER_REGISTRY) and not override:
        existing = _CLASSIFIER_REGISTRY[key]
        raise RuntimeError(
            f"Classifier already registered for name={key}: {existing.__name__}. Use override=True to replace."
        )
    _CLASSIFIER_REGISTRY[key] = classifier_cls
    logger.debug("Registered classifier %s: %s", key, classifier_cls.__name__)


def get_classifier_class(name: str) -> type[Classifier] | None:
    """Return the registered classifier class (or None if not registered yet)."""
    return _CLASSIFIER_REGISTRY.get(name.strip().lower())


def registered_classifiers() -> list[str]:
    return sorted(_CLASSIFIER_REGISTRY)
