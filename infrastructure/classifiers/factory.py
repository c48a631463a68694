"""Factory for resolving classifier names to constructors."""

import importlib
import logging

from .base import Classifier
from .registry import get_classifier_class, registered_classifiers

logger = logging.getLogger(__name__)


def _ensure_classifier_imported(name: str) -> None:
    """
    Lazy-import the classifier module to trigger `register_classifier(...)`.

    Convention:
      - The classifier name MUST match the module filename under infrastructure/classifiers/
        e.g., "majority" -> infrastructure/classifiers/majority.py
    """
    module_name = f"{__package__}.{name}"
    try:
        importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        if getattr(e, "name", None) == module_name:
            raise RuntimeError(
                f"No classifier module found for classifier='{name}'. "
                f"Expected file: infrastructure/classifiers/{name}.py. Registered: {registered_classifiers()}"
            ) from e
        raise


def make_classifier_factory(name: str) -> type[Classifier]:
    """
    Resolve a classifier name to the class used to build one instance per split.

    Args:
        name: Registered classifier name (e.g. "majority", "estimator")

    Returns:
        The Classifier subclass; calling it with an options mapping builds an instance.

    Raises:
        RuntimeError: If no module or registration exists for the name.
    """
    key = name.strip().lower()

    # 1) Try registry first (maybe already imported elsewhere)
    classifier_cls = get_classifier_class(key)

    # 2) If not registered yet, import the classifier module by convention, then retry
    if classifier_cls is None:
        _ensure_classifier_imported(key)
        classifier_cls = get_classifier_class(key)

    if classifier_cls is None:
        raise RuntimeError(
            f"Classifier '{key}' did not register itself. Make sure {key}.py calls register_classifier(...)."
        )

    logger.debug("Resolved classifier '%s' to %s", key, classifier_cls.__name__)
    return classifier_cls
