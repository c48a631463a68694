"""Cross-validation workflows: leave-one-out, leave-p-out and k-fold."""

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import Any

import numpy as np

from application.validation import validate_split
from domain.evaluation.confusion import ConfusionTally
from domain.labels import LabelIndex, check
from domain.partitioning import k_fold_splits, leave_one_out_splits, leave_p_out_splits
from domain.schemas import CrossValidationResult, Split
from infrastructure.classifiers.base import ClassifierFactory
from infrastructure.config.models import ExperimentConfig, Strategy
from infrastructure.observability.logging import clear_split_context, set_log_context
from infrastructure.utils.seeding import make_rng

logger = logging.getLogger(__name__)


def _run(
    classifier_factory: ClassifierFactory,
    features: Sequence[Any],
    labels: Sequence[Any],
    classifier_options: Mapping[str, Any] | None,
    make_splits: Callable[[int], Iterator[Split]],
    strategy_name: str,
) -> CrossValidationResult:
    # Input and parameter errors surface before any classifier is built
    check(features, labels)
    label_index = LabelIndex(labels)
    n_samples = len(labels)
    splits = make_splits(n_samples)

    tally = ConfusionTally(label_index)
    logger.info(
        "Starting %s cross-validation: %d samples, %d distinct labels",
        strategy_name,
        n_samples,
        len(label_index),
    )

    try:
        for split_id, split in enumerate(splits, start=1):
            set_log_context(split_id=split_id)
            outcome = validate_split(
                classifier_factory,
                features,
                labels,
                split,
                tally,
                classifier_options,
            )
            tally.add_outcome(outcome)
    finally:
        clear_split_context()

    result = tally.to_result()
    if result.nb_prediction == 0:
        logger.warning("%s made no prediction; accuracy is undefined (NaN).", strategy_name)
    else:
        logger.info(
            "%s finished: %d splits, %d predictions, accuracy=%.4f",
            strategy_name,
            result.nb_splits,
            result.nb_prediction,
            result.accuracy,
        )
    return result


def leave_one_out(
    classifier_factory: ClassifierFactory,
    features: Sequence[Any],
    labels: Sequence[Any],
    classifier_options: Mapping[str, Any] | None = None,
) -> CrossValidationResult:
    """
    Leave-one-out cross-validation (LOO-CV).

    Each sample is used once as a single-sample test set while every other
    sample trains the classifier. Special case of leave_p_out with p=1.

    Args:
        classifier_factory: Builds a fresh classifier from classifier_options for every split
        features: Feature vectors of all samples
        labels: Class label of every sample
        classifier_options: Options passed to the factory

    Returns:
        CrossValidationResult

    Raises:
        ShapeMismatchError: If features and labels differ in length
    """
    return leave_p_out(classifier_factory, features, labels, classifier_options, 1)


def leave_p_out(
    classifier_factory: ClassifierFactory,
    features: Sequence[Any],
    labels: Sequence[Any],
    classifier_options: Mapping[str, Any] | None,
    p: int,
) -> CrossValidationResult:
    """
    Leave-p-out cross-validation (LPO-CV).

    Every unordered p-subset of the samples is held out once as the test set,
    so C(N, p) train/predict cycles run. This grows very quickly with N and p.
    With p == N the single split has an empty training set; how the classifier
    handles that is up to the classifier.

    Args:
        classifier_factory: Builds a fresh classifier from classifier_options for every split
        features: Feature vectors of all samples
        labels: Class label of every sample
        classifier_options: Options passed to the factory
        p: Size of each held-out subset

    Returns:
        CrossValidationResult

    Raises:
        ShapeMismatchError: If features and labels differ in length
        InvalidParameterError: If p is not an integer in [1, N]
    """
    return _run(
        classifier_factory,
        features,
        labels,
        classifier_options,
        lambda n: leave_p_out_splits(n, p),
        "leave-one-out" if p == 1 else f"leave-{p}-out",
    )


def k_fold(
    classifier_factory: ClassifierFactory,
    features: Sequence[Any],
    labels: Sequence[Any],
    classifier_options: Mapping[str, Any] | None,
    k: int,
    rng: np.random.Generator | None = None,
) -> CrossValidationResult:
    """
    k-fold cross-validation (KF-CV).

    The samples are randomly split into k partitions of N // k samples; each
    partition is the test set once while the others train the classifier.
    Samples left over when k does not divide N take no part in the run.

    Args:
        classifier_factory: Builds a fresh classifier from classifier_options for every split
        features: Feature vectors of all samples
        labels: Class label of every sample
        classifier_options: Options passed to the factory
        k: Number of folds
        rng: Randomness source for fold assignment; unseeded when None

    Returns:
        CrossValidationResult

    Raises:
        ShapeMismatchError: If features and labels differ in length
        InvalidParameterError: If k is not an integer >= 1
    """
    return _run(
        classifier_factory,
        features,
        labels,
        classifier_options,
        lambda n: k_fold_splits(n, k, rng),
        f"{k}-fold",
    )


def run_cross_validation(
    cfg: ExperimentConfig,
    classifier_factory: ClassifierFactory,
    features: Sequence[Any],
    labels: Sequence[Any],
    rng: np.random.Generator | None = None,
) -> CrossValidationResult:
    """
    Dispatch to the strategy selected in the experiment configuration.

    Args:
        cfg: Experiment configuration (strategy, p, k, seed, classifier options)
        classifier_factory: Builds a fresh classifier for every split
        features: Feature vectors of all samples
        labels: Class label of every sample
        rng: Randomness source for k-fold; built from cfg.seed when None

    Returns:
        CrossValidationResult
    """
    options = cfg.classifier.options
    set_log_context(strategy=cfg.strategy.value, classifier=cfg.classifier.name)

    if cfg.strategy is Strategy.LEAVE_ONE_OUT:
        return leave_one_out(classifier_factory, features, labels, options)

    if cfg.strategy is Strategy.LEAVE_P_OUT:
        return leave_p_out(classifier_factory, features, labels, options, cfg.p)

    if cfg.strategy is Strategy.K_FOLD:
        if rng is None:
            rng = make_rng(cfg.seed)
        return k_fold(classifier_factory, features, labels, options, cfg.k, rng)

    raise ValueError(f"Unsupported strategy: {cfg.strategy!r}")
