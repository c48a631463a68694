"""Randomness source for reproducible fold assignment."""

import numpy as np


def make_rng(seed: int | None = None) -> np.random.Generator:
    """
    Build the randomness source handed to k-fold partitioning.

    Args:
        seed: Seed value, or None for an unseeded generator (folds differ on every run)
    """
    return np.random.default_rng(seed)
