"""Miscellaneous helpers."""

from infrastructure.utils.seeding import make_rng

__all__ = ["make_rng"]
