"""Reproducibility infrastructure: the injected random source and its self-test."""

from seirnet.reproducibility.random_source import (
    RandomSource,
    make_random_source,
    verify_seed_determinism,
)

__all__ = [
    "RandomSource",
    "make_random_source",
    "verify_seed_determinism",
]
