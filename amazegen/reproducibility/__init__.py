"""Reproducibility infrastructure: seed generation and determinism checks."""

from amazegen.reproducibility.seed import generate_seed, verify_seed_determinism

__all__ = [
    "generate_seed",
    "verify_seed_determinism",
]
