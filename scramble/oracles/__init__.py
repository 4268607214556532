from __future__ import annotations
from typing import List
from .base import BaseOracle, REGISTRY, register

from . import word_set  # noqa: F401
from . import zipf  # noqa: F401

from .lexicon import english_words

from .word_set import WordSetOracle
from .zipf import ZipfOracle


def create_oracle(oracle_id: str, **kwargs) -> BaseOracle:
    """
    Factory: instantiate a registered oracle by id.
    """
    try:
        cls = REGISTRY[oracle_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown oracle id: {oracle_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_oracle_ids() -> List[str]:
    """
    Return all registered oracle ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["BaseOracle", "WordSetOracle", "ZipfOracle", "create_oracle", "get_oracle_ids",
           "english_words", "register"]
