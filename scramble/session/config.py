"""
Per-session game settings.

Defaults describe the standard game; the CLI maps each field to a flag.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from scramble.engine.validation import DEFAULT_LANGUAGE, DEFAULT_MIN_LENGTH


@dataclass
class SessionConfig:
    language: str = DEFAULT_LANGUAGE       # tag handed to the spell oracle
    min_length: int = DEFAULT_MIN_LENGTH   # shorter submissions are rejected
    allow_root_word: bool = False          # may the root word itself be submitted?
    fallback_word: Optional[str] = None    # used when the pool is empty; None = fail
    seed: Optional[int] = None             # RNG seed for root word selection

    def __post_init__(self):
        if self.min_length < 1:
            raise ValueError(f"min_length must be >= 1; got {self.min_length}")
        if self.fallback_word is not None:
            self.fallback_word = self.fallback_word.strip().lower()
            if not self.fallback_word:
                raise ValueError("fallback_word must be a non-empty word or None")
