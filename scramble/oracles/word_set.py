"""
Word-set oracle.

A word is real iff it is in a fixed set of known words. Deterministic and
offline, so tests and the CLI's `--oracle wordlist` mode use it instead of a
live dictionary.

The set is tagged with the languages it covers; asking about any other
language is an OracleUnavailableError rather than a silent "misspelled".
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from scramble.datasets.io import read_lines
from scramble.errors import OracleUnavailableError
from .base import BaseOracle, register

logger = logging.getLogger(__name__)


@register
class WordSetOracle(BaseOracle):
    id = "wordlist"
    name = "Known-word set"

    def __init__(self, words: Iterable[str] = (), *, languages: Iterable[str] = ("en",),
                 path: Path | str | None = None):
        known = {w.strip().lower() for w in words if w.strip()}
        if path is not None:
            known.update(w.strip().lower() for w in read_lines(path) if w.strip())
            logger.info("loaded %d known words from %s", len(known), path)
        self.words = frozenset(known)
        self.languages = frozenset(lang.lower() for lang in languages)

    def is_misspelled(self, word: str, language: str = "en") -> bool:
        if language.lower() not in self.languages:
            raise OracleUnavailableError(
                f"{self.id} oracle has no word set for language {language!r}"
            )
        return word.strip().lower() not in self.words
