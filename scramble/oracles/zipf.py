"""
Dictionary + Zipf-frequency oracle backed by `nltk` and `wordfreq`.

Strategy:
  - The word must be in a dictionary (the nltk English word list unless a
    lexicon is passed in). Frequency alone lets acronyms like "kms" through.
  - Its Zipf frequency (log10 occurrences per billion words) in the
    wordfreq corpus must be at least `threshold`, which drops obsolete and
    obscure dictionary entries.

Notes:
  - The dictionary covers one language (`lexicon_language`); other language
    tags are an OracleUnavailableError, as is a language wordfreq has no
    data for.
  - The nltk list is loaded lazily on the first lookup.
  - Inflected forms the word list does not carry (many plurals) are
    rejected; pass a richer lexicon to accept them.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Optional

from wordfreq import zipf_frequency

from scramble.errors import OracleUnavailableError
from .base import BaseOracle, register
from .lexicon import english_words

DEFAULT_THRESHOLD = 2.5


@register
class ZipfOracle(BaseOracle):
    id = "wordfreq"
    name = "Dictionary + wordfreq Zipf threshold"

    def __init__(self, threshold: float = DEFAULT_THRESHOLD, wordlist: str = "best",
                 lexicon: Optional[Iterable[str]] = None, lexicon_language: str = "en"):
        self.threshold = float(threshold)
        self.wordlist = wordlist
        self.lexicon_language = lexicon_language.lower()
        self._lexicon: Optional[FrozenSet[str]] = (
            None if lexicon is None else frozenset(w.strip().lower() for w in lexicon)
        )

    @property
    def lexicon(self) -> FrozenSet[str]:
        if self._lexicon is None:
            self._lexicon = english_words()
        return self._lexicon

    def frequency(self, word: str, language: str = "en") -> float:
        try:
            return zipf_frequency(word, language, wordlist=self.wordlist)
        except (LookupError, ValueError) as e:
            raise OracleUnavailableError(
                f"wordfreq has no {self.wordlist!r} data for language {language!r}"
            ) from e

    def is_misspelled(self, word: str, language: str = "en") -> bool:
        if language.lower() != self.lexicon_language:
            raise OracleUnavailableError(
                f"{self.id} oracle has no dictionary for language {language!r}"
            )
        w = word.strip().lower()
        if not w.isalpha() or w not in self.lexicon:
            return True
        return self.frequency(w, language) < self.threshold
