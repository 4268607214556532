"""
English dictionary word list from the nltk `words` corpus.

Only all-lowercase alphabetic entries are kept, so proper nouns
("Milo", "Rome") are not words for the game.
"""

from __future__ import annotations

import logging
from typing import FrozenSet

import nltk
from nltk.corpus import words

from scramble.errors import OracleUnavailableError

logger = logging.getLogger(__name__)


def english_words(download: bool = True) -> FrozenSet[str]:
    """
    Load the nltk English word list (downloading the corpus on first use).

    Raises OracleUnavailableError if the corpus cannot be found or fetched.
    """
    try:
        if download:
            nltk.download("words", quiet=True)
        entries = words.words()
    except LookupError as e:
        raise OracleUnavailableError("nltk 'words' corpus is not available") from e
    lexicon = frozenset(w for w in entries if w.isalpha() and w == w.lower())
    logger.info("loaded %d dictionary words from nltk", len(lexicon))
    return lexicon
