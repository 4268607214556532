"""
Submission validation.

This module answers the question: "May this word be added to the round?"
A submission is accepted iff, after normalization (strip + lowercase):
  - it is non-empty (empty input is silently ignored, not rejected)
  - it has at least `min_length` letters
  - it is not already in the round's used words
  - it can be spelled from the root word's letters
  - it is not the root word itself (unless `allow_root_word`)
  - the spell oracle does not report it as misspelled

Checks run in that order and stop at the first failure, so a rejected word
carries exactly one RejectionReason.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .letters import is_possible

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
DEFAULT_MIN_LENGTH = 3


@dataclass(frozen=True)
class RejectionReason:
    """Why a submission was refused. `code` is stable; title/message are for display."""
    code: str
    title: str
    message: str


@dataclass(frozen=True)
class Accepted:
    word: str
    kind: str = "accepted"


@dataclass(frozen=True)
class Rejected:
    word: str
    reason: RejectionReason
    kind: str = "rejected"


@dataclass(frozen=True)
class NoOp:
    kind: str = "noop"


# -----------------------------
# Canonical rejection reasons
# -----------------------------

ALREADY_USED = RejectionReason("already-used", "Word used already", "Be more original")
NOT_REAL = RejectionReason("not-real", "Word not recognized", "You can't just make them up, you know!")
ROOT_WORD = RejectionReason("root-word", "Word not allowed", "You can't just reuse the start word!")


def not_possible(root_word: str) -> RejectionReason:
    return RejectionReason(
        "not-possible", "Word not possible", f"You can't spell that word from '{root_word}'!"
    )


def too_short(min_length: int) -> RejectionReason:
    return RejectionReason(
        "too-short", "Word too short", f"Words must be at least {min_length} letters long."
    )


# -----------------------------
# Predicates
# -----------------------------

def normalize(raw: str) -> str:
    """Trim surrounding whitespace/newlines and lowercase."""
    return raw.strip().lower()


def is_original(word: str, used_words: Iterable[str]) -> bool:
    """False iff `word` already appears in `used_words` (exact match)."""
    return word not in used_words


def is_real(word: str, oracle, language: str = DEFAULT_LANGUAGE) -> bool:
    """
    Ask the oracle. True iff it does NOT report `word` as misspelled.

    `oracle` is anything with `is_misspelled(word, language) -> bool`
    (see scramble.oracles.BaseOracle). OracleUnavailableError propagates.
    """
    return not oracle.is_misspelled(word, language)


def validate(
        raw: str,
        root_word: str,
        used_words: Iterable[str],
        oracle,
        *,
        language: str = DEFAULT_LANGUAGE,
        min_length: int = DEFAULT_MIN_LENGTH,
        allow_root_word: bool = False,
) -> Accepted | Rejected | NoOp:
    """
    Run the full rule chain on a raw submission. Pure: mutates nothing.

    Returns:
      NoOp()                 if the normalized input is empty
      Rejected(word, reason) on the first failing rule
      Accepted(word)         otherwise
    """
    word = normalize(raw)
    if not word:
        return NoOp()

    reason: Optional[RejectionReason] = None
    if len(word) < min_length:
        reason = too_short(min_length)
    elif not is_original(word, used_words):
        reason = ALREADY_USED
    elif not is_possible(word, root_word):
        reason = not_possible(root_word)
    elif word == root_word and not allow_root_word:
        reason = ROOT_WORD
    elif not is_real(word, oracle, language):
        reason = NOT_REAL

    if reason is not None:
        logger.debug("rejected %r against %r: %s", word, root_word, reason.code)
        return Rejected(word, reason)

    logger.debug("accepted %r against %r", word, root_word)
    return Accepted(word)
