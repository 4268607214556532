"""
Session controller primitives.

- start_round: pick a root word from the pool and open a fresh RoundState.
- submit:      normalize + validate one submission; record it if accepted.
- restart:     start_round again (used words are dropped with the old state).
- Session:     stateful wrapper for a front-end (holds pool, oracle, config,
               RNG; notifies subscribers on change).

These functions are intentionally UI-agnostic so they can be driven by the
CLI, a notebook, tests, or a future GUI without changes.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Dict, Iterable, List, Optional

from scramble.datasets import clean_pool
from scramble.engine import Accepted, NoOp, Rejected, validate
from scramble.errors import SessionError, WordPoolError
from .config import SessionConfig
from .state import RoundState

logger = logging.getLogger(__name__)

Outcome = Accepted | Rejected | NoOp
Listener = Callable[[str, Dict], None]

AWAITING_ROUND = "awaiting_round"
IN_ROUND = "in_round"


def start_round(
        word_pool: Optional[Iterable[str]],
        *,
        rng: random.Random | None = None,
        fallback_word: str | None = None,
) -> RoundState:
    """
    Choose a root word uniformly at random and return a new round.

    Args:
        word_pool:     candidate root words (None = pool unavailable)
        rng:           random.Random to draw from (seed it for reproducibility)
        fallback_word: word to use when the pool is empty/unavailable;
                       if None, that situation raises WordPoolError

    Returns:
        RoundState with the chosen root word and no used words.
    """
    pool = clean_pool(word_pool or [])
    if not pool:
        if fallback_word is None:
            raise WordPoolError("Word pool is empty or unavailable; cannot choose a root word")
        logger.warning("word pool empty, falling back to %r", fallback_word)
        return RoundState(fallback_word.strip().lower())

    rng = rng or random.Random()
    root = rng.choice(pool)
    logger.info("round started with root word %r (%d candidates)", root, len(pool))
    return RoundState(root)


def submit(raw: str, state: RoundState, oracle, config: SessionConfig | None = None) -> Outcome:
    """
    Handle one submission against `state`.

    Accepted words are prepended to `state.used_words`; rejected and empty
    submissions leave the state untouched.
    """
    config = config or SessionConfig()
    outcome = validate(
        raw, state.root_word, state.used_words, oracle,
        language=config.language,
        min_length=config.min_length,
        allow_root_word=config.allow_root_word,
    )
    if isinstance(outcome, Accepted):
        state.add(outcome.word)
    return outcome


def restart(
        word_pool: Optional[Iterable[str]],
        *,
        rng: random.Random | None = None,
        fallback_word: str | None = None,
) -> RoundState:
    """Begin a new round; the previous round's used words are discarded."""
    return start_round(word_pool, rng=rng, fallback_word=fallback_word)


class Session:
    """
    One player's game: the single mutator of its RoundState.

    Phases: "awaiting_round" (no root word yet) -> "in_round"; restart keeps
    it in "in_round" and, like submit, raises SessionError before a round. Listeners are called as `listener(event, snapshot)`
    with event in {"round_started", "round_restarted", "word_accepted"}.
    """

    def __init__(self, word_pool: Optional[Iterable[str]], oracle,
                 config: SessionConfig | None = None):
        self.word_pool: List[str] = list(word_pool or [])
        self.oracle = oracle
        self.config = config or SessionConfig()
        self.rng = random.Random(self.config.seed)
        self.state: RoundState | None = None
        self._listeners: List[Listener] = []

    @property
    def phase(self) -> str:
        return AWAITING_ROUND if self.state is None else IN_ROUND

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, event: str) -> None:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(event, snap)

    def start_round(self) -> str:
        self.state = start_round(self.word_pool, rng=self.rng,
                                 fallback_word=self.config.fallback_word)
        self._notify("round_started")
        return self.state.root_word

    def restart(self) -> str:
        if self.state is None:
            raise SessionError("No round in progress; call start_round() first")
        self.state = restart(self.word_pool, rng=self.rng,
                             fallback_word=self.config.fallback_word)
        self._notify("round_restarted")
        return self.state.root_word

    def submit(self, raw: str) -> Outcome:
        if self.state is None:
            raise SessionError("No round in progress; call start_round() first")
        outcome = submit(raw, self.state, self.oracle, self.config)
        if isinstance(outcome, Accepted):
            self._notify("word_accepted")
        return outcome

    def snapshot(self) -> Dict:
        if self.state is None:
            return {"root_word": None, "used_words": []}
        return self.state.snapshot()
