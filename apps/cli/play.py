# apps/cli/play.py
"""
Interactive terminal front-end for Word Scramble.

This script:
  1) Loads the start-word pool (bundled list by default) and prints its summary.
  2) Builds the requested spell oracle from the registry.
  3) Starts a round and reads one submission per line from stdin:
       - accepted words are listed newest first with their lengths
       - rejections print the reason's title and message
       - blank lines are ignored
     Commands: ":restart" (new root word), ":words" (list), ":quit".

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --oracle wordlist --dictionary words.txt --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, List, Optional

from scramble.datasets import DEFAULT_POOL_PATH, load_word_pool, pretty_summary, validate_word_pool
from scramble.engine import Accepted, Rejected, missing_letters
from scramble.errors import OracleUnavailableError, WordPoolError
from scramble.oracles import create_oracle, get_oracle_ids
from scramble.session import Session, SessionConfig

QUIT = {":quit", ":q"}
RESTART = ":restart"
WORDS = ":words"


def _render_words(session: Session) -> None:
    snap = session.snapshot()
    print(f"== {snap['root_word']} ==")
    for w in snap["used_words"]:
        print(f"  ({len(w)}) {w}")


def play(session: Session, lines: Iterable[str]) -> dict:
    """
    Drive `session` with one submission per line until input ends or ":quit".
    Returns the final snapshot.
    """
    if session.phase == "awaiting_round":
        session.start_round()
    print(f"Root word: {session.snapshot()['root_word']}")

    for raw in lines:
        cmd = raw.strip()
        if cmd in QUIT:
            break
        if cmd == RESTART:
            print(f"Root word: {session.restart()}")
            continue
        if cmd == WORDS:
            _render_words(session)
            continue

        outcome = session.submit(raw)
        if isinstance(outcome, Accepted):
            print(f"+ {outcome.word} ({len(outcome.word)})")
        elif isinstance(outcome, Rejected):
            reason = outcome.reason
            print(f"! {reason.title}: {reason.message}")
            if reason.code == "not-possible":
                extra = missing_letters(outcome.word, session.snapshot()["root_word"])
                print("  missing: " + ", ".join(f"{ch} x{n}" for ch, n in extra.items()))

    return session.snapshot()


def _build_oracle(args):
    if args.oracle == "wordlist":
        if not args.dictionary:
            raise SystemExit("--oracle wordlist requires --dictionary PATH")
        return create_oracle("wordlist", path=args.dictionary, languages=[args.language])
    if args.oracle == "wordfreq":
        return create_oracle("wordfreq", threshold=args.threshold)
    return create_oracle(args.oracle)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, load the pool, and run the interactive loop on stdin.
    """
    oracle_choices = ", ".join(get_oracle_ids())

    ap = argparse.ArgumentParser(description="Word Scramble — spell words from a root word")
    ap.add_argument("--words", default=str(DEFAULT_POOL_PATH),
                    help="start-word list (one root word per line)")
    ap.add_argument("--oracle", default="wordfreq",
                    help=f"spell oracle id (one of: {oracle_choices})")
    ap.add_argument("--dictionary", help="known-words file for the wordlist oracle")
    ap.add_argument("--threshold", type=float, default=2.5,
                    help="minimum Zipf frequency for the wordfreq oracle")
    ap.add_argument("--language", default="en", help="language tag passed to the oracle")
    ap.add_argument("--min-length", type=int, default=3, help="shortest accepted word")
    ap.add_argument("--pool-min-length", type=int, default=3,
                    help="shortest valid root word when checking the pool")
    ap.add_argument("--allow-root-word", action="store_true",
                    help="accept the root word itself as an answer")
    ap.add_argument("--fallback-word",
                    help="root word to use if the pool is empty (default: abort)")
    ap.add_argument("--seed", type=int, help="RNG seed for root word selection")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Pool: summary first, then load (an unusable pool aborts unless a fallback is set)
    print(pretty_summary(validate_word_pool(args.words, min_length=args.pool_min_length)))
    try:
        pool = load_word_pool(args.words)
    except WordPoolError as e:
        if args.fallback_word is None:
            print(f"error: {e}", file=sys.stderr)
            return 2
        pool = []

    config = SessionConfig(
        language=args.language,
        min_length=args.min_length,
        allow_root_word=args.allow_root_word,
        fallback_word=args.fallback_word,
        seed=args.seed,
    )
    try:
        oracle = _build_oracle(args)
    except (OSError, OracleUnavailableError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    session = Session(pool, oracle, config)

    # 2) Play until EOF / :quit
    try:
        snap = play(session, sys.stdin)
    except OracleUnavailableError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(f"Found {len(snap['used_words'])} word(s) from '{snap['root_word']}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
