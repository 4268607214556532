# apps/cli/check_pool.py
"""
Validate a start-word list and print a one-line summary.

Exit status is 0 when the pool passes, 1 otherwise (issues are listed).

Usage:
    python -m apps.cli.check_pool --words scramble/datasets/data/start.txt
    python -m apps.cli.check_pool --words my_words.txt --json
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from scramble.datasets import DEFAULT_POOL_PATH, pretty_summary, validate_word_pool


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Check a Word Scramble start-word list")
    ap.add_argument("--words", default=str(DEFAULT_POOL_PATH), help="start-word list to check")
    ap.add_argument("--min-length", type=int, default=3, help="shortest acceptable root word")
    ap.add_argument("--json", action="store_true", help="print the full report as JSON")
    args = ap.parse_args(argv)

    rep = validate_word_pool(args.words, min_length=args.min_length)
    if args.json:
        print(json.dumps(rep, indent=2))
    else:
        print(pretty_summary(rep))
        for issue in rep["issues"]:
            print(f"  - {issue}")
    return 0 if rep["passed"] else 1


if __name__ == "__main__":
    sys.exit(main())
