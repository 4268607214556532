"""
Start-word pool validator.

What this module does:
- Check a start-word list (one root word per line) before a game uses it.
- Enforce formatting rules (lowercase, a–z only, at least `min_length` letters).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from scramble.datasets import validate_word_pool, pretty_summary
    rep = validate_word_pool("scramble/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class PoolReport:
    """Diagnostics and metadata for one start-word file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    min_length: int      # shortest acceptable root word
    count: int           # number of VALID words
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid non-blank lines
    blank_lines: int     # blank lines (skipped by the loader, not an error)
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int, int, List[str]]:
    """
    Returns:
      (valid_words, invalid_count, blank_count, first_few_invalid)
    """
    valid: List[str] = []
    invalid = 0
    blank = 0
    examples: List[str] = []

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blank += 1
                continue
            if w == w.lower() and w.isascii() and w.isalpha() and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1
                if len(examples) < 5:
                    examples.append(w)

    return valid, invalid, blank, examples


def validate_word_pool(path: Path | str, *, min_length: int = 3) -> Dict:
    """
    Validate a start-word file.

    `passed` is strict: the file exists, has at least one valid word,
    and has no invalid or duplicate lines. Blank lines are reported but
    do not fail the check (the loader skips them).
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"word pool not found: {path}")
        return asdict(PoolReport(str(path), False, min_length, 0, 0, 0, 0, "", False, issues))

    words, invalid, blank, examples = _load_and_check(p, min_length)
    unique = len(set(words))

    if not words:
        issues.append("word pool contains 0 valid words")
    if invalid:
        issues.append(f"word pool has {invalid} invalid line(s) (e.g., {examples})")
    if unique != len(words):
        issues.append("word pool contains duplicate lines")

    passed = bool(words) and invalid == 0 and unique == len(words)
    rep = PoolReport(
        path=str(p),
        exists=True,
        min_length=min_length,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        blank_lines=blank,
        sha256=_sha256_file(p),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        pool=scramble/datasets/data/start.txt | words=120 (uniq=120, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"pool={report['path']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
