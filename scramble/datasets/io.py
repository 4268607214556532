from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, List

from scramble.errors import WordPoolError

logger = logging.getLogger(__name__)

# Start words bundled with the package (one per line).
DEFAULT_POOL_PATH = Path(__file__).parent / "data" / "start.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def clean_pool(words: Iterable[str]) -> List[str]:
    """Strip + lowercase each entry and drop blanks (order preserved)."""
    return [w.strip().lower() for w in words if w.strip()]


def load_word_pool(p: Path | str = DEFAULT_POOL_PATH) -> List[str]:
    """
    Load the start-word pool: each non-empty line is a candidate root word.

    Raises WordPoolError if the file is missing, unreadable, or has no words.
    """
    try:
        words = clean_pool(read_lines(p))
    except (OSError, UnicodeDecodeError) as e:
        raise WordPoolError(f"Could not load word pool from {p}: {e}") from e
    if not words:
        raise WordPoolError(f"Word pool {p} contains no words")
    logger.info("loaded %d start words from %s", len(words), p)
    return words
