"""
Letter-multiset checks for a (word, root_word) pair.

A word is "possible" when it can be spelled from the root word's letters,
each root letter usable at most as many times as it appears.

Algorithm (greedy consumption):
  1) Take a mutable copy of the root word's letter counts.
  2) Walk the word left to right; consume one instance of each letter.
  3) If a letter has no remaining instance, stop immediately: not possible.

This is equivalent to: for every letter c, count(c, word) <= count(c, root).

Inputs are compared as-is; callers normalize (strip + lowercase) first.
"""

from collections import Counter
from typing import Dict


def is_possible(word: str, root_word: str) -> bool:
    """
    Return True if `word` can be spelled from the letters of `root_word`.

    Examples:
      is_possible("silk", "silkworm")     -> True
      is_possible("silkkk", "silkworm")   -> False   ('k' x3 > 'k' x1)
      is_possible("silkworm", "silkworm") -> True    (the echo is handled upstream)
    """
    remaining = Counter(root_word)
    for ch in word:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1  # consume one instance
    return True


def missing_letters(word: str, root_word: str) -> Dict[str, int]:
    """
    Letters `word` needs beyond what `root_word` offers, with the excess count.

    Empty dict iff is_possible(word, root_word).

    Example:
      missing_letters("silkkk", "silkworm") -> {"k": 2}
    """
    need = Counter(word)
    need.subtract(Counter(root_word))
    return {ch: n for ch, n in need.items() if n > 0}
