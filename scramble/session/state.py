from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class RoundState:
    """
    One round: the root word plus accepted words, newest first.

    Only the session controller mutates `used_words`; everything else should
    read `snapshot()`.
    """
    root_word: str
    used_words: List[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.root_word:
            raise ValueError("root_word must be non-empty")

    def add(self, word: str) -> None:
        """Prepend an accepted word (most recent first)."""
        self.used_words.insert(0, word)

    def snapshot(self) -> Dict:
        """Copy of the renderable state."""
        return {"root_word": self.root_word, "used_words": list(self.used_words)}
