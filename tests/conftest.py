"""
Shared fixtures: a deterministic known-word oracle so no test depends on
a live dictionary.
"""

import pytest

from scramble.oracles import WordSetOracle

KNOWN = ["silk", "silkworm", "worm", "milk", "work", "works", "slow", "owl", "ski", "is", "or",
         "mow", "skim", "word", "lord"]


@pytest.fixture
def oracle():
    return WordSetOracle(KNOWN)


@pytest.fixture
def pool_file(tmp_path):
    p = tmp_path / "start.txt"
    p.write_text("silkworm\n", encoding="utf-8")
    return p
