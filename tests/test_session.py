import random

import pytest
from scramble.engine import Accepted, NoOp, Rejected
from scramble.errors import OracleUnavailableError, SessionError, WordPoolError
from scramble.session import RoundState, Session, SessionConfig, restart, start_round, submit


def test_start_round_picks_from_pool():
    pool = ["silkworm", "keyboard", "mountain"]
    state = start_round(pool, rng=random.Random(7))
    assert state.root_word in pool
    assert state.used_words == []


def test_start_round_normalizes_pool_entries():
    state = start_round(["  SILKWORM\n", "", "   "])
    assert state.root_word == "silkworm"


def test_start_round_is_reproducible_with_seed():
    pool = [f"word{i}" for i in range(50)]
    a = start_round(pool, rng=random.Random(3)).root_word
    b = start_round(pool, rng=random.Random(3)).root_word
    assert a == b


@pytest.mark.parametrize("pool", [[], None, ["", "  "]])
def test_empty_pool_is_fatal_by_default(pool):
    with pytest.raises(WordPoolError):
        start_round(pool)


def test_empty_pool_uses_configured_fallback():
    state = start_round([], fallback_word="Silkworm")
    assert state.root_word == "silkworm"


def test_scenarios_silkworm(oracle):
    state = RoundState("silkworm")

    # 1: accepted
    out = submit("silk", state, oracle)
    assert out == Accepted("silk")
    assert state.used_words == ["silk"]

    # 2: same word again
    out = submit("silk", state, oracle)
    assert isinstance(out, Rejected) and out.reason.code == "already-used"

    # 3: too many k's
    out = submit("silkkk", state, oracle)
    assert out.reason.code == "not-possible"

    # 4: oracle says misspelled
    out = submit("wilks", state, oracle)
    assert out.reason.code == "not-real"

    # 5: whitespace only
    assert submit("   ", state, oracle) == NoOp()

    assert state.used_words == ["silk"]


def test_mixed_case_submission_is_normalized(oracle):
    state = RoundState("silkworm")
    assert submit("  WoRm ", state, oracle) == Accepted("worm")
    out = submit("WORM", state, oracle)
    assert out.reason.code == "already-used"
    assert state.used_words == ["worm"]


def test_used_words_newest_first(oracle):
    state = RoundState("silkworm")
    for w in ["silk", "worm", "milk"]:
        assert isinstance(submit(w, state, oracle), Accepted)
    assert state.used_words == ["milk", "worm", "silk"]
    assert len(set(state.used_words)) == len(state.used_words)


def test_submit_uses_config(oracle):
    state = RoundState("silkworm")
    cfg = SessionConfig(allow_root_word=True, min_length=2)
    assert submit("silkworm", state, oracle, cfg) == Accepted("silkworm")
    assert submit("is", state, oracle, cfg) == Accepted("is")


def test_unknown_language_raises_without_mutation(oracle):
    state = RoundState("silkworm")
    with pytest.raises(OracleUnavailableError):
        submit("silk", state, oracle, SessionConfig(language="fr"))
    assert state.used_words == []


def test_restart_clears_used_words(oracle):
    state = RoundState("silkworm")
    submit("silk", state, oracle)
    fresh = restart(["silkworm"])
    assert fresh.root_word == "silkworm"
    assert fresh.used_words == []


def test_round_state_snapshot_is_a_copy():
    state = RoundState("silkworm", ["silk"])
    snap = state.snapshot()
    snap["used_words"].append("worm")
    assert state.used_words == ["silk"]
    with pytest.raises(ValueError):
        RoundState("")


def test_session_config_rejects_bad_values():
    with pytest.raises(ValueError):
        SessionConfig(min_length=0)
    with pytest.raises(ValueError):
        SessionConfig(fallback_word="   ")


# --- Session wrapper ---

def test_session_phases_and_snapshot(oracle):
    s = Session(["silkworm"], oracle)
    assert s.phase == "awaiting_round"
    assert s.snapshot() == {"root_word": None, "used_words": []}
    with pytest.raises(SessionError):
        s.submit("silk")
    with pytest.raises(SessionError):
        s.restart()
    assert s.phase == "awaiting_round"

    assert s.start_round() == "silkworm"
    assert s.phase == "in_round"
    s.submit("silk")
    s.submit("worm")
    assert s.snapshot() == {"root_word": "silkworm", "used_words": ["worm", "silk"]}

    assert s.restart() == "silkworm"
    assert s.phase == "in_round"
    assert s.snapshot()["used_words"] == []


def test_session_notifies_listeners(oracle):
    s = Session(["silkworm"], oracle)
    events = []
    unsubscribe = s.subscribe(lambda event, snap: events.append((event, snap["used_words"])))

    s.start_round()
    s.submit("silk")
    s.submit("silk")      # rejected: no event
    s.submit("  ")        # noop: no event
    s.restart()
    unsubscribe()
    s.submit("worm")

    assert events == [
        ("round_started", []),
        ("word_accepted", ["silk"]),
        ("round_restarted", []),
    ]


def test_session_empty_pool(oracle):
    with pytest.raises(WordPoolError):
        Session([], oracle).start_round()
    s = Session([], oracle, SessionConfig(fallback_word="silkworm"))
    assert s.start_round() == "silkworm"


def test_session_seed_is_reproducible(oracle):
    pool = ["silkworm", "keyboard", "mountain", "umbrella", "triangle"]
    a = Session(pool, oracle, SessionConfig(seed=11))
    b = Session(pool, oracle, SessionConfig(seed=11))
    assert [a.start_round(), a.restart(), a.restart()] == [b.start_round(), b.restart(), b.restart()]
