import io
import sys

import pytest
from apps.cli import check_pool, play
from scramble.errors import OracleUnavailableError
from scramble.oracles import WordSetOracle
from scramble.session import Session, SessionConfig


@pytest.fixture
def dictionary(tmp_path):
    p = tmp_path / "dict.txt"
    p.write_text("silk\nworm\nmilk\nsilkworm\n", encoding="utf-8")
    return p


def _run(monkeypatch, stdin_text, argv):
    monkeypatch.setattr(sys, "stdin", io.StringIO(stdin_text))
    return play.main(argv)


def test_play_session(monkeypatch, capsys, pool_file, dictionary):
    code = _run(monkeypatch, "silk\nSILK\n\nsilkkk\nwilks\n:words\n:quit\nworm\n",
                ["--words", str(pool_file), "--oracle", "wordlist",
                 "--dictionary", str(dictionary)])
    out = capsys.readouterr().out
    assert code == 0
    assert "Root word: silkworm" in out
    assert "+ silk (4)" in out
    assert "Word used already" in out
    assert "missing: k x2" in out
    assert "Word not recognized" in out
    assert "  (4) silk" in out
    assert "+ worm" not in out  # after :quit
    assert "Found 1 word(s) from 'silkworm'." in out


def test_play_restart(monkeypatch, capsys, pool_file, dictionary):
    code = _run(monkeypatch, "silk\n:restart\nsilk\n",
                ["--words", str(pool_file), "--oracle", "wordlist",
                 "--dictionary", str(dictionary)])
    out = capsys.readouterr().out
    assert code == 0
    assert out.count("+ silk (4)") == 2
    assert "Found 1 word(s)" in out


def test_play_empty_pool_aborts(monkeypatch, capsys, tmp_path, dictionary):
    empty = tmp_path / "empty.txt"
    empty.write_text("\n", encoding="utf-8")
    code = _run(monkeypatch, "silk\n", ["--words", str(empty), "--oracle", "wordlist",
                                        "--dictionary", str(dictionary)])
    assert code == 2
    assert "error:" in capsys.readouterr().err


def test_play_empty_pool_with_fallback(monkeypatch, capsys, tmp_path, dictionary):
    empty = tmp_path / "empty.txt"
    empty.write_text("\n", encoding="utf-8")
    code = _run(monkeypatch, "worm\n", ["--words", str(empty), "--oracle", "wordlist",
                                        "--dictionary", str(dictionary),
                                        "--fallback-word", "silkworm"])
    assert code == 0
    assert "+ worm (4)" in capsys.readouterr().out


def test_play_surfaces_oracle_unavailable():
    s = Session(["silkworm"], WordSetOracle(["silk"]), SessionConfig(language="de"))
    with pytest.raises(OracleUnavailableError):
        play.play(s, io.StringIO("silk\n"))
    assert s.snapshot()["used_words"] == []


def test_check_pool(capsys, pool_file, tmp_path):
    assert check_pool.main(["--words", str(pool_file)]) == 0
    assert "OK" in capsys.readouterr().out

    bad = tmp_path / "bad.txt"
    bad.write_text("silkworm\nsilkworm\n", encoding="utf-8")
    assert check_pool.main(["--words", str(bad)]) == 1
    assert "duplicate" in capsys.readouterr().out


def test_play_missing_dictionary(monkeypatch, capsys, pool_file, tmp_path):
    code = _run(monkeypatch, "silk\n", ["--words", str(pool_file), "--oracle", "wordlist",
                                        "--dictionary", str(tmp_path / "nope.txt")])
    assert code == 2
    assert "nope.txt" in capsys.readouterr().err


def test_play_min_length_does_not_fail_pool_summary(monkeypatch, capsys, pool_file, dictionary):
    code = _run(monkeypatch, "silk\nsilkworm\n",
                ["--words", str(pool_file), "--oracle", "wordlist",
                 "--dictionary", str(dictionary), "--min-length", "9"])
    out = capsys.readouterr().out
    assert code == 0
    assert "words=1" in out and "| OK" in out
    assert "Word too short" in out


def test_play_pool_min_length_flag(monkeypatch, capsys, pool_file, dictionary):
    _run(monkeypatch, "", ["--words", str(pool_file), "--oracle", "wordlist",
                           "--dictionary", str(dictionary), "--pool-min-length", "9"])
    assert "FAIL" in capsys.readouterr().out
