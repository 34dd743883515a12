from __future__ import annotations

import sqlite3
from pathlib import Path

from config import HIGH_SCORE_KEY
from database import HighScoreDatabase


def test_missing_score_reads_as_zero(tmp_path: Path) -> None:
    db = HighScoreDatabase(str(tmp_path / "scores.db"))
    assert db.load() == 0


def test_saved_score_survives_reopen(tmp_path: Path) -> None:
    path = str(tmp_path / "scores.db")
    assert HighScoreDatabase(path).save(120) is True
    assert HighScoreDatabase(path).save(150) is True
    assert HighScoreDatabase(path).load() == 150


def test_uses_fixed_key(tmp_path: Path) -> None:
    path = str(tmp_path / "scores.db")
    HighScoreDatabase(path).save(40)

    conn = sqlite3.connect(path)
    rows = conn.execute("SELECT key, value FROM settings").fetchall()
    conn.close()
    assert rows == [(HIGH_SCORE_KEY, "40")]


def test_malformed_value_reads_as_zero(tmp_path: Path) -> None:
    path = str(tmp_path / "scores.db")
    db = HighScoreDatabase(path)
    db.save(10)

    conn = sqlite3.connect(path)
    with conn:
        conn.execute("UPDATE settings SET value = 'lots' WHERE key = ?", (HIGH_SCORE_KEY,))
    conn.close()

    assert db.load() == 0


def test_unavailable_storage_degrades(tmp_path: Path) -> None:
    # A directory cannot be opened as a database file
    db = HighScoreDatabase(str(tmp_path))

    assert db.load() == 0
    assert db.save(30) is False
    assert db.last_error is not None


def test_lower_score_does_not_overwrite_stored_best(tmp_path: Path) -> None:
    path = str(tmp_path / "scores.db")
    HighScoreDatabase(path).save(100)

    # A session that could not read the best starts from 0 and saves less
    assert HighScoreDatabase(path).save(30) is True
    assert HighScoreDatabase(path).load() == 100


def test_higher_score_replaces_malformed_value(tmp_path: Path) -> None:
    path = str(tmp_path / "scores.db")
    db = HighScoreDatabase(path)
    db.save(10)

    conn = sqlite3.connect(path)
    with conn:
        conn.execute("UPDATE settings SET value = 'lots' WHERE key = ?", (HIGH_SCORE_KEY,))
    conn.close()

    assert db.save(25) is True
    assert db.load() == 25


def test_close_releases_connection(tmp_path: Path) -> None:
    db = HighScoreDatabase(str(tmp_path / "scores.db"))
    db.save(50)
    assert db.conn is not None

    db.close()
    assert db.conn is None
    db.close()

    # Reopens on the next call
    assert db.load() == 50
    db.close()
