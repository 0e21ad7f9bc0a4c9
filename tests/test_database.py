import pytest

from tutorbook import database
from tutorbook.database import Database, DatabaseError, default_database


@pytest.fixture
def db(tmp_path):
    instance = Database(tmp_path / "test.db")
    instance.execute("CREATE TABLE items (name TEXT PRIMARY KEY, qty INTEGER)")
    yield instance
    instance.close()


def test_open_and_close(tmp_path):
    instance = Database(tmp_path / "a.db")
    assert instance.is_open()
    instance.close()
    assert not instance.is_open()


def test_execute_returns_rows(db):
    db.execute("INSERT INTO items VALUES (?, ?)", ["pen", 3])
    db.execute("INSERT INTO items VALUES (?, ?)", ("cup", 1))
    rows = db.execute("SELECT name, qty FROM items ORDER BY name")
    assert rows == [("cup", 1), ("pen", 3)]


def test_execute_on_closed_database_raises(db):
    db.close()
    with pytest.raises(DatabaseError):
        db.execute("SELECT 1")


def test_bad_sql_raises_database_error(db):
    with pytest.raises(DatabaseError):
        db.execute("SELECT * FROM missing_table")


def test_constraint_violation_raises(db):
    db.execute("INSERT INTO items VALUES (?, ?)", ("pen", 1))
    with pytest.raises(DatabaseError):
        db.execute("INSERT INTO items VALUES (?, ?)", ("pen", 2))


def test_transaction_commits(db):
    with db.transaction():
        db.execute("INSERT INTO items VALUES (?, ?)", ("pen", 1))
        db.execute("INSERT INTO items VALUES (?, ?)", ("cup", 2))
    assert db.execute("SELECT COUNT(*) FROM items") == [(2,)]


def test_transaction_rolls_back_on_error(db):
    with pytest.raises(DatabaseError):
        with db.transaction():
            db.execute("INSERT INTO items VALUES (?, ?)", ("pen", 1))
            db.execute("INSERT INTO items VALUES (?, ?)", ("pen", 2))
    assert db.execute("SELECT COUNT(*) FROM items") == [(0,)]


def test_transaction_rolls_back_on_any_exception(db):
    with pytest.raises(RuntimeError):
        with db.transaction():
            db.execute("INSERT INTO items VALUES (?, ?)", ("pen", 1))
            raise RuntimeError("stop")
    assert db.execute("SELECT * FROM items") == []


def test_data_persists_across_reopen(tmp_path):
    path = tmp_path / "persist.db"
    first = Database(path)
    first.execute("CREATE TABLE t (v TEXT)")
    first.execute("INSERT INTO t VALUES (?)", ("kept",))
    first.close()
    second = Database(path)
    assert second.execute("SELECT v FROM t") == [("kept",)]
    second.close()


def test_set_path_switches_file(db, tmp_path):
    other = tmp_path / "other.db"
    db.set_path(other)
    assert db.path == str(other)
    assert db.is_open()
    assert db.execute("SELECT name FROM sqlite_master WHERE type='table'") == []


def test_set_path_same_path_keeps_connection(db):
    db.execute("INSERT INTO items VALUES (?, ?)", ("pen", 1))
    db.set_path(db.path)
    assert db.execute("SELECT name FROM items") == [("pen",)]


def test_open_in_missing_directory_raises(tmp_path):
    with pytest.raises(DatabaseError):
        Database(tmp_path / "no" / "such" / "dir" / "x.db")


def test_blob_round_trip(db):
    db.execute("CREATE TABLE blobs (data BLOB)")
    payload = bytes(range(256))
    db.execute("INSERT INTO blobs VALUES (?)", (payload,))
    assert db.execute("SELECT data FROM blobs") == [(payload,)]


def test_context_manager_closes(tmp_path):
    with Database(tmp_path / "ctx.db") as instance:
        assert instance.is_open()
    assert not instance.is_open()


def test_default_database_is_shared(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(database, "_default", None)
    first = default_database()
    second = default_database()
    assert first is second
    assert first.path == database.DEFAULT_PATH
    assert (tmp_path / database.DEFAULT_PATH).exists()
    first.close()