"""
Test Configuration File

Puts the project root on the Python path, sends log files to a temporary
directory and provides an in-memory stand-in for a mariadb connection that
understands the statements issued against the album table.
"""

import os
import sys
import tempfile
from decimal import Decimal
from pathlib import Path

import mariadb
import pytest

root_path = Path(__file__).parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))

os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='recordings-logs-'))


SELECT_ALBUMS = "SELECT id, title, artist, price FROM album"


class FakeAlbumTable:
    """Rows of the album table, keyed by id, with AUTO_INCREMENT ids."""

    def __init__(self):
        self.rows = {}
        self.next_id = 1
        self.fail_on = None
        self.insert_returns_id = True
        self.executed = []

    def add(self, title, artist, price):
        album_id = self.next_id
        self.next_id += 1
        self.rows[album_id] = {
            'id': album_id,
            'title': title,
            'artist': artist,
            'price': Decimal(str(round(price, 2))),
        }
        return album_id


class FakeCursor:

    def __init__(self, table, dictionary=False):
        self.table = table
        self.dictionary = dictionary
        self.closed = False
        self.lastrowid = None
        self.rowcount = -1
        self._results = []

    def execute(self, query, params=()):
        query = ' '.join(query.split())
        self.table.executed.append((query, tuple(params)))
        if self.table.fail_on and query.startswith(self.table.fail_on):
            raise mariadb.Error(f"simulated failure for {query}")

        rows = self.table.rows
        if query == SELECT_ALBUMS:
            self._results = [dict(row) for row in rows.values()]
        elif query == SELECT_ALBUMS + " WHERE artist = ?":
            self._results = [dict(row) for row in rows.values() if row['artist'] == params[0]]
        elif query == SELECT_ALBUMS + " WHERE id = ?":
            self._results = [dict(rows[params[0]])] if params[0] in rows else []
        elif query == "SELECT COUNT(*) FROM album":
            self._results = [{'COUNT(*)': len(rows)}]
        elif query.startswith("INSERT INTO album (title, artist, price)"):
            album_id = self.table.add(*params)
            self.lastrowid = album_id if self.table.insert_returns_id else 0
            self.rowcount = 1
        elif query.startswith("UPDATE album SET title = ?, artist = ?, price = ? WHERE id = ?"):
            title, artist, price, album_id = params
            self.lastrowid = 0
            self.rowcount = 0
            if album_id in rows:
                rows[album_id].update(title=title, artist=artist, price=Decimal(str(round(price, 2))))
                self.rowcount = 1
        elif query == "DELETE FROM album WHERE id = ?":
            self.lastrowid = 0
            self.rowcount = 1 if rows.pop(params[0], None) is not None else 0
        else:
            raise mariadb.ProgrammingError(f"unexpected statement: {query}")

    def fetchone(self):
        return self._results.pop(0) if self._results else None

    def fetchall(self):
        results, self._results = self._results, []
        return results

    def close(self):
        self.closed = True


class FakeConnection:

    def __init__(self, table):
        self.table = table
        self.cursors = []
        self.commits = 0
        self.closed = False
        self.ping_error = None

    def cursor(self, dictionary=False):
        cursor = FakeCursor(self.table, dictionary=dictionary)
        self.cursors.append(cursor)
        return cursor

    def ping(self):
        if self.ping_error:
            raise self.ping_error

    def commit(self):
        self.commits += 1

    def close(self):
        self.closed = True


@pytest.fixture
def conn_params():
    return {
        'host': 'localhost',
        'port': 3306,
        'database': 'recordings',
        'user': 'tester',
        'password': 'secret',
    }


@pytest.fixture
def album_table():
    table = FakeAlbumTable()
    table.add("Blue Train", "John Coltrane", 56.99)
    table.add("Giant Steps", "John Coltrane", 63.99)
    table.add("Jeru", "Gerry Mulligan", 17.99)
    table.add("Sarah Vaughan", "Sarah Vaughan", 34.98)
    return table


@pytest.fixture
def fake_connection(album_table, monkeypatch):
    """Patch mariadb.connect so it hands back a FakeConnection."""
    connection = FakeConnection(album_table)
    calls = []

    def connect(**kwargs):
        calls.append(kwargs)
        return connection

    monkeypatch.setattr(mariadb, 'connect', connect)
    connection.connect_calls = calls
    return connection


@pytest.fixture
def db(conn_params, fake_connection):
    from recordings.database import Database

    database = Database(conn_params)
    yield database
    database.close()
