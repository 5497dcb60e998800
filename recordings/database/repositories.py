"""
Database Repositories for recordings
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Repository classes for each database table.
"""

from typing import List
from .base import BaseRepository, NotFoundError, QueryError, WriteError
from .models import Album


class AlbumsRepository(BaseRepository):
    """Repository for the album table."""

    COLUMNS = "id, title, artist, price"

    def __init__(self, db_connection):
        super().__init__(db_connection, 'album')

    def _to_albums(self, operation: str, key, rows) -> List[Album]:
        try:
            return [Album.from_row(row) for row in rows]
        except (KeyError, TypeError, ValueError) as e:
            self.db.db_logger.log_error(operation, e)
            raise QueryError(operation, key, e) from e

    def get_by_artist(self, artist: str) -> List[Album]:
        """Get all albums by the given artist. No match gives an empty list."""
        query = f"SELECT {self.COLUMNS} FROM {self.table} WHERE artist = ?"
        rows = self._fetch_all("get_by_artist", artist, query, (artist,))
        return self._to_albums("get_by_artist", artist, rows)

    def get_by_id(self, album_id: int) -> Album:
        """
        Get an album by its ID.

        Raises:
            NotFoundError: no album has this ID
            QueryError: the query or decoding the row failed
        """
        query = f"SELECT {self.COLUMNS} FROM {self.table} WHERE id = ?"
        row = self._fetch_one("get_by_id", album_id, query, (album_id,))
        if row is None:
            raise NotFoundError("get_by_id", album_id)
        return self._to_albums("get_by_id", album_id, [row])[0]

    def get_all(self) -> List[Album]:
        """Get all albums."""
        query = f"SELECT {self.COLUMNS} FROM {self.table}"
        rows = self._fetch_all("get_all", None, query)
        return self._to_albums("get_all", None, rows)

    def insert(self, album: Album) -> int:
        """Insert a new album and return the ID the database assigned to it."""
        query = f"INSERT INTO {self.table} (title, artist, price) VALUES (?, ?, ?)"
        lastrowid, _ = self._execute("insert", album.title, query, (
            album.title, album.artist, album.price
        ))
        if not lastrowid:
            raise WriteError("insert", album.title, "no ID returned for the new row")
        return lastrowid

    def update(self, album_id: int, album: Album) -> int:
        """
        Overwrite title, artist and price of an album.

        Returns the number of affected rows, 0 if no album has this ID.
        """
        query = f"UPDATE {self.table} SET title = ?, artist = ?, price = ? WHERE id = ?"
        _, rowcount = self._execute("update", album_id, query, (
            album.title, album.artist, album.price, album_id
        ))
        return rowcount

    def delete(self, album_id: int) -> int:
        """Delete an album by its ID. Returns the number of affected rows."""
        query = f"DELETE FROM {self.table} WHERE id = ?"
        _, rowcount = self._execute("delete", album_id, query, (album_id,))
        return rowcount
