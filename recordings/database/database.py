"""
Database Module for recordings - Main Database Class
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Main database interface that owns the connection and its repositories.
"""

from typing import Dict, Any
from .base import DatabaseConnection
from .repositories import AlbumsRepository


class Database:
    """
    Main database interface for recordings.

    Example:
        conn_params = {
            'host': 'localhost',
            'port': 3306,
            'database': 'recordings',
            'user': 'username',
            'password': 'password'
        }

        with Database(conn_params) as db:
            albums = db.albums.get_by_artist("John Coltrane")
            album = db.albums.get_by_id(1)
    """

    def __init__(self, conn_params: Dict[str, Any], connect: bool = True):
        """
        Initialize the database connection and repositories.

        Args:
            conn_params: Database connection parameters
            connect: Whether to open and ping the connection right away
        """
        self.connection = DatabaseConnection(conn_params)
        self.albums = AlbumsRepository(self.connection)

        if connect:
            self.connection.connect()

    def connect(self) -> None:
        self.connection.connect()

    def close(self) -> None:
        self.connection.close()

    def health_check(self) -> bool:
        """Check if database connection is healthy."""
        return self.connection.health_check()

    def get_stats(self) -> Dict[str, int]:
        """Get database statistics."""
        return {
            'albums': self.albums.count()
        }

    def __enter__(self):
        self.connection.connect()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.connection.close()
        return False
