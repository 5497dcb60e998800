"""
Database Module for recordings
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Data access for the album table of the recordings database.
"""

__title__ = 'recordings database'
__version__ = '0.1.0'

from .database import Database
from .base import (
    DatabaseConnection, DatabaseError, DatabaseConnectionError,
    QueryError, NotFoundError, WriteError
)
from .models import Album
from .repositories import AlbumsRepository

__all__ = [
    'Database',
    'DatabaseConnection',
    'DatabaseError',
    'DatabaseConnectionError',
    'QueryError',
    'NotFoundError',
    'WriteError',
    'Album',
    'AlbumsRepository'
]

# Prevent direct execution
if __name__ == '__main__':
    print('This is not a standalone module.')
    raise SystemExit
