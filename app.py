#!/usr/bin/env python3
"""
Walk through every album operation against the recordings database and
print what comes back.
"""

import sys
from recordings.config import load_conn_params
from recordings.database import Album, Database, DatabaseError
from recordings.logging_config import get_logger


logger = get_logger('recordings.main')
VERSION = '0.1.0'


def _format(albums):
    return '[' + ' '.join(str(album) for album in albums) + ']'


def run(db: Database) -> None:
    """Run the album operations in order, printing each result."""
    albums = db.albums.get_by_artist("John Coltrane")
    print(f"Albums found: {_format(albums)}")

    album = db.albums.get_by_id(1)
    print(f"Album found: {album}")

    album_id = db.albums.insert(Album(
        title="The Modern Sound of Betty Carter",
        artist="Betty Carter",
        price=49.99,
    ))
    print(f"ID of added album: {album_id}")

    print(f"All Albums found: {_format(db.albums.get_all())}")

    count_affected = db.albums.update(album_id, Album(
        title="The Modern Sound of Bee",
        artist="Betty Cartner",
        price=45.99,
    ))
    print(f"{count_affected} rows affected by update by ID: {album_id}")

    print(f"All Albums found: {_format(db.albums.get_all())}")

    count_affected = db.albums.delete(album_id)
    print(f"{count_affected} row affected by delete by ID: {album_id}")

    print(f"All Albums found: {_format(db.albums.get_all())}")


def main() -> int:
    logger.info(f'Starting recordings v{VERSION}...')
    try:
        with Database(load_conn_params(), connect=False) as db:
            print("Connected!")
            run(db)
    except KeyError as e:
        logger.error(f'Configuration error: {e}')
        return 1
    except DatabaseError as e:
        logger.error(f'{type(e).__name__}: {e}')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
