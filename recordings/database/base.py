"""
Database Module for recordings - Base Components
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Connection handling, the shared repository plumbing and the error types.
"""

import mariadb
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Tuple
from recordings.logging_config import DatabaseLogger


class DatabaseError(Exception):
    """Base exception for database operations."""
    pass


class DatabaseConnectionError(DatabaseError):
    """The connection could not be opened, verified or is not open."""
    pass


class OperationError(DatabaseError):
    """A repository operation failed; keeps the operation name and its key input."""

    def __init__(self, operation: str, key: Any = None, reason: Any = None):
        self.operation = operation
        self.key = key
        self.reason = reason
        message = operation if key is None else f"{operation} {key!r}"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message)


class QueryError(OperationError):
    """A read query or the decoding of its rows failed."""
    pass


class NotFoundError(QueryError):
    """A single-row lookup matched no rows."""

    def __init__(self, operation: str, key: Any = None):
        super().__init__(operation, key, "no such album")


class WriteError(OperationError):
    """An INSERT, UPDATE or DELETE, or reading its result metadata, failed."""
    pass


class DatabaseConnection:
    """Owns one live database connection and hands out cursors on it."""

    def __init__(self, conn_params: Dict[str, Any]):
        self._validate_config(conn_params)
        self.conn_params = dict(conn_params)
        self.db_logger = DatabaseLogger()
        self.logger = self.db_logger.logger
        self.conn = None

    def _validate_config(self, conn_params: Dict[str, Any]) -> None:
        """Validate database connection parameters."""
        required_keys = ['host', 'database', 'user', 'password']
        for key in required_keys:
            if key not in conn_params:
                raise KeyError(f'No {key.title()} provided for DB connection')

    @property
    def is_open(self) -> bool:
        return self.conn is not None

    def connect(self) -> None:
        """Open the connection and confirm the server answers a ping."""
        if self.conn is not None:
            return

        target = f"{self.conn_params.get('host')}:{self.conn_params.get('port', 3306)}/{self.conn_params.get('database')}"
        self.db_logger.log_connection(f"connecting to {target}")
        try:
            # autocommit: each statement is its own transaction
            conn = mariadb.connect(**{**self.conn_params, 'autocommit': True})
        except mariadb.Error as e:
            self.db_logger.log_error("connect", e)
            raise DatabaseConnectionError(f"Could not connect to {target}: {e}") from e

        try:
            conn.ping()
        except mariadb.Error as e:
            self.db_logger.log_error("ping", e)
            conn.close()
            raise DatabaseConnectionError(f"Ping to {target} failed: {e}") from e

        self.conn = conn
        self.logger.info(f"Connected to {target}")

    def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        if self.conn is None:
            return
        conn, self.conn = self.conn, None
        try:
            conn.close()
        finally:
            self.db_logger.log_connection("closed")

    @contextmanager
    def cursor(self):
        """Yield a dictionary cursor that is closed however the block exits."""
        if self.conn is None:
            raise DatabaseConnectionError("Database connection is not open")
        cursor = self.conn.cursor(dictionary=True)
        try:
            yield cursor
        finally:
            cursor.close()

    def health_check(self) -> bool:
        """Check database connection health."""
        if self.conn is None:
            return False
        try:
            self.conn.ping()
            return True
        except mariadb.Error as e:
            self.logger.warning(f"Health check failed: {e}")
            return False


class BaseRepository:
    """Base class for table repositories; every statement binds its parameters."""

    def __init__(self, db_connection: DatabaseConnection, table_name: str):
        self.db = db_connection
        self.table = table_name
        self.logger = db_connection.logger

    def _execute(self, operation: str, key: Any, query: str, params: Tuple = ()):
        """Run a write statement and return the cursor's result metadata."""
        self.db.db_logger.log_query(query, params)
        try:
            with self.db.cursor() as cursor:
                cursor.execute(query, params)
                lastrowid, rowcount = cursor.lastrowid, cursor.rowcount
        except DatabaseConnectionError:
            raise
        except mariadb.Error as e:
            self.db.db_logger.log_error(operation, e)
            raise WriteError(operation, key, e) from e
        self.logger.debug(f"{operation}: last row id {lastrowid}, {rowcount} rows affected")
        return lastrowid, rowcount

    def _fetch_one(self, operation: str, key: Any, query: str, params: Tuple = ()) -> Optional[Dict[str, Any]]:
        """Execute a query that returns a single row, or None."""
        self.db.db_logger.log_query(query, params)
        try:
            with self.db.cursor() as cursor:
                cursor.execute(query, params)
                result = cursor.fetchone()
        except DatabaseConnectionError:
            raise
        except mariadb.Error as e:
            self.db.db_logger.log_error(operation, e)
            raise QueryError(operation, key, e) from e
        self.logger.debug(f"{operation}: {'found' if result else 'not found'}")
        return result

    def _fetch_all(self, operation: str, key: Any, query: str, params: Tuple = ()) -> List[Dict[str, Any]]:
        """Execute a query that returns multiple rows."""
        self.db.db_logger.log_query(query, params)
        try:
            with self.db.cursor() as cursor:
                cursor.execute(query, params)
                results = cursor.fetchall()
        except DatabaseConnectionError:
            raise
        except mariadb.Error as e:
            self.db.db_logger.log_error(operation, e)
            raise QueryError(operation, key, e) from e
        self.logger.debug(f"{operation}: returned {len(results)} rows")
        return results

    def _fetch_scalar(self, operation: str, query: str, params: Tuple = ()) -> Any:
        """Execute a query that returns a single value."""
        result = self._fetch_one(operation, None, query, params)
        if result:
            return next(iter(result.values()))
        return None

    def count(self) -> int:
        """Get the total count of records."""
        query = f"SELECT COUNT(*) FROM {self.table}"
        return self._fetch_scalar("count", query) or 0
