"""
Connection settings for the recordings database, read from the environment.

A ``.env`` file in the working directory is loaded first, so local setups
can keep credentials out of the shell.
"""

import os
from typing import Any, Dict

from dotenv import load_dotenv


DEFAULT_HOST = 'localhost'
DEFAULT_PORT = 3306
DEFAULT_DATABASE = 'recordings'


def _getenv(*names: str, default: Any = None) -> Any:
    for name in names:
        value = os.getenv(name)
        if value is not None:
            return value
    return default


def load_conn_params() -> Dict[str, Any]:
    """Build the mariadb connection parameters from ``DB_*`` variables."""
    load_dotenv()
    return {
        "user": _getenv('DB_USER', 'DBUSER'),
        "password": _getenv('DB_PASS', 'DBPASS'),
        "host": _getenv('DB_HOST', default=DEFAULT_HOST),
        "port": int(_getenv('DB_PORT', default=DEFAULT_PORT)),
        "database": _getenv('DB_DATABASE', default=DEFAULT_DATABASE),
    }
