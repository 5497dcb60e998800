"""
Centralized logging configuration for recordings.
"""

import logging
import logging.handlers
import os
import sys
from typing import Optional


# ANSI Color codes for console output
class Colors:
    RESET = '\033[0m'
    BOLD = '\033[1m'

    RED = '\033[31m'
    WHITE = '\033[37m'

    BRIGHT_BLACK = '\033[90m'
    BRIGHT_RED = '\033[91m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_CYAN = '\033[96m'


LOG_FORMAT = '[%(asctime)s] %(levelname)-8s %(name)-20s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level and logger name on the console."""

    LEVEL_COLORS = {
        'DEBUG': Colors.BRIGHT_BLACK,
        'INFO': Colors.BRIGHT_BLUE,
        'WARNING': Colors.BRIGHT_YELLOW,
        'ERROR': Colors.BRIGHT_RED,
        'CRITICAL': Colors.RED + Colors.BOLD,
    }

    def format(self, record):
        formatted = super().format(record)
        level_color = self.LEVEL_COLORS.get(record.levelname, Colors.WHITE)

        parts = formatted.split(' ', 3)  # [date, time], level, "logger: message"
        if len(parts) >= 4:
            timestamp = parts[0] + ' ' + parts[1]
            level = parts[2]
            logger, _, message = parts[3].lstrip().partition(':')
            logger = logger.rstrip()

            colored_timestamp = f"{Colors.BRIGHT_BLACK}{timestamp}{Colors.RESET}"
            colored_level = f"{level_color}{level:<8s}{Colors.RESET}"
            colored_logger = f"{Colors.BRIGHT_CYAN}{logger:<20s}{Colors.RESET}"

            return f"{colored_timestamp} {colored_level} {colored_logger}:{message}"

        return formatted


class RecordingsLogger:
    """Process-wide logging setup shared by every recordings module."""

    _instance = None
    _loggers = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(RecordingsLogger, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
        self.logs_dir = os.getenv('LOG_DIR', 'logs')

        os.makedirs(self.logs_dir, exist_ok=True)

        self._configure_root_logger()

    def _configure_root_logger(self):
        """Attach the console and main file handlers to the root logger."""
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, self.log_level, logging.INFO))
        console_handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(console_handler)

        main_file_handler = logging.handlers.RotatingFileHandler(
            filename=os.path.join(self.logs_dir, 'recordings.log'),
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        main_file_handler.setLevel(logging.DEBUG)
        main_file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(main_file_handler)

    def get_logger(self, name: str, log_file: Optional[str] = None) -> logging.Logger:
        """
        Get a logger instance for a specific module.

        Args:
            name: Logger name (usually module name)
            log_file: Optional separate log file for this logger

        Returns:
            Configured logger instance
        """
        if name in self._loggers:
            return self._loggers[name]

        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)

        if log_file:
            file_handler = logging.handlers.RotatingFileHandler(
                filename=os.path.join(self.logs_dir, log_file),
                maxBytes=5*1024*1024,  # 5MB
                backupCount=3,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            logger.addHandler(file_handler)

        self._loggers[name] = logger
        return logger


def get_logger(name: str, log_file: Optional[str] = None) -> logging.Logger:
    """Convenience function to get a logger."""
    return RecordingsLogger().get_logger(name, log_file)


class DatabaseLogger:
    """Special logger for database operations."""

    def __init__(self):
        self.logger = get_logger('recordings.database', 'database.log')

    def log_query(self, query: str, params: tuple = None):
        """Log database queries."""
        if params:
            self.logger.debug(f"SQL Query: {query} | Params: {params}")
        else:
            self.logger.debug(f"SQL Query: {query}")

    def log_connection(self, operation: str):
        """Log database connection operations."""
        self.logger.debug(f"Database connection: {operation}")

    def log_error(self, operation: str, error: Exception):
        """Log database errors."""
        self.logger.error(f"Database error in {operation}: {error}", exc_info=True)
