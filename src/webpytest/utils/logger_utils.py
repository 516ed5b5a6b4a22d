import logging
import os
import sys
from typing import Optional

HARNESS_LOGGER_NAME = 'webpytest'

# ANSI color codes for console output
RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"
PURPLE = "\033[35m"
BOLD = "\033[1m"

OUTCOME_COLORS = {
    'PASS': GREEN,
    'FAIL': RED,
    'SKIP': YELLOW,
}

LEVEL_COLORS = {
    logging.DEBUG: PURPLE,
    logging.INFO: CYAN,
    logging.WARNING: YELLOW,
    logging.ERROR: RED,
    logging.CRITICAL: RED + BOLD,
}


class ColorConsoleFormatter(logging.Formatter):
    """Console formatter coloring records by outcome tag or level."""

    def __init__(self):
        super().__init__('%(asctime)s [%(levelname)s] %(message)s')

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        outcome = getattr(record, 'outcome', None)
        color = OUTCOME_COLORS.get(outcome) or LEVEL_COLORS.get(record.levelno, '')
        return f"{color}{message}{RESET}" if color else message


def setup_harness_logging(level: str = 'INFO', log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the harness logger once: colored console plus optional file output.

    Args:
        level: Logging level name
        log_file: Optional path for a plain-text log file
    """
    logger = logging.getLogger(HARNESS_LOGGER_NAME)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if not any(getattr(h, '_webpytest_console', False) for h in logger.handlers):
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(ColorConsoleFormatter())
        console._webpytest_console = True
        logger.addHandler(console)

    if log_file and not any(getattr(h, 'baseFilename', None) == os.path.abspath(log_file) for h in logger.handlers):
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(message)s'))
        logger.addHandler(handler)

    return logger


class Logger:
    """Harness logger with test-outcome helpers on top of logging."""

    def __init__(self, name: str = HARNESS_LOGGER_NAME):
        self.logger = logging.getLogger(name)

    def debug(self, message: str) -> None:
        self.logger.debug(message)

    def info(self, message: str) -> None:
        self.logger.info(message)

    def pass_(self, message: str) -> None:
        """Log a passed check."""
        self.logger.info(f"PASS: {message}", extra={'outcome': 'PASS'})

    def fail(self, message: str) -> None:
        """Log a failed check."""
        self.logger.error(f"FAIL: {message}", extra={'outcome': 'FAIL'})

    def skip(self, message: str) -> None:
        """Log a skipped test."""
        self.logger.warning(f"SKIP: {message}", extra={'outcome': 'SKIP'})

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)


harness_logger = Logger()
