import logging
import re
from pathlib import Path

RED = "\033[91m"
YELLOW = "\033[93m"
GREEN = "\033[92m"
RESET = "\033[0m"
WHITE = "\033[97m"

LOG_FORMAT = '%(asctime)s.%(msecs)03d - %(levelname)s - %(name)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
DEFAULT_LOG_FILE = "logs/test-execution.log"

ANSI_ESCAPE = re.compile(r"\033\[[0-9;]*m")

logger = logging.getLogger("bookstore")

_file_handlers = {}


class PlainTextFormatter(logging.Formatter):
    """Drops the colour codes log_status adds so the log file stays plain text."""

    def format(self, record):
        return ANSI_ESCAPE.sub("", super().format(record))


def configure_logging(level="INFO", log_file=DEFAULT_LOG_FILE):
    """
    Sets the root log level and attaches the plain-text execution log.

    Safe to call more than once: a given log file only ever gets one handler.
    """
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        logging.getLogger(__name__).warning(f"Unknown log level {level!r}, falling back to INFO")
        numeric_level = logging.INFO

    root = logging.getLogger()
    root.setLevel(numeric_level)

    if log_file:
        path = Path(log_file).resolve()
        if path not in _file_handlers:
            path.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(path, encoding="utf-8")
            handler.setFormatter(PlainTextFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            root.addHandler(handler)
            _file_handlers[path] = handler
        _file_handlers[path].setLevel(numeric_level)

    return numeric_level


def log_status(status, message, extra=""):
    status = status.lower()
    color = WHITE  # default
    level = logging.INFO

    if status == "error":
        color = RED
        level = logging.ERROR
    elif status == "warning":
        color = YELLOW
        level = logging.WARNING
    elif status == "good":
        color = GREEN

    logger.log(level, f"{color}{message}{extra}{RESET}")
