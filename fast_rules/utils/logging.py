import logging
import os
import sys
from pathlib import Path

_logging_configured = False
_log_file_path: Path | None = None


def setup_logging(log_file_name: str | None = None, log_dir: str | Path | None = None):
    """
    Setup logging for command line usage.

    Log levels:
    - CRITICAL
    - ERROR
    - WARNING
    - INFO
    - DEBUG
    - NOTSET

    Logs go to stderr. When a file name is given (or LOG_FILE_NAME is set),
    records are also appended to that file inside `log_dir` (default ./log).
    """
    global _logging_configured, _log_file_path

    file_name = log_file_name if log_file_name else os.getenv('LOG_FILE_NAME')
    log_file = None
    if file_name:
        directory = Path(log_dir) if log_dir else Path.cwd() / "log"
        log_file = directory / file_name

    # If already configured and path matches, skip reconfiguration
    if _logging_configured and _log_file_path == log_file:
        return

    root_logger = logging.getLogger()
    root_logger.setLevel(os.getenv('LOG_LEVEL', 'WARNING').upper())

    # Clear any existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter('%(levelname)s - %(name)s - %(message)s'))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_file), mode='a')
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        root_logger.addHandler(file_handler)

    _log_file_path = log_file
    _logging_configured = True
    logging.debug("Logging configured")


def get_log_file_path() -> Path | None:
    return _log_file_path
