"""
Process-wide logging setup for the circuit editor.

Configures:
- stderr logging at CIRCUIT_EDITOR_LOG_LEVEL (default INFO)
- an optional rotating log file when CIRCUIT_EDITOR_LOG_DIR is set
- logging of uncaught exceptions raised on the Qt event loop
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FILE_NAME = "circuit_editor.log"
LOG_MAX_BYTES = 5_000_000
LOG_BACKUP_COUNT = 3

_initialized = False
_original_excepthook = sys.excepthook


def _resolve_level(level: Union[str, int, None]) -> int:
    """Resolve a user-provided log level to a logging constant."""
    if isinstance(level, int):
        return level
    level_name = str(level or "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _log_unhandled_exception(exc_type, exc_value, exc_traceback) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        _original_excepthook(exc_type, exc_value, exc_traceback)
        return
    logging.getLogger("circuit_editor.crash").critical(
        "Unhandled exception",
        exc_info=(exc_type, exc_value, exc_traceback),
    )
    _original_excepthook(exc_type, exc_value, exc_traceback)


def setup_logging(log_level: Union[str, int, None] = None,
                  log_dir: Union[str, Path, None] = None) -> Optional[Path]:
    """
    Configure the root logger once. Returns the log file path, or None when
    only stderr logging is enabled.
    """
    global _initialized

    level = _resolve_level(os.environ.get("CIRCUIT_EDITOR_LOG_LEVEL", log_level))
    log_dir = os.environ.get("CIRCUIT_EDITOR_LOG_DIR", log_dir)

    root_logger = logging.getLogger()
    if _initialized:
        root_logger.setLevel(level)
        return None

    root_logger.setLevel(level)
    root_logger.handlers.clear()

    stderr_handler = logging.StreamHandler()
    stderr_handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    ))
    root_logger.addHandler(stderr_handler)

    log_path = None
    if log_dir:
        directory = Path(log_dir).expanduser()
        directory.mkdir(parents=True, exist_ok=True)
        log_path = directory / LOG_FILE_NAME
        file_handler = RotatingFileHandler(
            log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
        )
        file_handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        root_logger.addHandler(file_handler)

    logging.captureWarnings(True)
    sys.excepthook = _log_unhandled_exception
    _initialized = True

    logging.getLogger(__name__).debug("Logging initialized (level=%s, file=%s)",
                                      logging.getLevelName(level), log_path)
    return log_path
