# matchclip/utils/logging_config.py
"""matchclip.utils.logging_config
================================

Logging configuration utility for matchclip. It defines the global package
logger and a single setup function, `setup_logging`, which configures
application-wide logging handlers and log levels based on a supplied
configuration dictionary.

Features:
    - Rotating file logging for general events (matchclip.log).
    - Optional console logging to stderr with configurable log level.
    - Optional separate error log file (error.log) for ERROR and CRITICAL events.
    - Automatic creation of log directories, with fallback to the system temp directory on failure.
    - Safe reconfiguration: clears existing handlers to avoid duplicate logs when called multiple times.
    - Never raises exceptions; all errors are reported to stderr and logging continues with best-effort.

Usage:
    >>> from matchclip.utils import logging_config
    >>> logging_config.setup_logging({"logging": {"console_level": "ERROR"}})

Globals:
    logger: Main package logger ("matchclip").
"""

import logging
import logging.handlers
import os
import sys
import tempfile
from typing import Any, Optional


# ======================== Global logger ========================
# Created at import-time but unconfigured until ``setup_logging()`` attaches handlers.
logger = logging.getLogger("matchclip")


def _ensure_log_dir(filename: str, fallback_name: str) -> str:
    """Creates the directory of ``filename`` or returns a temp-dir fallback path."""
    log_dir = os.path.dirname(filename)
    if log_dir and not os.path.exists(log_dir):
        try:
            os.makedirs(log_dir)
        except OSError as e_mkdir:
            print(f"Error creating log directory '{log_dir}': {e_mkdir}", file=sys.stderr)
            filename = os.path.join(tempfile.gettempdir(), fallback_name)
            print(f"Logging to temporary file: '{filename}'", file=sys.stderr)
    return filename


def setup_logging(config: Optional[dict[str, Any]] = None) -> None:
    """Configures application-wide logging handlers and log levels.

    Up to three independent handlers are attached to the root logger:

    1. File handler – rotating ``log_file`` (default matchclip.log) capturing
       everything from the configured `file_level` (default DEBUG) upward.
    2. Console handler – optional `stderr` output whose threshold is
       `console_level` (default WARNING).
    3. Error-file handler – optional rotating error.log next to the main log
       that stores only ERROR and CRITICAL events.

    Existing handlers on the root logger are cleared to avoid duplicate
    records when the function is invoked multiple times (e.g. in unit tests).

    Args:
        config (dict | None): Optional configuration blob. Only the
            ``["logging"]`` sub-section is consulted; recognised keys are
            ``file_level``, ``console_level``, ``log_to_console``,
            ``separate_error_log`` and ``log_file``.

    Notes:
        The function never raises; I/O or permission errors are reported to
        stderr and the logging subsystem continues with a best-effort
        configuration.
    """
    if config is None:
        config = {}
    logging_config = config.get("logging", {})
    log_filename = os.path.expanduser(logging_config.get("log_file", "matchclip.log"))
    log_file_level_str = str(logging_config.get("file_level", "DEBUG")).upper()
    log_file_level = getattr(logging, log_file_level_str, logging.DEBUG)

    log_filename = _ensure_log_dir(log_filename, "matchclip.log")

    file_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)-8s - %(name)-15s - %(message)s (%(filename)s:%(lineno)d)"
    )
    file_handler = None
    try:
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(log_file_level)
    except OSError as e_fh:
        print(
            f"Error setting up file logger for '{log_filename}': {e_fh}. File logging may be impaired.",
            file=sys.stderr,
        )

    # Console Handler
    console_handler = None
    if logging_config.get("log_to_console", True):
        console_level_str = str(logging_config.get("console_level", "WARNING")).upper()
        console_log_level = getattr(logging, console_level_str, logging.WARNING)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(levelname)-8s - %(name)-12s - %(message)s"))
        console_handler.setLevel(console_log_level)

    # Optional Separate Error Log File
    error_file_handler = None
    error_log_filename = os.path.join(os.path.dirname(log_filename), "error.log")
    if logging_config.get("separate_error_log", False):
        try:
            error_file_handler = logging.handlers.RotatingFileHandler(
                error_log_filename,
                maxBytes=1 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
            error_file_handler.setFormatter(file_formatter)
            error_file_handler.setLevel(logging.ERROR)
        except OSError as e_efh:
            print(
                f"Error setting up separate error log '{error_log_filename}': {e_efh}.",
                file=sys.stderr,
            )

    # Configure the root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []  # Clear existing root handlers to avoid duplicates

    if file_handler:
        root_logger.addHandler(file_handler)
    if console_handler:
        root_logger.addHandler(console_handler)
    if error_file_handler:
        root_logger.addHandler(error_file_handler)

    root_logger.setLevel(log_file_level)

    logger.info(
        "Logging setup complete. Root logger level: %s.",
        logging.getLevelName(root_logger.level),
    )
    if file_handler:
        logger.info(
            "File logging to '%s' at level: %s.", log_filename, logging.getLevelName(file_handler.level)
        )
    if console_handler:
        logger.info("Console logging to stderr at level: %s.", logging.getLevelName(console_handler.level))
    if error_file_handler:
        logger.info("Error logging to '%s' at level: ERROR.", error_log_filename)
