# logger.py
"""
Logging configuration for the doubles scheduler.

This module provides centralized logging setup. The setup_logging() function
should be called once by the host application at startup.

All scheduler modules should use the "app" namespace:
    import logging
    logger = logging.getLogger("app.module_name")

This keeps third-party library logs quiet while allowing granular control
over the scheduler's own logging level via the LOG_LEVEL environment variable.
"""

import logging
import os
import sys

from constants import LOG_LEVEL_ENV_VAR

# App namespace prefix - all scheduler loggers should use this
APP_LOGGER_NAME = "app"


def level_from_env(default: int = logging.INFO) -> int:
    """
    Reads the app logging level from the LOG_LEVEL environment variable.

    Accepts level names ("DEBUG", "info") or numeric values ("10").
    Unknown values fall back to the default.
    """
    raw = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


def setup_logging(app_level: int | None = None) -> None:
    """
    Configure logging for the application.

    - Root logger is set to WARNING (keeps third-party libraries quiet)
    - App namespace logger ("app.*") is set to the specified level

    This should be called ONCE at application startup (entry point).

    Args:
        app_level: The logging level for app modules (default: LOG_LEVEL or INFO)
    """
    if app_level is None:
        app_level = level_from_env()

    # Configure root logger to WARNING - silences third-party library noise
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)

    # Avoid adding duplicate handlers if setup is called multiple times
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.DEBUG)  # Handler accepts all; loggers filter

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)

        root_logger.addHandler(handler)

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(app_level)


def log_partnership_summary(logger: logging.Logger, partnerships, players) -> None:
    """
    Log final partnership counts in a consistent format.

    One line per player listing every partner they were teamed with and how
    often, e.g. "Alice: Bob:2, Dave:1". Players without partners are skipped.

    Args:
        logger: Logger instance to use
        partnerships: PartnershipLedger of the finished run
        players: Players to report, in display order
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    logger.debug("Final Partnership Counts:")
    for player in players:
        counts = partnerships.partner_counts(player)
        summary = ", ".join(
            f"{partner}:{count}" for partner, count in counts.items() if count > 0
        )
        if summary:
            logger.debug("%s: %s", player, summary)
