# docraster/utils/logger.py
# ============================================================
# Structured Logging Setup
# ============================================================
# Provides a pre-configured logger with Rich console output for
# human-readable logs. Colors, timestamps, and module names are
# included automatically.
#
# Usage:
#   from docraster.utils.logger import get_logger
#   logger = get_logger(__name__)
#   logger.info("Rendering page 1 of 10")
# ============================================================

import logging

from rich.logging import RichHandler

from config.settings import settings


def get_logger(name: str) -> logging.Logger:
    """
    Create and return a pre-configured logger with Rich formatting.

    Args:
        name: Logger name, typically __name__ from the calling module.
              This appears in log output to identify the source.

    Returns:
        A logging.Logger instance with Rich console handler attached.

    Example:
        >>> logger = get_logger("docraster.pipeline.orchestrator")
        >>> logger.info("Preparing document: report.pdf")
        [10:30:45] INFO     docraster.pipeline.orchestrator — Preparing document: report.pdf
    """
    logger = logging.getLogger(name)

    # Avoid adding duplicate handlers if get_logger is called multiple times
    if not logger.handlers:
        level = getattr(logging, settings.log_level.upper(), logging.INFO)
        logger.setLevel(level)

        rich_handler = RichHandler(
            level=level,
            rich_tracebacks=True,
            show_time=True,
            show_path=False,            # Module name is enough, skip file paths
            markup=True,                # Allow Rich markup in log messages
        )

        # Rich handles time/level decoration
        formatter = logging.Formatter("%(name)s — %(message)s")
        rich_handler.setFormatter(formatter)

        logger.addHandler(rich_handler)

        # Prevent log propagation to root logger (avoids duplicate messages)
        logger.propagate = False

    return logger
