import logging

# Project logger shared by every pipeline stage
LOGGER_NAME = "daily_mood"
logger = logging.getLogger(LOGGER_NAME)


def log_section(title: str) -> None:
    """Top-level section header."""
    logger.info("")
    logger.info("=== %s ===", title)


def log_info(message: str) -> None:
    logger.info("%s", message)


def log_step(message: str) -> None:
    logger.info("→ %s", message)


def log_success(message: str) -> None:
    logger.info("✅ %s", message)


def log_warning(message: str) -> None:
    """Non-fatal problem; the run continues."""
    logger.warning("⚠️ %s", message)


def log_error(message: str) -> None:
    """Fatal problem; the run stops."""
    logger.error("❌ %s", message)


def log_progress(current: int, total: int, label: str = "") -> None:
    """
    Per-item progress line.

    Example:
      log_progress(3, 12, label="Blue Monday")
      -> "[3/12] Blue Monday"
    """
    if total <= 0:
        total = 1

    if label:
        logger.info("[%d/%d] %s", current, total, label)
    else:
        logger.info("[%d/%d]", current, total)
