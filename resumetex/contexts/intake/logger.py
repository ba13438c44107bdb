"""
Intake context logger.

Provides logging interface for the intake context with automatic [intake] prefix.
All intake modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[intake]"


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_parse_result(section: str, raw_text: str, record_count: int) -> None:
    """Log how many records a section parser produced from its raw text."""
    _log_debug(f"{section}: {record_count} record(s) from {len(raw_text or '')} characters")
