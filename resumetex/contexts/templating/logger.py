"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_section_fallback(section: str, raw_length: int, cap: int) -> None:
    """Log that a section is rendered from truncated raw text instead of parsed records."""
    _log_warning(
        f"{section}: no records parsed from {raw_length} characters, "
        f"rendering raw text (cap {cap})"
    )


def log_document_generated(full_name: str, sections: list, length: int) -> None:
    """Log a summary of the assembled document."""
    _log_info(f"Generated LaTeX for {full_name} ({length} characters)")
    _log_debug(f"  Sections: {', '.join(sections)}")
