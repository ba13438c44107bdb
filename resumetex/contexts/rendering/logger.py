"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from resumetex.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, service_url: str = None) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        service_url: Compilation service endpoint, recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from resumetex.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir)
        _log_info("Starting compilation...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Compile service": service_url} if service_url else None,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_compilation_start(url: str, engine: str, source_length: int) -> None:
    """Log start of a compilation attempt."""
    _log_info(f"Submitting LaTeX source to {url}")
    _log_debug(f"  Engine: {engine}")
    _log_debug(f"  Source: {source_length} characters")


def log_compilation_result(
    success: bool,
    elapsed_time: float,
    pdf_size: int = 0,
    error: Exception = None,
) -> None:
    """
    Log the outcome of a compilation attempt.

    Args:
        success: Whether a PDF came back
        elapsed_time: Round-trip time in seconds
        pdf_size: Size of the PDF in bytes (success only)
        error: CompilationError raised by the attempt (failure only)
    """
    if success:
        _log_success(f"Compilation succeeded: {pdf_size} bytes ({elapsed_time:.2f}s)")
    else:
        _log_error(f"Compilation failed ({elapsed_time:.2f}s)")
        if error is not None:
            _log_error(f"  Error: {error}")


def log_fallback(filename: str, reason: Exception) -> None:
    """Log that the LaTeX source is returned instead of a PDF."""
    _log_warning(f"Falling back to LaTeX source download: {filename}")
    _log_warning(f"  Reason: {reason}")
