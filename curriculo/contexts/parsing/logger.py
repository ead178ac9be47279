"""
Parsing context logger.

Provides logging interface for the parsing context with automatic [parse] prefix.
All parsing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from curriculo.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[parse]"


def setup_parsing_logger(log_dir: Optional[Path] = None, input_name: str = "") -> Optional[Path]:
    """
    Setup logger for the parsing context.

    Args:
        log_dir: Directory for this parsing session (None for console only)
        input_name: Name of the file being parsed, recorded in the provenance header

    Returns:
        Path to log file, or None without a log_dir
    """
    return _setup_logger(
        context_name="parse",
        log_dir=log_dir,
        extra_provenance={"Input": input_name} if input_name else None,
    )


# Wrapper functions with automatic [parse] prefix


def _log_warning(message: str) -> None:
    """Log warning message with [parse] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [parse] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level parsing-specific logging helpers


def log_parse_start(file_name: str, char_count: int) -> None:
    """Log start of a parse with input size."""
    _log_debug(f"Parsing {file_name or '<unnamed>'} ({char_count} chars)")


def log_parse_result(file_name: str, result) -> None:
    """
    Log outcome of a parse.

    Args:
        file_name: Source file name
        result: ParseResult from parse_resume_text()
    """
    if result.is_empty:
        _log_warning(f"{file_name or '<unnamed>'}: nothing to parse")
        return

    document = result.document
    _log_debug(
        f"{file_name or '<unnamed>'}: {len(document.experience)} experience, "
        f"{len(document.education)} education, {len(document.languages)} languages, "
        f"{len(document.projects)} projects, {len(document.certifications)} certifications, "
        f"{len(document.unmapped_blocks)} unmapped blocks"
    )
    for violation in result.violations:
        _log_warning(f"Schema violation: {violation}")
