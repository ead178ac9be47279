"""
Generic loguru setup for CURRICULO.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers should be defined in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

# Console level can be raised (e.g., WARNING) for batch runs
DEFAULT_CONSOLE_LEVEL = os.getenv("CURRICULO_LOG_LEVEL", "INFO")

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    extra_provenance: Optional[dict] = None,
    console_level: str = DEFAULT_CONSOLE_LEVEL,
) -> Optional[Path]:
    """
    Configure loguru for a context with provenance tracking.

    Console output always goes to stderr so that commands printing JSON to
    stdout stay machine readable. When log_dir is given, a DEBUG file sink
    named after the context is added as well.

    Args:
        context_name: Context identifier (e.g., "parse")
        log_dir: Directory for this logging session, or None for console only
        extra_provenance: Additional key-value pairs for the provenance header
        console_level: Minimum level shown on the console

    Returns:
        Path to log file, or None when no file sink was added

    Example:
        from curriculo.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="parse",
            log_dir=Path("outs/logs/parse_20261019"),
            extra_provenance={"Input": "cv.pdf"},
        )
    """
    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    log_file = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(exist_ok=True, parents=True)
        log_file = log_dir / f"{context_name}.log"
        logger.add(
            log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG"
        )

    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>",
        level=console_level,
        colorize=True,
    )

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Log execution provenance to the current logger.

    Logs script, command, working directory and Python version, plus any
    additional context provided. Written at DEBUG so it lands in the log
    file without cluttering the console.

    Args:
        extra_context: Additional key-value pairs to log
    """
    logger.debug("=" * 80)
    logger.debug(f"Script: {sys.argv[0]}")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)
