"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from herald.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path = None, family: str = "") -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this generation session
        family: Template family key recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Family": family} if family else None,
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level generation logging helpers


def log_generation_start(family_key: str, platform: str, active_prizes: int) -> None:
    """Log start of a four-document generation run."""
    _log_info(f"Generating campaign documents for {family_key}")
    _log_debug(f"Platform: {platform}, active prizes: {active_prizes}")


def log_generation_result(result, elapsed_time: float) -> None:
    """
    Log generation result with per-document sizes.

    Args:
        result: CampaignDocuments from generate_campaign_documents()
        elapsed_time: Time taken
    """
    for kind, text in result.as_dict().items():
        if text:
            _log_debug(f"  {kind}: {len(text)} chars")
        else:
            _log_warning(f"  {kind}: empty output")

    _log_success(f"{result.family.key}: generation finished ({elapsed_time:.3f}s)")
