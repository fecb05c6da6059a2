"""Configuration validation for the bot loop."""

from typing import List

from ..config import BotConfig


def validate_bot_config(config: BotConfig) -> List[str]:
    """Check settings that depend on each other.

    Args:
        config: Parsed bot configuration

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if (config.row is None) != (config.col is None):
        errors.append(
            f"❌ Manual move needs both row and col (got row={config.row}, col={config.col})\n"
            f"   Example: --r 5 --c 1"
        )

    if config.cash_out and config.manual_move is not None:
        errors.append(
            "❌ Cash-out and a manual move cannot be combined\n"
            "   Cash-out ends the turn without sending a move"
        )

    if config.autoplay and (config.manual_move is not None or config.cash_out):
        errors.append(
            "❌ Autoplay picks its own moves\n"
            "   Drop --r/--c/--cash_out or run without --autoplay"
        )

    return errors


def print_validation_errors(errors: List[str], logger) -> None:
    """Log validation errors.

    Args:
        errors: List of error messages
        logger: Logger instance
    """
    if errors:
        logger.error("Configuration validation failed:")
        logger.error("")
        for error in errors:
            logger.error(error)
        logger.error("")
        logger.error("Please fix the configuration and try again.")
