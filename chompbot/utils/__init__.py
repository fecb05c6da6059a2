"""Utility functions for the Chomp bot."""

from .validation import print_validation_errors, validate_bot_config

__all__ = ['validate_bot_config', 'print_validation_errors']
