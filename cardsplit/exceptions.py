"""
Error types raised by the categorizer.
"""
from typing import Any, Dict, Optional


class CardSplitError(Exception):
    """Base exception for all categorizer errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize exception.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ReadError(CardSplitError, ValueError):
    """Raised when an input file cannot be read as text."""
    pass
