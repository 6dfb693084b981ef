"""Base classes and exceptions shared across the banjoboard package."""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import Any


class Resettable(metaclass=ABCMeta):
    """Abstract base class for objects that can be reset to their initial state."""

    @abstractmethod
    def reset(self) -> None:
        """Reset this to a known good state for further use."""
        raise NotImplementedError()


class MatchException(Exception):
    """Exception raised when pattern matching fails."""

    def __init__(self, value: Any) -> None:
        """Initialize a MatchException with the unmatched value.

        Args:
            value: The value that failed to match any pattern.
        """
        super().__init__(f"Failed to match value: {value}")
