"""
Logger interface for envset.

Every component that reports progress to the workflow log takes a
``Logger`` so callers and tests can swap the implementation.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract base class for the envset logging contract.

    Keyword arguments passed to a log call are structured fields; text
    implementations render them as ``key=value`` pairs, JSON ones as
    extra object members.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message."""

    @abstractmethod
    def get_session_id(self) -> str:
        """Return the identifier shared by every entry of one run."""
