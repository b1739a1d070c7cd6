"""Base exception classes for envset.

All envset exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery
"""

from typing import Any, Dict, Optional


class EnvSetError(Exception):
    """Base exception for all envset errors.

    Attributes:
        code: Machine-readable error code (e.g., "MISSING_INPUT")
        message: Human-readable error message, reported as the step failure
        details: Optional additional context for debugging/recovery
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code (e.g., "MISSING_INPUT")
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(EnvSetError):
    """Invocation inputs are missing or malformed.

    Raised before the target file is touched, so a failed run never
    leaves a partial write behind.
    """

    pass
