"""Exceptions for envset.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Usage:
    from envset.exceptions import EnvSetError, ConfigurationError
"""

from envset.exceptions.base import ConfigurationError, EnvSetError

__all__ = [
    "EnvSetError",
    "ConfigurationError",
]
