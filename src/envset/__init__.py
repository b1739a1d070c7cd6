"""envset - edit KEY=VALUE lines of a .env file from an automated workflow.

This package provides:
- envfile: parsing, merging (set one key / replace all) and file storage
- workflow: step inputs, outputs and failure reporting
- config: typed run inputs and logging settings
- runner: the read -> merge -> write -> report pipeline
- exceptions: exception classes with structured error info
- logger: text and JSON logging
"""

__version__ = "1.0.0"

from envset.envfile import (
    EnvMap,
    MergeResult,
    ReplacementPolicy,
    SetResult,
    parse_env,
    parse_lines,
    replace_all,
    serialize,
    set_key,
)

from envset.exceptions import (
    ConfigurationError,
    EnvSetError,
)

__all__ = [
    "__version__",
    # Env files
    "EnvMap",
    "MergeResult",
    "ReplacementPolicy",
    "SetResult",
    "parse_env",
    "parse_lines",
    "replace_all",
    "serialize",
    "set_key",
    # Exceptions
    "EnvSetError",
    "ConfigurationError",
]
