"""Configuration for envset runs.

Example:
    from envset.config import ActionInputs, EnvLoader, LogSettings

    inputs = ActionInputs.from_env(EnvLoader(".envset.defaults").load())
    log = LogSettings.from_env()
"""

from envset.config.env_loader import EnvLoader
from envset.config.settings import ActionInputs, LogSettings

__all__ = [
    "ActionInputs",
    "EnvLoader",
    "LogSettings",
]
