"""Environment loader with optional .env defaults.

Resolves the environment a run reads its inputs from, in order:
1) defaults file (if provided and exists)
2) OS environment variables
3) Explicit overrides (highest precedence)

The defaults file goes through python-dotenv, so it may use quoting and
multi-line values (handy for a ``INPUT_REPLACE-ALL`` list). No ${VAR}
expansion is applied: values reach the run exactly as written. The file being
edited is never read this way.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, MutableMapping, Optional

from dotenv import dotenv_values


class EnvLoader:
    """Load environment-style key/value pairs with .env support."""

    def __init__(self, env_file: Optional[Path | str] = None) -> None:
        self.env_file = Path(env_file) if env_file else None

    def load(self, overrides: Optional[Mapping[str, str]] = None) -> MutableMapping[str, str]:
        """Load environment data, precedence (low -> high): file, OS env, overrides."""
        data: MutableMapping[str, str] = {}

        if self.env_file is not None and self.env_file.exists():
            file_values = dotenv_values(self.env_file, interpolate=False)
            data.update({k: v for k, v in file_values.items() if v is not None})

        data.update(os.environ)

        if overrides:
            data.update({k: str(v) for k, v in overrides.items()})

        return data


__all__ = ["EnvLoader"]
