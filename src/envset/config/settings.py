"""Typed settings for an envset run.

Inputs arrive as strings (and booleans as strings) from the workflow
runner; they are normalized here so the merge code only ever sees plain
``str`` and ``bool`` values.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from envset.envfile import ReplacementPolicy
from envset.workflow import get_boolean_input, get_input


@dataclass
class ActionInputs:
    """Invocation inputs of one run.

    Attributes:
        key: Key to set (single-key mode)
        value: Value to set for ``key``
        file: Target env file, read and rewritten in place
        replace_all: Multi-line ``KEY=VALUE`` text; non-empty selects bulk mode
        upsert: Bulk mode, apply replacement keys missing from the file
        keep_only_replaced: Bulk mode, drop file keys no replacement matched
    """

    key: str = ""
    value: str = ""
    file: str = ""
    replace_all: str = ""
    upsert: bool = False
    keep_only_replaced: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ActionInputs":
        """Read inputs from ``INPUT_*`` variables.

        Environment variables:
            INPUT_KEY, INPUT_VALUE, INPUT_FILE: single-key inputs
            INPUT_REPLACE-ALL: replacement list, read untrimmed
            INPUT_UPSERT, INPUT_KEEP-ONLY-REPLACED: booleans, bulk mode only

        Raises:
            ConfigurationError: If a boolean input is malformed in bulk mode
        """
        replace_all = get_input("replace-all", trim_whitespace=False, environ=environ)
        inputs = cls(
            key=get_input("key", environ=environ),
            value=get_input("value", environ=environ),
            file=get_input("file", environ=environ),
            replace_all=replace_all,
        )

        # Flags are only consulted in bulk mode
        if inputs.is_bulk:
            inputs.upsert = get_boolean_input("upsert", environ=environ)
            inputs.keep_only_replaced = get_boolean_input("keep-only-replaced", environ=environ)

        return inputs

    @property
    def is_bulk(self) -> bool:
        return bool(self.replace_all)

    @property
    def policy(self) -> ReplacementPolicy:
        return ReplacementPolicy(upsert=self.upsert, keep_only_replaced=self.keep_only_replaced)


@dataclass
class LogSettings:
    """Logging configuration

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Emit JSON lines instead of text
        log_file: Optional file receiving a copy of the log
    """

    level: str = "INFO"
    json_format: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, prefix: str = "ENVSET") -> "LogSettings":
        """Load logging settings from environment variables

        Environment variables:
            {prefix}_LOG_LEVEL: Logging level
            {prefix}_LOG_JSON: "true" for JSON output
            {prefix}_LOG_FILE: Optional log file
        """
        return cls(
            level=os.environ.get(f"{prefix}_LOG_LEVEL", "INFO").upper(),
            json_format=os.environ.get(f"{prefix}_LOG_JSON", "false").lower() == "true",
            log_file=os.environ.get(f"{prefix}_LOG_FILE") or None,
        )

    @property
    def level_number(self) -> int:
        level = getattr(logging, self.level, None)
        return level if isinstance(level, int) else logging.INFO
