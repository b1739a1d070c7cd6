"""Workflow runner boundary.

Reads step inputs from ``INPUT_*`` environment variables and publishes
outputs and failures the way GitHub Actions runners expect:

- inputs: ``INPUT_<NAME>`` with spaces replaced by ``_``, upper-cased
- outputs: appended to the file named by ``GITHUB_OUTPUT``
  (``name<<DELIMITER`` blocks), or the legacy ``::set-output`` command
- failures: an ``::error::`` command on stdout and a non-zero exit status
"""

from __future__ import annotations

import os
import sys
import uuid
from typing import Mapping, Optional, TextIO

from envset.exceptions import ConfigurationError

TRUE_VALUES = ("true", "True", "TRUE")
FALSE_VALUES = ("false", "False", "FALSE")


def _input_variable(name: str) -> str:
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(
    name: str,
    required: bool = False,
    trim_whitespace: bool = True,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Return the value of a step input, or "" when it was not supplied.

    Raises:
        ConfigurationError: If ``required`` and the input is empty
    """
    env = os.environ if environ is None else environ
    value = env.get(_input_variable(name), "")

    if required and not value:
        raise ConfigurationError(
            "MISSING_INPUT",
            f"Input required and not supplied: {name}",
            details={"input": name},
        )

    return value.strip() if trim_whitespace else value


def get_boolean_input(
    name: str,
    required: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> bool:
    """Return a step input as a bool.

    Only the YAML 1.2 core schema spellings are accepted. An optional input
    that was not supplied reads as False.

    Raises:
        ConfigurationError: If the value is not a recognised boolean
    """
    value = get_input(name, required=required, environ=environ)

    if not value:
        return False
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False

    raise ConfigurationError(
        "INVALID_BOOLEAN_INPUT",
        f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`",
        details={"input": name, "value": value},
    )


def escape_data(value: str) -> str:
    """Escape a workflow command payload."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a workflow command property value."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


class WorkflowReporter:
    """Publishes step outputs and failures to the workflow runner.

    Example:
        reporter = WorkflowReporter()
        reporter.set_output("result", "A=1\\nB=2")
        reporter.set_failed("Missing required input")
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        env = os.environ if environ is None else environ
        self.output_file = env.get("GITHUB_OUTPUT") or None
        self._stream = stream
        self.failed = False
        self.failure_message: Optional[str] = None

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _command(self, command: str, message: str, **properties: str) -> None:
        props = ",".join(f"{k}={escape_property(v)}" for k, v in properties.items())
        prefix = f"::{command} {props}::" if props else f"::{command}::"
        print(prefix + escape_data(message), file=self.stream, flush=True)

    def set_output(self, name: str, value: str) -> None:
        """Publish a step output."""
        if self.output_file:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            # The delimiter is random, a collision means a corrupt value
            if delimiter in name or delimiter in value:
                raise ValueError(f"Unexpected input: value should not contain the delimiter {delimiter}")
            with open(self.output_file, "a", encoding="utf-8") as handle:
                handle.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
            return

        print(file=self.stream)
        self._command("set-output", value, name=name)

    def set_failed(self, message: str) -> None:
        """Report the step as failed."""
        self.failed = True
        self.failure_message = message
        self._command("error", message)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0


__all__ = [
    "WorkflowReporter",
    "escape_data",
    "escape_property",
    "get_boolean_input",
    "get_input",
]
