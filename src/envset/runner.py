"""Run one envset step: read, merge, write and report.

``run`` is the only place errors are caught. Everything below it raises
``ConfigurationError`` for bad inputs and lets ``OSError`` from the
filesystem, or ``UnicodeDecodeError`` for a target file that is not
UTF-8, through unchanged.
"""

from __future__ import annotations

from typing import Optional

from envset.config import ActionInputs
from envset.envfile import (
    parse_env,
    read_env_text,
    replace_all,
    set_key,
    write_env_text,
)
from envset.exceptions import ConfigurationError, EnvSetError
from envset.logger import Logger
from envset.workflow import WorkflowReporter

RESULT_OUTPUT = "result"


def run_replace_all(inputs: ActionInputs, logger: Logger) -> str:
    """Apply ``inputs.replace_all`` to ``inputs.file`` and return the new text."""
    env = parse_env(read_env_text(inputs.file))
    replacements = parse_env(inputs.replace_all)

    logger.info(f"Replace list keys: {', '.join(replacements)}")
    logger.info(f"Current env keys: {', '.join(env)}")

    result = replace_all(env, replacements, inputs.policy)

    logger.info(f"Found {result.matched} matches")
    logger.info(f"Returning env file with {len(result.env)} variables.")

    write_env_text(inputs.file, result.text)
    return result.text


def run_set_key(inputs: ActionInputs, logger: Logger) -> Optional[str]:
    """Set ``inputs.key`` in ``inputs.file``.

    Returns:
        The new file text, or None when the key already held the value and
        the file was left untouched.

    Raises:
        ConfigurationError: If key, value or file is missing
    """
    if not inputs.key or not inputs.value or not inputs.file:
        raise ConfigurationError(
            "MISSING_INPUT",
            "Missing required input",
            details={
                name: bool(getattr(inputs, name)) for name in ("key", "value", "file")
            },
        )

    key, value, path = inputs.key, inputs.value, inputs.file
    logger.info(f"Setting {key} to {value} in {path}")

    result = set_key(parse_env(read_env_text(path)), key, value)
    if not result.changed:
        logger.info(f"{key} is already set to {value} in {path}")
        return None

    write_env_text(path, result.text)
    logger.info(f"Successfully set {key} to {value} in {path}")
    return result.text


def run(inputs: ActionInputs, logger: Logger, reporter: WorkflowReporter) -> int:
    """Dispatch to bulk or single-key mode and report the outcome.

    Returns:
        Process exit status, 0 on success and 1 on failure
    """
    try:
        if inputs.is_bulk:
            result = run_replace_all(inputs, logger)
        else:
            result = run_set_key(inputs, logger)

        if result is not None:
            reporter.set_output(RESULT_OUTPUT, result)
    except EnvSetError as e:
        logger.debug("Run failed", code=e.code)
        reporter.set_failed(e.message)
    except (OSError, UnicodeDecodeError) as e:
        reporter.set_failed(str(e))

    return reporter.exit_code


__all__ = ["RESULT_OUTPUT", "run", "run_replace_all", "run_set_key"]
