#!/usr/bin/env python3
"""envset command line entry point.

Without arguments the step inputs are read from the ``INPUT_*``
environment set by the workflow runner. Arguments override those inputs,
which makes a step easy to reproduce locally.

Usage:
    envset --file .env --key API_URL --value https://example.org
    envset --file .env --replace-all-file replacements.env --upsert
    envset --defaults step-inputs.env

Environment Variables:
    INPUT_KEY, INPUT_VALUE, INPUT_FILE, INPUT_REPLACE-ALL,
    INPUT_UPSERT, INPUT_KEEP-ONLY-REPLACED    step inputs
    GITHUB_OUTPUT                             file receiving the "result" output
    ENVSET_LOG_LEVEL, ENVSET_LOG_JSON         logging
"""

import argparse
from pathlib import Path
from typing import Dict, List, Optional

from envset import __version__
from envset.config import ActionInputs, EnvLoader
from envset.exceptions import EnvSetError
from envset.logger import create_logger
from envset.runner import run
from envset.workflow import WorkflowReporter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envset",
        description="Set a key, or apply a replacement list, in a .env file",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--file", help="Target env file, rewritten in place")
    parser.add_argument("--key", help="Key to set")
    parser.add_argument("--value", help="Value to set for --key")

    bulk = parser.add_mutually_exclusive_group()
    bulk.add_argument("--replace-all", metavar="TEXT", help="KEY=VALUE lines to apply")
    bulk.add_argument(
        "--replace-all-file",
        metavar="PATH",
        type=Path,
        help="Read the KEY=VALUE lines to apply from PATH",
    )

    parser.add_argument(
        "--upsert",
        action="store_true",
        default=None,
        help="Bulk mode: also add replacement keys missing from the file",
    )
    parser.add_argument(
        "--keep-only-replaced",
        action="store_true",
        default=None,
        help="Bulk mode: drop file keys that were not replaced",
    )
    parser.add_argument(
        "--defaults",
        metavar="PATH",
        help="dotenv file with INPUT_* defaults (environment takes precedence)",
    )
    return parser


def _overrides(args: argparse.Namespace) -> Dict[str, str]:
    """Map command line arguments onto the INPUT_* variables they override."""
    overrides: Dict[str, str] = {}

    for name in ("file", "key", "value", "replace_all"):
        value = getattr(args, name)
        if value is not None:
            overrides[f"INPUT_{name.upper().replace('_', '-')}"] = value

    if args.replace_all_file is not None:
        overrides["INPUT_REPLACE-ALL"] = args.replace_all_file.read_text(encoding="utf-8")

    if args.upsert:
        overrides["INPUT_UPSERT"] = "true"
    if args.keep_only_replaced:
        overrides["INPUT_KEEP-ONLY-REPLACED"] = "true"

    return overrides


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logger = create_logger(name="envset")
    reporter = WorkflowReporter()

    try:
        environ = EnvLoader(args.defaults).load(_overrides(args))
        inputs = ActionInputs.from_env(environ)
    except EnvSetError as e:
        reporter.set_failed(e.message)
        return reporter.exit_code
    except (OSError, UnicodeDecodeError) as e:
        reporter.set_failed(str(e))
        return reporter.exit_code

    return run(inputs, logger, reporter)


if __name__ == "__main__":
    raise SystemExit(main())
