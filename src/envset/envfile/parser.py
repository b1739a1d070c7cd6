"""Parse ``KEY=VALUE`` text into an ordered mapping.

Lines starting with ``#`` are comments and lines without ``=`` are
ignored. Nothing is trimmed: ``  # x=1`` is a pair with key ``"  # x"``,
and a ``\\r`` left over from CRLF text stays at the end of the value.
"""

from __future__ import annotations

from typing import Dict, Iterable

EnvMap = Dict[str, str]

COMMENT_PREFIX = "#"
SEPARATOR = "="


def parse_lines(lines: Iterable[str]) -> EnvMap:
    """Build an EnvMap from lines, last occurrence of a key winning.

    A repeated key keeps the position of its first occurrence since
    assigning to an existing dict key does not reorder it.
    """
    env: EnvMap = {}

    for line in lines:
        if line.startswith(COMMENT_PREFIX):
            continue

        key, sep, value = line.partition(SEPARATOR)
        if not sep:
            continue

        env[key] = value

    return env


def parse_env(text: str) -> EnvMap:
    """Parse the full text of an env file."""
    return parse_lines(text.split("\n"))


__all__ = ["EnvMap", "parse_env", "parse_lines"]
