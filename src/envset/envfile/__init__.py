"""Env file parsing, merging and storage.

Example:
    from envset.envfile import parse_env, replace_all, ReplacementPolicy

    base = parse_env("A=1\\nB=2")
    result = replace_all(base, parse_env("B=9\\nC=5"), ReplacementPolicy(upsert=True))
    result.text  # 'B=9\\nC=5\\nA=1'
"""

from envset.envfile.merge import (
    MergeResult,
    ReplacementPolicy,
    SetResult,
    replace_all,
    serialize,
    set_key,
)
from envset.envfile.parser import EnvMap, parse_env, parse_lines
from envset.envfile.storage import read_env_text, write_env_text

__all__ = [
    # Parsing
    "EnvMap",
    "parse_env",
    "parse_lines",
    # Merging
    "ReplacementPolicy",
    "SetResult",
    "MergeResult",
    "serialize",
    "set_key",
    "replace_all",
    # Storage
    "read_env_text",
    "write_env_text",
]
