"""Merge operations over parsed env files.

Both operations are pure: they return a new mapping plus its serialized
form and never modify their arguments.
"""

from __future__ import annotations

from dataclasses import dataclass

from .parser import SEPARATOR, EnvMap


@dataclass(frozen=True)
class ReplacementPolicy:
    """Policies applied by :func:`replace_all`.

    Attributes:
        upsert: Apply replacement keys that are missing from the base file
        keep_only_replaced: Drop base keys that no replacement matched
    """

    upsert: bool = False
    keep_only_replaced: bool = False


@dataclass(frozen=True)
class SetResult:
    """Outcome of a single-key set.

    Attributes:
        env: The resulting mapping
        text: Serialized mapping
        changed: False when the key already held the value
    """

    env: EnvMap
    text: str
    changed: bool


@dataclass(frozen=True)
class MergeResult:
    """Outcome of a bulk replacement.

    Attributes:
        env: The resulting mapping
        text: Serialized mapping
        matched: Number of replacement keys applied
    """

    env: EnvMap
    text: str
    matched: int

    @property
    def changed(self) -> bool:
        # Bulk mode always rewrites the target file
        return True


def serialize(env: EnvMap) -> str:
    """Render a mapping as ``key=value`` lines without a trailing newline."""
    return "\n".join(f"{key}{SEPARATOR}{value}" for key, value in env.items())


def set_key(env: EnvMap, key: str, value: str) -> SetResult:
    """Set ``key`` to ``value``, appending it when new."""
    if key in env and env[key] == value:
        return SetResult(env=env, text=serialize(env), changed=False)

    updated = dict(env)
    updated[key] = value
    return SetResult(env=updated, text=serialize(updated), changed=True)


def replace_all(
    env: EnvMap,
    replacements: EnvMap,
    policy: ReplacementPolicy = ReplacementPolicy(),
) -> MergeResult:
    """Apply a replacement mapping to a base mapping.

    Replacement keys come first, in replacement order, when they exist in
    ``env`` or ``policy.upsert`` is set; others are dropped. Unless
    ``policy.keep_only_replaced`` is set the remaining base keys follow in
    their original order with their original values.

    Example:
        >>> replace_all({"A": "1", "B": "2"}, {"B": "9", "C": "5"}).text
        'B=9\\nA=1'
    """
    result: EnvMap = {
        key: value
        for key, value in replacements.items()
        if policy.upsert or key in env
    }
    matched = len(result)

    if not policy.keep_only_replaced:
        for key, value in env.items():
            if key not in result:
                result[key] = value

    return MergeResult(env=result, text=serialize(result), matched=matched)


__all__ = [
    "MergeResult",
    "ReplacementPolicy",
    "SetResult",
    "replace_all",
    "serialize",
    "set_key",
]
