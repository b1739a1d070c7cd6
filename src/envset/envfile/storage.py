"""Read and write the target env file.

Text is read and written as UTF-8 with newline translation disabled so the
bytes on disk match the serialized mapping exactly. Errors from the
filesystem propagate unchanged.
"""

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def read_env_text(path: PathLike) -> str:
    """Return the raw contents of ``path``."""
    with open(path, "r", encoding="utf-8", newline="") as handle:
        return handle.read()


def write_env_text(path: PathLike, text: str) -> None:
    """Replace the contents of ``path`` with ``text``."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)
