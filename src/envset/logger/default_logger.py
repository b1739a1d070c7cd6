"""
Plain stream logger.

Writes one formatted line per call to a text stream (stderr unless told
otherwise). Used where the stdlib logging machinery is unwanted, e.g. when
a test wants the exact text of an envset run.
"""

import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Optional, TextIO

from .interface import Logger


class DefaultLogger(Logger):
    """Logger that prints ``[LEVEL] [name] [session:xxxxxxxx] message`` lines.

    Example:
        logger = DefaultLogger(name="envset", output=sys.stdout)
        logger.info("Found matches", count=2)
    """

    def __init__(
        self,
        name: str = "envset",
        output: Optional[TextIO] = None,
        include_timestamp: bool = True,
    ):
        self._name = name
        self._session_id = str(uuid.uuid4())
        self._output = output
        self._include_timestamp = include_timestamp

    def get_session_id(self) -> str:
        return self._session_id

    def _format_message(self, level: str, message: str, **kwargs: Any) -> str:
        parts = []
        if self._include_timestamp:
            parts.append(datetime.now(timezone.utc).isoformat())
        parts.append(f"[{level}]")
        parts.append(f"[{self._name}]")
        parts.append(f"[session:{self._session_id[:8]}]")
        parts.append(message)

        if kwargs:
            parts.append("(" + " ".join(f"{k}={v}" for k, v in kwargs.items()) + ")")

        return " ".join(parts)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        # Resolved per call so pytest's capsys sees stderr replacements
        output = self._output if self._output is not None else sys.stderr
        print(self._format_message(level, message, **kwargs), file=output, flush=True)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log("CRITICAL", message, **kwargs)
