"""An ok-or-error result carrying a formatted message or a value."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO, Any

__all__ = ["MESSAGE_LIMIT", "Result", "ResultError"]

MESSAGE_LIMIT = 256


class ResultError(Exception):
    """Raised when unwrapping a failed result."""

    def __init__(self, ctx: str, message: str) -> None:
        super().__init__(f"FATAL in {ctx}: {message}")
        self.ctx = ctx
        self.message = message


@dataclass(frozen=True)
class Result:
    """Outcome of an operation: ``ok`` with an optional value, or an error message."""

    ok: bool
    msg: str = ""
    value: Any = None

    @classmethod
    def success(cls, value: Any = None) -> Result:
        """Return a successful result holding ``value``."""
        return cls(True, "", value)

    @classmethod
    def failure(cls, fmt: str, *args: Any) -> Result:
        """Return a failed result with a printf-style message, truncated to fit."""
        message = fmt % args if args else fmt
        return cls(False, message[: MESSAGE_LIMIT - 1], None)

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self, ctx: str = "") -> Any:
        """Return the value, or raise ResultError naming ``ctx`` on failure."""
        if not self.ok:
            raise ResultError(ctx, self.msg)
        return self.value

    def check(self, ctx: str = "", stream: IO[str] | None = None) -> bool:
        """Report a failure to ``stream`` (stderr by default) and return ``ok``."""
        if not self.ok:
            target = stream if stream is not None else sys.stderr
            target.write(f"[result] ERROR in {ctx}: {self.msg}\n")
        return self.ok