"""Root error class for the event-sourcery error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of every error raised by event-sourcery.

    Each error carries a machine-readable ``code`` (the class's
    ``default_code`` unless overridden) and a ``detail`` dict naming the
    event, aggregate or setting involved, so a caller can log or return it
    without parsing the message. ``str(err)`` is the JSON form of
    :meth:`to_dict`, which keeps structlog output on one line.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail) if detail else {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{self.error_type}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view: ``error``, ``code``, ``message``, ``detail`` and, if set, ``cause``."""
        payload: dict[str, Any] = {
            "error": self.error_type,
            "code": self.code,
            "message": self.message,
            "detail": dict(self.detail),
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
