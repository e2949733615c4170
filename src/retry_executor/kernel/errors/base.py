"""Root error class for the retry_executor error hierarchy."""

from __future__ import annotations

import json
from typing import Any, ClassVar


class BaseError(Exception):
    """Root of every error raised by retry_executor itself.

    Errors raised by the operations being retried are never wrapped; they
    propagate unchanged. Subclasses set ``default_code``.

    Args:
        message: Human-readable description.
        code: Machine-readable slug overriding ``default_code``.
        detail: Serialisable context (status codes, field names, ...).
        cause: Underlying exception, also set as ``__cause__``.
    """

    default_code: ClassVar[str] = "base_error"

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
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form used for structured log fields."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
