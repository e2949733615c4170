"""Domain errors – invalid retry policy values."""

from __future__ import annotations

from typing import Any

from retry_executor.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a value object invariant is violated."""

    default_code = "domain_error"


class InvalidPolicyError(DomainError):
    """A :class:`~retry_executor.resilience.retry.Policy` was built with an
    out-of-range field (negative delay or retry limit)."""

    default_code = "invalid_policy"

    def __init__(self, field: str, value: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Policy field '{field}' must be >= 0, got {value!r}",
            detail={"field": field, "value": value},
            **kwargs,
        )
        self.field = field
        self.value = value


__all__ = ["DomainError", "InvalidPolicyError"]
