"""Resilience – Policy value object and PolicyType identifier."""
from __future__ import annotations

import dataclasses
from enum import Enum

from retry_executor.kernel.errors import InvalidPolicyError


class PolicyType(str, Enum):
    """Identifier of a predefined policy set in the catalog.

    New members need a matching branch in
    :func:`~retry_executor.resilience.retry.catalog.get_retry_policies`.
    """

    HTTP = "HTTP"
    STANDARD = "STANDARD"


@dataclasses.dataclass(frozen=True)
class Policy:
    """Pairs an error signature with a fixed delay and a retry limit.

    ``error_code_number`` of ``0`` means "unset"; ``delay`` is in seconds.
    """

    error_code_number: int = 0
    error_code_string: str = ""
    delay: float = 0.0
    retry_limit: int = 0

    def __post_init__(self) -> None:
        if self.delay < 0:
            raise InvalidPolicyError("delay", self.delay)
        if self.retry_limit < 0:
            raise InvalidPolicyError("retry_limit", self.retry_limit)


__all__ = ["Policy", "PolicyType"]
