"""Resilience – first-match-wins lookup of a retry decision."""
from __future__ import annotations

from typing import NamedTuple, Sequence

from retry_executor.resilience.retry.policy import Policy


class RetryDecision(NamedTuple):
    delay: float
    retry_limit: int
    matched: bool


NO_RETRY = RetryDecision(0.0, 0, False)


def should_retry(
    policies: Sequence[Policy] | None,
    error_code_number: int,
    error_code_string: str,
) -> RetryDecision:
    """Return the delay and limit of the first policy matching the failure.

    A policy matches on an exact ``(code, text)`` pair, or when its text is a
    case-insensitive substring of *error_code_string*. A policy with an empty
    text therefore matches any failure.
    """
    if not policies:
        return NO_RETRY
    observed = error_code_string.lower()
    for policy in policies:
        if (
            policy.error_code_number == error_code_number
            and policy.error_code_string == error_code_string
        ) or policy.error_code_string.lower() in observed:
            return RetryDecision(policy.delay, policy.retry_limit, True)
    return NO_RETRY


__all__ = ["NO_RETRY", "RetryDecision", "should_retry"]
