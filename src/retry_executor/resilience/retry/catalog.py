"""Resilience – built-in policy sets keyed by :class:`PolicyType`."""
from __future__ import annotations

from http import HTTPStatus

from retry_executor.config import RetrySettings
from retry_executor.resilience.retry.policy import Policy, PolicyType

DEFAULT_DELAY = 2.0
DEFAULT_RETRY_LIMIT = 3


def get_retry_policies(
    policy_type: PolicyType,
    settings: RetrySettings | None = None,
) -> tuple[Policy, ...]:
    """Return a fresh policy set for *policy_type*.

    ``HTTP`` matches 503 and 408 by status code and reason phrase;
    ``STANDARD`` matches "timedout" / "timed out" anywhere in an error
    message. Unknown identifiers yield an empty set, which never retries.
    *settings* overrides the default delay and retry limit.
    """
    delay = settings.default_delay if settings else DEFAULT_DELAY
    limit = settings.default_retry_limit if settings else DEFAULT_RETRY_LIMIT

    if policy_type == PolicyType.HTTP:
        return tuple(
            Policy(
                error_code_number=status.value,
                error_code_string=status.phrase,
                delay=delay,
                retry_limit=limit,
            )
            for status in (HTTPStatus.SERVICE_UNAVAILABLE, HTTPStatus.REQUEST_TIMEOUT)
        )
    if policy_type == PolicyType.STANDARD:
        return (
            Policy(error_code_string="timedout", delay=delay, retry_limit=limit),
            Policy(error_code_string="timed out", delay=delay, retry_limit=limit),
        )
    return ()


__all__ = ["DEFAULT_DELAY", "DEFAULT_RETRY_LIMIT", "get_retry_policies"]
