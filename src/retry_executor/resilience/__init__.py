"""Resilience – policy-driven retry."""

from retry_executor.resilience.retry import (
    Policy,
    PolicyType,
    RetryDecision,
    RetryExecutor,
    TenacityRetryExecutor,
    get_retry_policies,
    should_retry,
)

__all__ = [
    "Policy",
    "PolicyType",
    "RetryDecision",
    "RetryExecutor",
    "TenacityRetryExecutor",
    "get_retry_policies",
    "should_retry",
]
