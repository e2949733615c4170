"""Resilience – policy catalog, matcher and retry executors."""
from retry_executor.resilience.retry.catalog import DEFAULT_DELAY, DEFAULT_RETRY_LIMIT, get_retry_policies
from retry_executor.resilience.retry.executor import (
    HttpResponse,
    RetryExecutor,
    execute,
    execute_async,
    execute_http,
    execute_http_async,
    resolve_policies,
)
from retry_executor.resilience.retry.matcher import NO_RETRY, RetryDecision, should_retry
from retry_executor.resilience.retry.policy import Policy, PolicyType
from retry_executor.resilience.retry.tenacity_adapter import TenacityRetryExecutor

__all__ = [
    "DEFAULT_DELAY", "DEFAULT_RETRY_LIMIT", "NO_RETRY", "HttpResponse",
    "Policy", "PolicyType", "RetryDecision", "RetryExecutor", "TenacityRetryExecutor",
    "execute", "execute_async", "execute_http", "execute_http_async",
    "get_retry_policies", "resolve_policies", "should_retry",
]
