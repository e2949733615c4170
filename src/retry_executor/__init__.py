"""
retry_executor – policy-driven retry for fallible and HTTP-style operations.

Import path convention::

    from retry_executor import PolicyType, RetryExecutor, execute, execute_http
    from retry_executor.resilience.retry import Policy, should_retry
    from retry_executor.adapters.http import PolicyRetryingHttpClient
"""

from retry_executor.resilience.retry import (
    Policy,
    PolicyType,
    RetryExecutor,
    execute,
    execute_async,
    execute_http,
    execute_http_async,
    get_retry_policies,
)

__version__ = "0.1.0"
__all__ = [
    "Policy",
    "PolicyType",
    "RetryExecutor",
    "__version__",
    "execute",
    "execute_async",
    "execute_http",
    "execute_http_async",
    "get_retry_policies",
]
