"""Resilience – TenacityRetryExecutor, the generic retry path on ``tenacity``.

Same semantics as :meth:`RetryExecutor.execute`: the first failure's text
selects the policy for the whole call, another attempt is allowed while
``attempt_number <= retry_limit``, the wait is the policy's fixed delay and
the last failure is re-raised.

Example
-------
::

    executor = TenacityRetryExecutor(PolicyType.STANDARD)
    rows = executor.execute(lambda: fetch_rows(cursor))
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar

import tenacity as ten

from retry_executor.config import RetrySettings
from retry_executor.resilience.retry.executor import PolicySource, resolve_policies
from retry_executor.resilience.retry.matcher import RetryDecision, should_retry
from retry_executor.resilience.retry.policy import PolicyType

T = TypeVar("T")


class TenacityRetryExecutor:
    """Policy-matching retry backed by ``tenacity.Retrying`` / ``AsyncRetrying``.

    Parameters
    ----------
    policies:
        :class:`PolicyType` or explicit sequence of policies.
    settings:
        Optional catalog overrides, see :class:`RetrySettings`.
    sleep:
        Blocking (for :meth:`execute`) or awaitable (for :meth:`execute_async`)
        sleep passed straight to tenacity. ``None`` keeps tenacity's default.
    kwargs:
        Forwarded to the tenacity controller, e.g. ``before_sleep``.
    """

    def __init__(
        self,
        policies: PolicySource = PolicyType.STANDARD,
        *,
        settings: RetrySettings | None = None,
        sleep: Callable[[float], Any] | None = None,
        **kwargs: Any,
    ) -> None:
        self.policies = resolve_policies(policies, settings)
        self._sleep = sleep
        self._extra_kwargs = kwargs

    def _controller_kwargs(self) -> dict[str, Any]:
        signature: list[str] = []

        def decide(retry_state: ten.RetryCallState) -> RetryDecision:
            if not signature:
                signature.append(str(retry_state.outcome.exception()))  # type: ignore[union-attr]
            return should_retry(self.policies, 0, signature[0])

        def retry(retry_state: ten.RetryCallState) -> bool:
            # KeyboardInterrupt, SystemExit and CancelledError always propagate
            if not isinstance(retry_state.outcome.exception(), Exception):  # type: ignore[union-attr]
                return False
            _, limit, matched = decide(retry_state)
            return matched and retry_state.attempt_number <= limit

        def wait(retry_state: ten.RetryCallState) -> float:
            return decide(retry_state).delay

        kwargs: dict[str, Any] = {
            "stop": ten.stop_never,
            "wait": wait,
            "retry": retry,
            "reraise": True,
            **self._extra_kwargs,
        }
        if self._sleep is not None:
            kwargs["sleep"] = self._sleep
        return kwargs

    def execute(self, func: Callable[[], T]) -> T:
        """Execute *func* synchronously with tenacity retry."""
        return ten.Retrying(**self._controller_kwargs())(func)

    async def execute_async(self, func: Callable[[], Awaitable[T]]) -> T:
        """Execute *func* asynchronously with tenacity retry."""
        return await ten.AsyncRetrying(**self._controller_kwargs())(func)


__all__ = ["TenacityRetryExecutor"]
