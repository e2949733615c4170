"""Resilience – RetryExecutor: policy-driven retry loops.

Two operation shapes are supported:

* generic – a zero-argument callable that returns a value or raises; the
  failure signature is ``str(exc)``.
* HTTP – a zero-argument callable returning a response with ``status_code``
  and ``reason_phrase`` (``httpx.Response`` fits); a raised exception is a
  transport failure and is never retried.

The generic loop keeps matching against the text of the *first* failure for
every iteration, while the HTTP loop re-matches against the latest response.
"""
from __future__ import annotations

import asyncio
import functools
import inspect
import logging
import time
from typing import Any, Awaitable, Callable, Protocol, Sequence, TypeVar, Union

from retry_executor.config import RetrySettings
from retry_executor.kernel.errors import HttpRetryError
from retry_executor.resilience.retry.catalog import get_retry_policies
from retry_executor.resilience.retry.matcher import should_retry
from retry_executor.resilience.retry.policy import Policy, PolicyType

T = TypeVar("T")
R = TypeVar("R", bound="HttpResponse")
logger = logging.getLogger(__name__)

PolicySource = Union[PolicyType, str, Sequence[Policy], None]


class HttpResponse(Protocol):
    """Minimal response shape inspected by the HTTP retry path."""

    @property
    def status_code(self) -> int: ...

    @property
    def reason_phrase(self) -> str: ...


def resolve_policies(
    policies: PolicySource,
    settings: RetrySettings | None = None,
) -> tuple[Policy, ...]:
    """Turn a policy identifier or an explicit policy list into a policy set."""
    if policies is None:
        return ()
    if isinstance(policies, str):
        return get_retry_policies(policies, settings)  # type: ignore[arg-type]
    return tuple(policies)


class RetryExecutor:
    """Run operations and retry them according to a policy set.

    Parameters
    ----------
    policies:
        A :class:`PolicyType` resolved through the catalog, or an explicit
        ordered sequence of :class:`Policy`. Defaults to ``STANDARD``.
    settings:
        Optional :class:`RetrySettings` applied when *policies* is a
        :class:`PolicyType`.
    sleep / async_sleep:
        Delay functions, injectable so hosts and tests control time.
    """

    def __init__(
        self,
        policies: PolicySource = PolicyType.STANDARD,
        *,
        settings: RetrySettings | None = None,
        sleep: Callable[[float], Any] | None = None,
        async_sleep: Callable[[float], Awaitable[Any]] | None = None,
    ) -> None:
        self.policies = resolve_policies(policies, settings)
        self._sleep = sleep or time.sleep
        self._async_sleep = async_sleep or asyncio.sleep

    # ------------------------------------------------------------------
    # generic path
    # ------------------------------------------------------------------

    def execute(self, func: Callable[[], T]) -> T:
        """Call *func*, retrying while a policy matches its first failure."""
        try:
            return func()
        except Exception as exc:
            failure = exc
        signature = str(failure)

        attempt = 1
        while True:
            delay, limit, matched = should_retry(self.policies, 0, signature)
            if not matched or attempt > limit:
                logger.debug("retry give-up attempt=%d matched=%s exc=%r", attempt, matched, failure)
                raise failure
            logger.debug("retry attempt=%d delay=%.2fs exc=%r", attempt, delay, failure)
            self._sleep(delay)
            try:
                return func()
            except Exception as exc:
                failure = exc
            attempt += 1

    async def execute_async(self, func: Callable[[], Awaitable[T]]) -> T:
        """Async twin of :meth:`execute`."""
        try:
            return await func()
        except Exception as exc:
            failure = exc
        signature = str(failure)

        attempt = 1
        while True:
            delay, limit, matched = should_retry(self.policies, 0, signature)
            if not matched or attempt > limit:
                logger.debug("retry give-up attempt=%d matched=%s exc=%r", attempt, matched, failure)
                raise failure
            logger.debug("retry attempt=%d delay=%.2fs exc=%r", attempt, delay, failure)
            await self._async_sleep(delay)
            try:
                return await func()
            except Exception as exc:
                failure = exc
            attempt += 1

    # ------------------------------------------------------------------
    # HTTP path
    # ------------------------------------------------------------------

    def execute_http(self, func: Callable[[], R]) -> R:
        """Call *func* and retry while the latest response status matches a policy.

        Raises :class:`HttpRetryError` when the final response is not a success.
        """
        response = func()
        if response.status_code < 300:
            return response

        attempt = 1
        while True:
            delay, limit, matched = should_retry(
                self.policies, response.status_code, response.reason_phrase
            )
            if not matched or attempt > limit:
                raise self._give_up(response, attempt, matched)
            logger.debug("retry attempt=%d delay=%.2fs status=%d", attempt, delay, response.status_code)
            self._sleep(delay)
            response = func()
            if 200 <= response.status_code < 300:
                return response
            attempt += 1

    async def execute_http_async(self, func: Callable[[], Awaitable[R]]) -> R:
        """Async twin of :meth:`execute_http`."""
        response = await func()
        if response.status_code < 300:
            return response

        attempt = 1
        while True:
            delay, limit, matched = should_retry(
                self.policies, response.status_code, response.reason_phrase
            )
            if not matched or attempt > limit:
                raise self._give_up(response, attempt, matched)
            logger.debug("retry attempt=%d delay=%.2fs status=%d", attempt, delay, response.status_code)
            await self._async_sleep(delay)
            response = await func()
            if 200 <= response.status_code < 300:
                return response
            attempt += 1

    @staticmethod
    def _give_up(response: HttpResponse, attempt: int, matched: bool) -> HttpRetryError:
        logger.debug(
            "retry give-up attempt=%d matched=%s status=%d", attempt, matched, response.status_code
        )
        return HttpRetryError(response.status_code, response.reason_phrase, response=response)

    # ------------------------------------------------------------------
    # decorator
    # ------------------------------------------------------------------

    def __call__(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Wrap *func* so every call goes through the generic retry path."""
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await self.execute_async(lambda: func(*args, **kwargs))

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return self.execute(lambda: func(*args, **kwargs))

        return wrapper


def execute(func: Callable[[], T], policies: PolicySource = PolicyType.STANDARD) -> T:
    """Run *func* on the generic path with *policies* (``STANDARD`` by default)."""
    return RetryExecutor(policies).execute(func)


def execute_http(func: Callable[[], R], policies: PolicySource = PolicyType.STANDARD) -> R:
    """Run *func* on the HTTP path with *policies* (``STANDARD`` by default)."""
    return RetryExecutor(policies).execute_http(func)


async def execute_async(
    func: Callable[[], Awaitable[T]], policies: PolicySource = PolicyType.STANDARD
) -> T:
    """Async twin of :func:`execute`."""
    return await RetryExecutor(policies).execute_async(func)


async def execute_http_async(
    func: Callable[[], Awaitable[R]], policies: PolicySource = PolicyType.STANDARD
) -> R:
    """Async twin of :func:`execute_http`."""
    return await RetryExecutor(policies).execute_http_async(func)


__all__ = [
    "HttpResponse",
    "PolicySource",
    "RetryExecutor",
    "execute",
    "execute_async",
    "execute_http",
    "execute_http_async",
    "resolve_policies",
]
