"""HTTP adapter – PolicyRetryingHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from retry_executor.config import RetrySettings
from retry_executor.kernel.errors import ExternalServiceError, TimeoutError as AppTimeoutError
from retry_executor.resilience.retry import PolicyType, RetryExecutor
from retry_executor.resilience.retry.executor import PolicySource


class PolicyRetryingHttpClient:
    """Async httpx wrapper whose requests go through the HTTP retry path.

    Responses with a retryable status (per *policies*, ``HTTP`` by default)
    are re-requested; transport failures are mapped to
    :class:`ExternalServiceError` / :class:`TimeoutError` and never retried.
    A final non-2xx response raises :class:`HttpRetryError`.

    A caller-supplied *executor* wins: *policies* and *settings* are then
    not consulted.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        policies: PolicySource = PolicyType.HTTP,
        *,
        settings: RetrySettings | None = None,
        executor: RetryExecutor | None = None,
        **kwargs: Any,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)
        self._executor = executor or RetryExecutor(policies, settings=settings)

    async def __aenter__(self) -> "PolicyRetryingHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("PUT", url, **kwargs)

    async def patch(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("PATCH", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("DELETE", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        return await self._executor.execute_http_async(lambda: self._send(method, url, **kwargs))

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            raise AppTimeoutError(f"HTTP request timed out: {method} {url}", cause=exc) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(service=url, message=str(exc), cause=exc) from exc


__all__ = ["PolicyRetryingHttpClient"]
