"""Infrastructure errors – I/O failures and external HTTP services."""

from __future__ import annotations

from typing import Any

from retry_executor.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure."""

    default_code = "infrastructure_error"


class TimeoutError(InfrastructureError):  # noqa: A001
    """An I/O operation exceeded its deadline."""

    default_code = "infrastructure_timeout"


class ExternalServiceError(InfrastructureError):
    """An external service could not be reached or answered badly."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


class HttpRetryError(ExternalServiceError):
    """Raised by the HTTP retry path when the last response is still a failure.

    Covers both "no policy matched the status" and "retry limit exhausted".
    ``str()`` yields the composed status message rather than the JSON form.
    """

    default_code = "http_retry_exhausted"

    def __init__(
        self,
        status_code: int,
        status_text: str,
        *,
        response: Any = None,
        service: str = "http",
        **kwargs: Any,
    ) -> None:
        super().__init__(
            service,
            f"ERROR: httpStatusCode: {status_code}, httpStatus: {status_text}",
            status_code=status_code,
            detail={"status_code": status_code, "status_text": status_text},
            **kwargs,
        )
        self.status_text = status_text
        self.response = response

    def __str__(self) -> str:
        return self.message


__all__ = [
    "ExternalServiceError",
    "HttpRetryError",
    "InfrastructureError",
    "TimeoutError",
]
