"""HTTP adapter – httpx client retried by status-code policies."""
from retry_executor.adapters.http.client import PolicyRetryingHttpClient

__all__ = ["PolicyRetryingHttpClient"]
