"""Observability – structlog configuration for retry_executor hosts."""
from retry_executor.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
