"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── InvalidPolicyError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (retry_executor.config.errors)
    └── InfrastructureError  (infrastructure.py)
        ├── TimeoutError
        └── ExternalServiceError
            └── HttpRetryError
"""

from retry_executor.kernel.errors.application import ApplicationError
from retry_executor.kernel.errors.base import BaseError
from retry_executor.kernel.errors.domain import DomainError, InvalidPolicyError
from retry_executor.kernel.errors.infrastructure import (
    ExternalServiceError,
    HttpRetryError,
    InfrastructureError,
    TimeoutError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "HttpRetryError",
    "InfrastructureError",
    "InvalidPolicyError",
    "TimeoutError",
]
