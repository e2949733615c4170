"""Unit tests for the retry_executor error hierarchy."""

from __future__ import annotations

import json

from retry_executor.config import ConfigError, InvalidSettingValueError
from retry_executor.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ExternalServiceError,
    HttpRetryError,
    InfrastructureError,
    InvalidPolicyError,
    TimeoutError,
)


class TestBaseError:
    def test_code_defaults(self) -> None:
        assert BaseError("boom").code == "base_error"

    def test_str_is_json(self) -> None:
        data = json.loads(str(BaseError("boom", detail={"k": 1})))
        assert data == {"code": "base_error", "message": "boom", "detail": {"k": 1}}

    def test_cause_chained(self) -> None:
        cause = ValueError("inner")
        err = BaseError("outer", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == repr(cause)

    def test_repr(self) -> None:
        assert repr(BaseError("x", code="c")) == "BaseError(code='c', message='x')"


class TestHierarchy:
    def test_invalid_policy_is_domain_error(self) -> None:
        err = InvalidPolicyError("delay", -1)
        assert isinstance(err, DomainError)
        assert err.detail == {"field": "delay", "value": -1}

    def test_config_errors_are_application_errors(self) -> None:
        assert issubclass(ConfigError, ApplicationError)
        err = InvalidSettingValueError("RETRY_DEFAULT_DELAY", "soon", "not a number")
        assert isinstance(err, ConfigError)
        assert err.code == "invalid_setting_value"
        assert err.detail == {"setting": "RETRY_DEFAULT_DELAY", "reason": "not a number"}

    def test_timeout_is_infrastructure(self) -> None:
        assert isinstance(TimeoutError("slow"), InfrastructureError)


class TestHttpRetryError:
    def test_message_and_fields(self) -> None:
        err = HttpRetryError(503, "Service Unavailable")
        assert str(err) == "ERROR: httpStatusCode: 503, httpStatus: Service Unavailable"
        assert err.status_code == 503
        assert err.status_text == "Service Unavailable"
        assert err.response is None
        assert err.code == "http_retry_exhausted"

    def test_is_external_service_error(self) -> None:
        err = HttpRetryError(408, "Request Timeout", service="http://svc")
        assert isinstance(err, ExternalServiceError)
        assert err.service == "http://svc"
        assert err.to_dict()["detail"] == {"status_code": 408, "status_text": "Request Timeout"}
