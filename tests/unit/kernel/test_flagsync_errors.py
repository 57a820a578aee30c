"""Unit tests – flagsync error hierarchy."""
from __future__ import annotations

import json

import pytest

from flagsync.config.validation import ConfigError, MissingRequiredSettingError
from flagsync.kernel.errors import (
    ApplicationError,
    AuthenticationError,
    BaseError,
    DomainError,
    ExternalServiceError,
    HistoryWriteError,
    InfrastructureError,
    MalformedInputError,
    NotFoundError,
    NotificationError,
    SerializationError,
    StoreUnavailableError,
)


# ---------------------------------------------------------------------------
# Hierarchy
# ---------------------------------------------------------------------------


class TestHierarchy:
    @pytest.mark.parametrize(
        ("error_type", "parent"),
        [
            (MalformedInputError, DomainError),
            (NotFoundError, DomainError),
            (AuthenticationError, ApplicationError),
            (StoreUnavailableError, InfrastructureError),
            (SerializationError, InfrastructureError),
            (HistoryWriteError, InfrastructureError),
            (NotificationError, InfrastructureError),
            (ExternalServiceError, InfrastructureError),
            (ConfigError, ApplicationError),
        ],
    )
    def test_subclass(self, error_type: type, parent: type) -> None:
        assert issubclass(error_type, parent)
        assert issubclass(error_type, BaseError)


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------


class TestToDict:
    def test_default_code_and_detail(self) -> None:
        err = DomainError("nope")
        assert err.to_dict() == {"code": "domain_error", "message": "nope", "detail": {}}

    def test_cause_is_included(self) -> None:
        err = InfrastructureError("down", cause=ConnectionError("refused"))
        assert "ConnectionError" in err.to_dict()["cause"]
        assert isinstance(err.__cause__, ConnectionError)

    def test_str_is_json(self) -> None:
        err = AuthenticationError()
        assert json.loads(str(err))["code"] == "unauthorized"

    def test_malformed_input_lists_errors(self) -> None:
        err = MalformedInputError("bad", errors=[{"field": "features", "reason": "missing"}])
        assert err.to_dict()["errors"] == [{"field": "features", "reason": "missing"}]

    def test_not_found_message(self) -> None:
        assert NotFoundError("installation", "acme").message == "installation 'acme' not found"


class TestInfrastructureErrors:
    def test_store_unavailable_default_message(self) -> None:
        err = StoreUnavailableError("get", "flags:acme")
        assert err.operation == "get"
        assert err.key == "flags:acme"
        assert "flags:acme" in err.message

    def test_external_service_carries_status(self) -> None:
        err = ExternalServiceError("platform", "HTTP 502", status_code=502, response_preview="bad gateway")
        assert err.status_code == 502
        assert err.response_preview == "bad gateway"

    def test_notification_error(self) -> None:
        err = NotificationError("acme", status_code=500)
        assert err.slug == "acme"
        assert err.to_dict()["code"] == "notification_failed"

    def test_missing_setting_names_the_setting(self) -> None:
        err = MissingRequiredSettingError("FLAGSYNC_SIGNING_SECRET")
        assert "FLAGSYNC_SIGNING_SECRET" in err.message
