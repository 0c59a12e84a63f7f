"""Unit tests for response expectations."""

import httpx
import pytest

from tests.support.responses import make_response
from titanic_harness.core.exceptions import ContractViolationError
from titanic_harness.core.expectations import (
    expect_detail_contains,
    expect_field,
    expect_model,
    expect_status,
    expect_truthy,
)
from titanic_harness.models.passenger import HealthStatus


@pytest.mark.unit
class TestExpectStatus:
    def test_matching_status_passes(self) -> None:
        expect_status(make_response(201, {"id": 1}, "POST", "/api/passengers"), 201)

    def test_any_of_several_statuses(self) -> None:
        expect_status(make_response(204, None, "DELETE"), 200, 204)

    def test_mismatch_names_request_and_detail(self) -> None:
        response = make_response(
            403, {"detail": "Admin access required"}, "DELETE", "/api/passengers/4"
        )

        with pytest.raises(ContractViolationError) as exc_info:
            expect_status(response, 200, 204)

        message = str(exc_info.value)
        assert "DELETE /api/passengers/4" in message
        assert "expected status 200 or 204, got 403" in message
        assert "Admin access required" in message

    def test_response_without_request(self) -> None:
        with pytest.raises(ContractViolationError, match="response: expected status 200"):
            expect_status(httpx.Response(500), 200)


@pytest.mark.unit
class TestExpectField:
    def test_returns_value(self) -> None:
        response = make_response(200, {"gateway": "ok"}, "GET", "/health")

        assert expect_field(response, "gateway") == "ok"

    def test_missing_property(self) -> None:
        with pytest.raises(ContractViolationError, match="property 'gateway'"):
            expect_field(make_response(200, {"status": "ok"}, "GET", "/health"), "gateway")

    def test_non_object_body(self) -> None:
        with pytest.raises(ContractViolationError):
            expect_field(make_response(200, ["gateway"], "GET", "/health"), "gateway")

    def test_non_json_body(self) -> None:
        request = httpx.Request("GET", "http://titanic.test/health")
        response = httpx.Response(200, text="<html>", request=request)

        with pytest.raises(ContractViolationError, match="not JSON"):
            expect_field(response, "gateway")


@pytest.mark.unit
class TestExpectModel:
    def test_returns_validated_model(self) -> None:
        response = make_response(
            200, {"gateway": "ok", "passenger_service": "ok"}, "GET", "/health"
        )

        health = expect_model(response, HealthStatus)

        assert isinstance(health, HealthStatus)
        assert health.components() == {"gateway": "ok", "passenger_service": "ok"}

    def test_missing_required_field_names_model_and_field(self) -> None:
        response = make_response(200, {"status": "ok"}, "GET", "/health")

        with pytest.raises(ContractViolationError) as exc_info:
            expect_model(response, HealthStatus)

        message = str(exc_info.value)
        assert "GET /health" in message
        assert "does not match HealthStatus" in message
        assert "gateway: Field required" in message

    def test_non_object_body(self) -> None:
        with pytest.raises(ContractViolationError, match="does not match HealthStatus"):
            expect_model(make_response(200, ["gateway"], "GET", "/health"), HealthStatus)

    def test_non_json_body(self) -> None:
        request = httpx.Request("GET", "http://titanic.test/health")
        response = httpx.Response(200, text="<html>", request=request)

        with pytest.raises(ContractViolationError, match="not JSON"):
            expect_model(response, HealthStatus)


@pytest.mark.unit
class TestExpectDetailContains:
    def test_fragment_found(self) -> None:
        response = make_response(403, {"detail": "Forbidden: Admin access required"})

        expect_detail_contains(response, "Admin access required")

    def test_fragment_missing(self) -> None:
        response = make_response(403, {"detail": "Forbidden"})

        with pytest.raises(ContractViolationError, match="Admin access required"):
            expect_detail_contains(response, "Admin access required")


@pytest.mark.unit
class TestExpectTruthy:
    def test_non_empty(self) -> None:
        expect_truthy("token", "admin token")

    def test_empty(self) -> None:
        with pytest.raises(ContractViolationError, match="admin token to not be empty"):
            expect_truthy("", "admin token")
