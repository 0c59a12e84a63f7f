"""Titanic harness exception hierarchy.

This module defines the base exception class and specialized exceptions
for the error categories the harness distinguishes: configuration problems,
contract violations reported by a case, rejected API calls, transport faults
and driver misuse.
"""


class HarnessError(Exception):
    """Base exception for all harness errors.

    All custom exceptions in the harness inherit from this class
    to enable consistent error handling and logging.
    """

    pass


class ConfigurationError(HarnessError):
    """Raised when configuration is invalid or missing.

    Use this for issues with environment variables, settings files,
    or command line arguments.

    Example:
        raise ConfigurationError("Unknown case: gateway_helth")
    """

    pass


class ContractViolationError(HarnessError, AssertionError):
    """Raised when a response does not match the expected API contract.

    This is the harness's primary reporting unit. It is an AssertionError so
    that pytest and the suite driver both treat it as a failed case rather
    than an error in the harness itself.

    Example:
        raise ContractViolationError("Expected status 201, got 500")
    """

    pass


class ExternalServiceError(HarnessError):
    """Raised when the backend answers a non-tolerated call with non-2xx.

    Attributes:
        service: Base URL of the backend that answered.
        status_code: HTTP status code if available, None otherwise.
        detail: The `detail` field of the error body, if present.

    Example:
        raise ExternalServiceError(
            service="http://localhost:8000",
            message="POST /api/passengers returned 401",
            status_code=401,
        )
    """

    def __init__(
        self,
        service: str,
        message: str,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        self.service = service
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{service}: {message}")


class BackendUnreachableError(HarnessError):
    """Raised on transport-level faults (connection refused, timeout).

    There is no retry: the case that hit the fault fails, and every later
    case fails on its own requests.
    """

    def __init__(self, service: str, message: str) -> None:
        self.service = service
        super().__init__(f"{service}: {message}")


class PhaseTransitionError(HarnessError):
    """Raised when the suite driver is asked for an illegal phase change.

    Example:
        raise PhaseTransitionError("Cannot move from finished to case")
    """

    pass
