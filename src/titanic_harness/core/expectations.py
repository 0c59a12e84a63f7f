"""Response assertions used by case bodies.

Each helper raises ContractViolationError with a message naming the
request, the expected value and what came back, so a failed case report
is readable without the raw response.
"""

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from titanic_harness.core.exceptions import ContractViolationError
from titanic_harness.services.base import error_detail

ModelT = TypeVar("ModelT", bound=BaseModel)


def _describe(response: httpx.Response) -> str:
    try:
        request = response.request
    except RuntimeError:
        # Response built without a request (fakes in unit tests)
        return "response"
    return f"{request.method} {request.url.path}"


def _body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise ContractViolationError(
            f"{_describe(response)}: body is not JSON ({response.text[:200]!r})"
        ) from e


def expect_status(response: httpx.Response, *expected: int) -> None:
    """Fail unless the status code is one of `expected`."""
    if response.status_code not in expected:
        wanted = " or ".join(str(code) for code in expected)
        detail = error_detail(response)
        raise ContractViolationError(
            f"{_describe(response)}: expected status {wanted}, "
            f"got {response.status_code}" + (f" ({detail})" if detail else "")
        )


def expect_field(response: httpx.Response, name: str) -> Any:
    """Fail unless the JSON body is an object with `name`; return its value."""
    body = _body(response)
    if not isinstance(body, dict) or name not in body:
        raise ContractViolationError(
            f"{_describe(response)}: expected body to have property {name!r}, got {body!r}"
        )
    return body[name]


def expect_model(response: httpx.Response, model: type[ModelT]) -> ModelT:
    """Fail unless the JSON body validates as `model`; return the instance."""
    body = _body(response)
    try:
        return model.model_validate(body)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'body'}: {error['msg']}"
            for error in e.errors()
        )
        raise ContractViolationError(
            f"{_describe(response)}: body does not match {model.__name__} ({problems}), "
            f"got {body!r}"
        ) from e


def expect_detail_contains(response: httpx.Response, fragment: str) -> None:
    """Fail unless the error body's `detail` contains `fragment`."""
    detail = expect_field(response, "detail")
    if fragment not in str(detail):
        raise ContractViolationError(
            f"{_describe(response)}: expected detail to include {fragment!r}, "
            f"got {detail!r}"
        )


def expect_truthy(value: Any, what: str) -> None:
    """Fail unless `value` is non-empty."""
    if not value:
        raise ContractViolationError(f"expected {what} to not be empty")
