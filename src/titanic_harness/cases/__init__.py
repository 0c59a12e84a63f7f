"""Case catalogue, in execution order."""

from titanic_harness.cases.auth import AUTH_TOKENS
from titanic_harness.cases.base import CaseBody, CaseContext, SuiteCase
from titanic_harness.cases.gateway import GATEWAY_HEALTH
from titanic_harness.cases.passenger import CABIN_CLASS_CONFLICT, RBAC_REGULAR_CANNOT_DELETE
from titanic_harness.core.exceptions import ConfigurationError

DEFAULT_CASES: tuple[SuiteCase, ...] = (
    GATEWAY_HEALTH,
    AUTH_TOKENS,
    RBAC_REGULAR_CANNOT_DELETE,
    CABIN_CLASS_CONFLICT,
)


def select_cases(names: list[str] | None) -> tuple[SuiteCase, ...]:
    """Pick cases by name, keeping catalogue order.

    Raises:
        ConfigurationError: If a name is not in the catalogue.
    """
    if not names:
        return DEFAULT_CASES
    known = {case.name for case in DEFAULT_CASES}
    unknown = sorted(set(names) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown case(s): {', '.join(unknown)}. Known: {', '.join(sorted(known))}"
        )
    return tuple(case for case in DEFAULT_CASES if case.name in names)


__all__ = [
    "AUTH_TOKENS",
    "CABIN_CLASS_CONFLICT",
    "DEFAULT_CASES",
    "GATEWAY_HEALTH",
    "RBAC_REGULAR_CANNOT_DELETE",
    "CaseBody",
    "CaseContext",
    "SuiteCase",
    "select_cases",
]
