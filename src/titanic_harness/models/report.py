"""Run report models.

A SuiteReport is what the runner writes into the results directory: one
entry per case with its outcome and the teardown that followed it.
"""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field, computed_field


class CaseOutcome(str, Enum):
    """Outcome of a single case."""

    PASSED = "passed"
    FAILED = "failed"  # Contract violation or rejected call
    ERROR = "error"  # Transport fault or unexpected exception


class CleanupReport(BaseModel):
    """What one teardown did.

    Attributes:
        attempted: Ids found in the registry, in registration order.
        deleted: Ids the backend confirmed deleted (2xx).
        forbidden: Ids rejected with 403 (admin rights problem).
        failed: Ids with any other status or a transport fault.
        lingering: Deleted ids still readable afterwards (verification only).
    """

    attempted: list[int] = Field(default_factory=list)
    deleted: list[int] = Field(default_factory=list)
    forbidden: list[int] = Field(default_factory=list)
    failed: list[int] = Field(default_factory=list)
    lingering: list[int] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def complete(self) -> bool:
        """True when every attempted id was deleted and none lingers."""
        return len(self.deleted) == len(self.attempted) and not self.lingering


class CaseResult(BaseModel):
    """Result of one case plus its teardown."""

    name: str
    title: str
    outcome: CaseOutcome
    message: str | None = None
    duration_seconds: float = 0.0
    cleanup: CleanupReport = Field(default_factory=CleanupReport)


class SetupReport(BaseModel):
    """Result of the one-time actor provisioning."""

    admin_ready: bool = False
    regular_ready: bool = False
    errors: list[str] = Field(default_factory=list)


class SuiteReport(BaseModel):
    """Whole-run report."""

    run_id: str
    base_url: str
    started_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    finished_at: datetime | None = None
    setup: SetupReport = Field(default_factory=SetupReport)
    cases: list[CaseResult] = Field(default_factory=list)

    def _count(self, outcome: CaseOutcome) -> int:
        return sum(1 for case in self.cases if case.outcome is outcome)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> int:
        return self._count(CaseOutcome.PASSED)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed(self) -> int:
        return self._count(CaseOutcome.FAILED)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def errored(self) -> int:
        return self._count(CaseOutcome.ERROR)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        """True when at least one case ran and all of them passed."""
        return bool(self.cases) and self.passed == len(self.cases)
