"""Suite driver: the Setup → (Case → Teardown)* → Finished state machine.

The driver owns the ordering guarantees of a run:
- setup provisions both actors exactly once, before any case
- cases run one at a time, in catalogue order
- every case is followed by a teardown, whatever the case outcome
- a case failure is recorded against that case only

Illegal phase changes raise PhaseTransitionError, so ordering is a checked
contract rather than a consequence of call order.
"""

import time
from collections.abc import Sequence
from datetime import UTC, datetime
from enum import Enum

import structlog

from titanic_harness.cases.base import CaseContext, SuiteCase
from titanic_harness.core.cleanup import CleanupCoordinator
from titanic_harness.core.exceptions import (
    BackendUnreachableError,
    ExternalServiceError,
    HarnessError,
    PhaseTransitionError,
)
from titanic_harness.core.expectations import expect_status
from titanic_harness.core.session import SessionState
from titanic_harness.models.actor import Actor, ActorPair, AuthToken
from titanic_harness.models.report import (
    CaseOutcome,
    CaseResult,
    CleanupReport,
    SetupReport,
    SuiteReport,
)
from titanic_harness.services.titanic.client import TitanicApi, access_token_from

log = structlog.get_logger(__name__)


class SuitePhase(str, Enum):
    """Driver phases."""

    PENDING = "pending"
    SETUP = "setup"
    CASE = "case"
    TEARDOWN = "teardown"
    FINISHED = "finished"


_TRANSITIONS: dict[SuitePhase, frozenset[SuitePhase]] = {
    SuitePhase.PENDING: frozenset({SuitePhase.SETUP}),
    SuitePhase.SETUP: frozenset({SuitePhase.CASE, SuitePhase.FINISHED}),
    SuitePhase.CASE: frozenset({SuitePhase.TEARDOWN}),
    SuitePhase.TEARDOWN: frozenset({SuitePhase.CASE, SuitePhase.FINISHED}),
    SuitePhase.FINISHED: frozenset(),
}


class SuiteDriver:
    """Runs the case catalogue against one backend.

    Args:
        client: Any TitanicApi implementation.
        actors: The admin and regular actor of this run.
        cases: Cases in execution order.
        session: Session state; a fresh one when omitted.
        coordinator: Cleanup coordinator; one over `client` when omitted.

    Example:
        async with TitanicApiClient(settings.base_url) as client:
            driver = SuiteDriver(client, build_actors(), DEFAULT_CASES)
            report = await driver.run()
    """

    def __init__(
        self,
        client: TitanicApi,
        actors: ActorPair,
        cases: Sequence[SuiteCase],
        session: SessionState | None = None,
        coordinator: CleanupCoordinator | None = None,
        base_url: str = "",
    ) -> None:
        self.client = client
        self.actors = actors
        self.cases = tuple(cases)
        self.session = session or SessionState()
        self.coordinator = coordinator or CleanupCoordinator(client)
        self.base_url = base_url
        self._phase = SuitePhase.PENDING
        self.setup_report: SetupReport | None = None

    @property
    def phase(self) -> SuitePhase:
        return self._phase

    def _advance(self, target: SuitePhase) -> None:
        if target not in _TRANSITIONS[self._phase]:
            raise PhaseTransitionError(
                f"Cannot move from {self._phase.value} to {target.value}"
            )
        log.debug("phase_changed", source=self._phase.value, target=target.value)
        self._phase = target

    # -------------------------------------------------------------------------
    # Setup
    # -------------------------------------------------------------------------

    async def setup(self) -> SetupReport:
        """Provision both actors and store their tokens.

        Admin and regular provisioning are independent: a failure in one
        is recorded and the other is still attempted. Nothing here aborts
        the run.
        """
        self._advance(SuitePhase.SETUP)
        report = SetupReport()

        report.admin_ready = await self._provision(
            self.actors.admin, expect_created=True, report=report
        )
        report.regular_ready = await self._provision(
            self.actors.regular, expect_created=False, report=report
        )

        log.info(
            "setup_finished",
            admin_ready=report.admin_ready,
            regular_ready=report.regular_ready,
            errors=len(report.errors),
        )
        self.setup_report = report
        return report

    async def _provision(
        self, actor: Actor, expect_created: bool, report: SetupReport
    ) -> bool:
        try:
            registered = await self.client.register(actor, fail_on_status=False)
            if expect_created:
                expect_status(registered, 201)

            response = await self.client.login(actor)
            token = AuthToken(
                role=actor.role,
                username=actor.username,
                access_token=access_token_from(response),
            )
            self.session.store_token(token)
            return bool(token)
        except (AssertionError, HarnessError) as e:
            message = f"{actor.role.value} provisioning failed: {e}"
            log.error("setup_actor_failed", role=actor.role.value, error=str(e))
            report.errors.append(message)
            return False

    # -------------------------------------------------------------------------
    # Cases
    # -------------------------------------------------------------------------

    async def run_case(self, case: SuiteCase) -> CaseResult:
        """Run one case, then its teardown."""
        self._advance(SuitePhase.CASE)

        with structlog.contextvars.bound_contextvars(
            run_id=self.session.run_id, case=case.name
        ):
            log.info("case_started", title=case.title)

            outcome = CaseOutcome.PASSED
            message: str | None = None
            cleanup = CleanupReport()
            started = time.perf_counter()

            try:
                await case.body(CaseContext(client=self.client, session=self.session))
            except (AssertionError, ExternalServiceError) as e:
                outcome = CaseOutcome.FAILED
                message = str(e) or type(e).__name__
            except BackendUnreachableError as e:
                outcome = CaseOutcome.ERROR
                message = str(e)
            except Exception as e:
                outcome = CaseOutcome.ERROR
                message = f"{type(e).__name__}: {e}"
                log.exception("case_crashed")
            finally:
                duration = time.perf_counter() - started
                self._advance(SuitePhase.TEARDOWN)
                cleanup = await self._teardown()

            log_method = log.info if outcome is CaseOutcome.PASSED else log.warning
            log_method(
                "case_finished",
                outcome=outcome.value,
                message=message,
                duration_seconds=round(duration, 3),
            )

        return CaseResult(
            name=case.name,
            title=case.title,
            outcome=outcome,
            message=message,
            duration_seconds=duration,
            cleanup=cleanup,
        )

    async def _teardown(self) -> CleanupReport:
        pending = list(self.session.registry.snapshot())
        try:
            return await self.coordinator.run(self.session)
        except Exception:
            log.exception("cleanup_crashed", passenger_ids=pending)
            self.session.registry.clear()
            return CleanupReport(attempted=pending, failed=pending)

    # -------------------------------------------------------------------------
    # Whole run
    # -------------------------------------------------------------------------

    async def run(self) -> SuiteReport:
        """Setup, every case in order, then finish.

        Raises:
            PhaseTransitionError: If the driver has already been run.
        """
        report = SuiteReport(run_id=self.session.run_id, base_url=self.base_url)
        report.setup = await self.setup()

        for case in self.cases:
            report.cases.append(await self.run_case(case))

        self._advance(SuitePhase.FINISHED)
        report.finished_at = datetime.now(UTC)
        log.info(
            "suite_finished",
            run_id=report.run_id,
            passed=report.passed,
            failed=report.failed,
            errored=report.errored,
        )
        return report
