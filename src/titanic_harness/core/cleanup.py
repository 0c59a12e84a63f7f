"""Cleanup coordinator: per-case teardown of created passengers.

Runs after every case, whatever the case outcome. Every deletion is made
with the admin token and with failures tolerated. An error on one id is
recorded against that id and the remaining ids are still attempted; the
registry is empty when run() returns.
"""

import structlog

from titanic_harness.core.exceptions import HarnessError
from titanic_harness.core.session import SessionState
from titanic_harness.models.report import CleanupReport
from titanic_harness.services.titanic.client import TitanicApi

log = structlog.get_logger(__name__)


class CleanupCoordinator:
    """Deletes the passengers registered by a case.

    Args:
        client: Any TitanicApi implementation.
        verify: Read every deleted passenger back and report those that
            are still there.

    Example:
        coordinator = CleanupCoordinator(client)
        report = await coordinator.run(session)
        assert session.registry.is_empty
    """

    def __init__(self, client: TitanicApi, verify: bool = False) -> None:
        self.client = client
        self.verify = verify

    async def run(self, session: SessionState) -> CleanupReport:
        """Delete every registered passenger, then drain the registry.

        Args:
            session: Session whose registry is drained.

        Returns:
            CleanupReport describing what happened to each id.
        """
        registry = session.registry
        if registry.is_empty:
            return CleanupReport()

        report = CleanupReport(attempted=list(registry.snapshot()))
        log.info(
            "cleanup_started",
            count=len(report.attempted),
            passenger_ids=report.attempted,
        )

        try:
            for passenger_id in report.attempted:
                await self._delete(passenger_id, session.admin_token, report)

            if self.verify and report.deleted:
                for passenger_id in report.deleted:
                    await self._verify_gone(passenger_id, session.admin_token, report)
        finally:
            registry.clear()

        log.info(
            "cleanup_finished",
            deleted=len(report.deleted),
            forbidden=len(report.forbidden),
            failed=len(report.failed),
            lingering=len(report.lingering),
        )
        return report

    async def _delete(self, passenger_id: int, token: str, report: CleanupReport) -> None:
        try:
            response = await self.client.delete_passenger(
                passenger_id, token, fail_on_status=False
            )
        except HarnessError as e:
            log.error("cleanup_delete_error", passenger_id=passenger_id, error=str(e))
            report.failed.append(passenger_id)
            return
        except Exception:
            log.exception("cleanup_delete_crashed", passenger_id=passenger_id)
            report.failed.append(passenger_id)
            return

        if response.is_success:
            report.deleted.append(passenger_id)
        elif response.status_code == 403:
            log.warning(
                "cleanup_forbidden",
                passenger_id=passenger_id,
                hint="Check admin rights",
            )
            report.forbidden.append(passenger_id)
        else:
            log.error(
                "cleanup_delete_failed",
                passenger_id=passenger_id,
                status_code=response.status_code,
            )
            report.failed.append(passenger_id)

    async def _verify_gone(
        self, passenger_id: int, token: str, report: CleanupReport
    ) -> None:
        try:
            response = await self.client.get_passenger(
                passenger_id, token, fail_on_status=False
            )
        except HarnessError as e:
            log.error("cleanup_verify_error", passenger_id=passenger_id, error=str(e))
            report.lingering.append(passenger_id)
            return
        except Exception:
            log.exception("cleanup_verify_crashed", passenger_id=passenger_id)
            report.lingering.append(passenger_id)
            return

        if response.status_code != 404:
            log.warning(
                "cleanup_lingering",
                passenger_id=passenger_id,
                status_code=response.status_code,
            )
            report.lingering.append(passenger_id)
