"""Case definitions shared by the catalogue and the suite driver."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import httpx

from titanic_harness.core.session import SessionState
from titanic_harness.services.titanic.client import TitanicApi, created_id_from


@dataclass
class CaseContext:
    """What a case body gets to work with."""

    client: TitanicApi
    session: SessionState

    def track_created(self, response: httpx.Response) -> int | None:
        """Register the passenger created by `response` for cleanup.

        Returns the id, or None when the response did not create anything.
        """
        passenger_id = created_id_from(response)
        if passenger_id is not None:
            self.session.registry.register(passenger_id)
        return passenger_id


CaseBody = Callable[[CaseContext], Awaitable[None]]


@dataclass(frozen=True)
class SuiteCase:
    """One named, ordered test case.

    Attributes:
        name: Stable identifier used on the command line and in reports.
        title: Human-readable title, tagged with the service under test.
        body: Coroutine function receiving a CaseContext.
    """

    name: str
    title: str
    body: CaseBody
