"""Run-scoped session state.

SessionState is the one mutable object shared between the setup phase, the
cases and the cleanup coordinator. It holds:
- the bearer token of each actor, written once during setup
- the cleanup registry, appended to by the running case and drained by the
  teardown that follows it

A missing token reads as an empty string; cases that need it fail on their
own requests instead of being skipped.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from uuid import uuid4

import structlog

from titanic_harness.models.actor import ActorRole, AuthToken

log = structlog.get_logger(__name__)


@dataclass
class CleanupRegistry:
    """Ordered ids of passengers created by the current case."""

    _ids: list[int] = field(default_factory=list)

    def register(self, passenger_id: int) -> None:
        """Mark a passenger for deletion after the case.

        Registering the same id twice is a no-op.
        """
        if passenger_id in self._ids:
            return
        self._ids.append(passenger_id)
        log.debug("cleanup_registered", passenger_id=passenger_id, pending=len(self._ids))

    def snapshot(self) -> tuple[int, ...]:
        """Registered ids in registration order."""
        return tuple(self._ids)

    def clear(self) -> None:
        self._ids.clear()

    @property
    def is_empty(self) -> bool:
        return not self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self.snapshot())

    def __contains__(self, passenger_id: object) -> bool:
        return passenger_id in self._ids


@dataclass
class SessionState:
    """Tokens and cleanup registry for one test run.

    Attributes:
        run_id: Identifier of the run, used in logs and the report file name.
        tokens: Issued tokens keyed by actor role.
        registry: Passengers to delete after the current case.
    """

    run_id: str = field(default_factory=lambda: uuid4().hex[:12])
    tokens: dict[ActorRole, AuthToken] = field(default_factory=dict)
    registry: CleanupRegistry = field(default_factory=CleanupRegistry)

    def store_token(self, token: AuthToken) -> None:
        """Store the token issued to an actor, replacing any previous one."""
        self.tokens[token.role] = token
        log.info(
            "token_stored",
            role=token.role.value,
            username=token.username,
            empty=not token,
        )

    def token_for(self, role: ActorRole) -> str:
        """Raw bearer token for a role, or "" when setup did not get one."""
        token = self.tokens.get(role)
        return token.access_token if token else ""

    @property
    def admin_token(self) -> str:
        return self.token_for(ActorRole.ADMIN)

    @property
    def regular_token(self) -> str:
        return self.token_for(ActorRole.REGULAR)
