"""Actor and token models.

An actor is a backend user the harness registers once per run and logs in
with to obtain a bearer token. The role is a harness-side label: it decides
which token a case uses and is never sent to the backend.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator


class ActorRole(str, Enum):
    """Roles the harness provisions."""

    ADMIN = "admin"
    REGULAR = "regular"


class Actor(BaseModel):
    """Backend user identity used by the harness.

    Attributes:
        username: Unique per run (carries the run suffix).
        password: Login password.
        email: Contact email sent at registration.
        role: Which token slot this actor fills.
    """

    model_config = ConfigDict(frozen=True)

    username: str = Field(min_length=1, description="Unique username for this run")
    password: SecretStr = Field(description="Login password")
    email: str = Field(description="Registration email")
    role: ActorRole = Field(description="Harness-side role label")

    def registration_payload(self) -> dict[str, Any]:
        """Body for POST /api/auth/register."""
        return {
            "username": self.username,
            "password": self.password.get_secret_value(),
            "email": self.email,
        }

    def login_payload(self) -> dict[str, Any]:
        """Body for POST /api/auth/login."""
        return {
            "username": self.username,
            "password": self.password.get_secret_value(),
        }


class ActorPair(BaseModel):
    """The admin and regular actors of one run."""

    model_config = ConfigDict(frozen=True)

    admin: Actor
    regular: Actor

    @model_validator(mode="after")
    def check_roles(self) -> "ActorPair":
        """Each slot must hold an actor with the matching role."""
        if self.admin.role is not ActorRole.ADMIN:
            raise ValueError("admin slot requires an actor with role 'admin'")
        if self.regular.role is not ActorRole.REGULAR:
            raise ValueError("regular slot requires an actor with role 'regular'")
        if self.admin.username == self.regular.username:
            raise ValueError("admin and regular actors must have distinct usernames")
        return self

    def all(self) -> tuple[Actor, Actor]:
        """Actors in provisioning order (admin first)."""
        return (self.admin, self.regular)


class AuthToken(BaseModel):
    """Bearer credential issued to one actor at login.

    Held for the whole run and never revoked; expiry is left to the backend.
    """

    model_config = ConfigDict(frozen=True)

    role: ActorRole
    username: str
    access_token: str = ""
    issued_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def __bool__(self) -> bool:
        return bool(self.access_token)
