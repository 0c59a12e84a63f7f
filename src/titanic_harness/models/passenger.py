"""Passenger and health models.

These mirror the backend's wire format. The harness builds passengers to
send them, so validation here only guards against malformed fixtures.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Passenger(BaseModel):
    """Passenger record as sent to POST /api/passengers.

    The server-assigned id is not part of the payload; it is only known
    once the create call returns.

    Example:
        rose = Passenger(
            name="DeWitt Bukater, Miss. Rose DeWitt",
            pclass=1,
            sex="female",
            age=17,
            fare=71.2833,
            embarked="Cherbourg",
            destination="New York",
            cabin="B52",
            ticket="PC 17558",
        )
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Full passenger name")
    pclass: int = Field(ge=1, le=3, description="Ticket class (1, 2 or 3)")
    sex: Literal["male", "female"] = Field(description="Passenger sex")
    age: float | None = Field(default=None, ge=0, description="Age in years")
    fare: float = Field(default=0.0, ge=0, description="Fare paid")
    embarked: str = Field(description="Port of embarkation")
    destination: str = Field(description="Destination")
    cabin: str | None = Field(default=None, description="Cabin identifier")
    ticket: str = Field(description="Ticket number")

    def to_payload(self) -> dict[str, Any]:
        """JSON body for the create call."""
        return self.model_dump(mode="json")


class HealthStatus(BaseModel):
    """Body returned by GET /health.

    Only the gateway entry is required; the status of the other services is
    kept as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    gateway: Any

    def components(self) -> dict[str, Any]:
        """All component entries, gateway included."""
        return {"gateway": self.gateway, **(self.model_extra or {})}
