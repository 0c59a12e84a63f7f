"""Pydantic models for actors, passengers and run reports."""

from titanic_harness.models.actor import Actor, ActorPair, ActorRole, AuthToken
from titanic_harness.models.passenger import HealthStatus, Passenger
from titanic_harness.models.report import (
    CaseOutcome,
    CaseResult,
    CleanupReport,
    SetupReport,
    SuiteReport,
)

__all__ = [
    "Actor",
    "ActorPair",
    "ActorRole",
    "AuthToken",
    "CaseOutcome",
    "CaseResult",
    "CleanupReport",
    "HealthStatus",
    "Passenger",
    "SetupReport",
    "SuiteReport",
]
