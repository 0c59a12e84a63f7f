"""Test data factories using factory_boy.

These factories generate realistic test data for harness models.
"""

from tests.factories.passenger import ActorFactory, PassengerFactory

__all__ = [
    "ActorFactory",
    "PassengerFactory",
]
