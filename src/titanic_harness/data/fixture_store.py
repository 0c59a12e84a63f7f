"""Fixture store: the actors and passengers the suite works with.

Passengers are fixed literals. Actors carry a per-run suffix in their
usernames so that repeated runs against the same backend never collide on
registration.
"""

import time

from pydantic import SecretStr

from titanic_harness.models.actor import Actor, ActorPair, ActorRole
from titanic_harness.models.passenger import Passenger

DEFAULT_PASSWORD = "Password123!"
DEFAULT_ADMIN_EMAIL = "admin@titanic.com"
DEFAULT_REGULAR_EMAIL = "user@titanic.com"

ADMIN_USERNAME_PREFIX = "admin_"
REGULAR_USERNAME_PREFIX = "user_"

# =============================================================================
# Passengers
# =============================================================================

ROSE = Passenger(
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

# Same cabin as Rose, different class
JACK = Passenger(
    name="Dawson, Mr. Jack",
    pclass=3,
    sex="male",
    age=20,
    fare=0.0,
    embarked="Southampton",
    destination="Adventure and Freedom",
    cabin="B52",
    ticket="A/5 21171",
)

PASSENGERS: dict[str, Passenger] = {"rose": ROSE, "jack": JACK}

# =============================================================================
# Actors
# =============================================================================


def new_run_suffix() -> str:
    """Millisecond timestamp, unique per run on one machine."""
    return str(time.time_ns() // 1_000_000)


def build_actors(
    suffix: str | None = None,
    password: str | SecretStr = DEFAULT_PASSWORD,
    admin_email: str = DEFAULT_ADMIN_EMAIL,
    regular_email: str = DEFAULT_REGULAR_EMAIL,
) -> ActorPair:
    """Build the admin and regular actor for one run.

    Args:
        suffix: Username suffix; a fresh timestamp when omitted.
        password: Password shared by both actors.
        admin_email: Email of the admin actor.
        regular_email: Email of the regular actor.
    """
    suffix = suffix or new_run_suffix()
    secret = password if isinstance(password, SecretStr) else SecretStr(password)
    return ActorPair(
        admin=Actor(
            username=f"{ADMIN_USERNAME_PREFIX}{suffix}",
            password=secret,
            email=admin_email,
            role=ActorRole.ADMIN,
        ),
        regular=Actor(
            username=f"{REGULAR_USERNAME_PREFIX}{suffix}",
            password=secret,
            email=regular_email,
            role=ActorRole.REGULAR,
        ),
    )
