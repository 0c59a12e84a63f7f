"""Passenger cases: authorization and the cabin-sharing rule."""

from titanic_harness.cases.base import CaseContext, SuiteCase
from titanic_harness.core.exceptions import ContractViolationError
from titanic_harness.core.expectations import expect_detail_contains, expect_status
from titanic_harness.data.fixture_store import JACK, ROSE

ADMIN_REQUIRED = "Admin access required"
CABIN_CONFLICT = "Different social classes cannot share cabins on Titanic"


async def rbac_regular_cannot_delete(ctx: CaseContext) -> None:
    """A regular user's delete is refused with 403."""
    created = await ctx.client.create_passenger(ROSE, ctx.session.admin_token)
    # Any id the backend handed out is registered before the status is checked
    target_id = ctx.track_created(created)
    expect_status(created, 201)
    if target_id is None:
        raise ContractViolationError(
            f"create passenger: expected an integer id, got {created.text[:200]!r}"
        )

    response = await ctx.client.delete_passenger(
        target_id, ctx.session.regular_token, fail_on_status=False
    )
    expect_status(response, 403)
    expect_detail_contains(response, ADMIN_REQUIRED)


async def cabin_class_conflict(ctx: CaseContext) -> None:
    """Jack (3rd class) cannot move into Rose's 1st class cabin."""
    rose = await ctx.client.create_passenger(ROSE, ctx.session.admin_token, fail_on_status=False)
    ctx.track_created(rose)
    expect_status(rose, 201)

    jack = await ctx.client.create_passenger(JACK, ctx.session.admin_token, fail_on_status=False)
    # Registered before asserting so an unexpected 201 is still cleaned up
    ctx.track_created(jack)
    expect_status(jack, 401)
    expect_detail_contains(jack, CABIN_CONFLICT)


RBAC_REGULAR_CANNOT_DELETE = SuiteCase(
    name="rbac_regular_cannot_delete",
    title="[Passenger] RBAC: Regular user cannot delete a passenger (403)",
    body=rbac_regular_cannot_delete,
)

CABIN_CLASS_CONFLICT = SuiteCase(
    name="cabin_class_conflict",
    title="[Passenger] Easter Egg: Jack and Rose cannot share a cabin",
    body=cabin_class_conflict,
)
