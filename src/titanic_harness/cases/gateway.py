"""Gateway cases."""

from titanic_harness.cases.base import CaseContext, SuiteCase
from titanic_harness.core.expectations import expect_model, expect_status
from titanic_harness.models.passenger import HealthStatus


async def gateway_health(ctx: CaseContext) -> None:
    response = await ctx.client.check_health()
    expect_status(response, 200)
    expect_model(response, HealthStatus)


GATEWAY_HEALTH = SuiteCase(
    name="gateway_health",
    title="[Gateway] Health Check returns OK",
    body=gateway_health,
)
