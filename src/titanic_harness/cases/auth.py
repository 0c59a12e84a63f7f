"""Auth cases.

Login happens once during setup; these cases only look at what setup left
in the session.
"""

from titanic_harness.cases.base import CaseContext, SuiteCase
from titanic_harness.core.expectations import expect_truthy


async def auth_tokens(ctx: CaseContext) -> None:
    expect_truthy(ctx.session.admin_token, "admin token")
    expect_truthy(ctx.session.regular_token, "regular token")


AUTH_TOKENS = SuiteCase(
    name="auth_tokens",
    title="[Auth] Ensure Global Admin has access token",
    body=auth_tokens,
)
