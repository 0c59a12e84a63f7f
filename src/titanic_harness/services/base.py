"""Base API client for the backend under test.

This module provides BaseAPIClient, a thin async wrapper around
httpx.AsyncClient that:
- creates the underlying client lazily on first request
- attaches a bearer token per call, never per client
- either raises on non-2xx or hands the response back untouched
- turns transport faults into BackendUnreachableError

No retries: a transient failure fails the case.
"""

from typing import Any

import httpx
import structlog

from titanic_harness.core.exceptions import BackendUnreachableError, ExternalServiceError

log = structlog.get_logger(__name__)


def error_detail(response: httpx.Response) -> str | None:
    """Return the `detail` field of an error body, if the body has one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("detail") is not None:
        return str(body["detail"])
    return None


class BaseAPIClient:
    """Base API client with per-call auth and failure tolerance.

    Attributes:
        base_url: Base URL for all requests.
        timeout: Request timeout in seconds.
        headers: Default headers for all requests.

    Example:
        async with BaseAPIClient(base_url="http://localhost:8000") as client:
            response = await client.request("GET", "/health")
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize BaseAPIClient.

        Args:
            base_url: Base URL for all requests.
            timeout: Request timeout in seconds (default: 10).
            headers: Default headers for all requests.
            transport: Optional httpx transport, for tests.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = headers or {}
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "BaseAPIClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx client (lazy initialization)."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
                transport=self._transport,
            )
            log.debug("httpx_client_created", base_url=self.base_url)
        return self._client

    async def close(self) -> None:
        """Close the httpx client and release resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            log.debug("httpx_client_closed", base_url=self.base_url)

    async def request(
        self,
        method: str,
        path: str,
        *,
        token: str | None = None,
        fail_on_status: bool = True,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make an HTTP request.

        Args:
            method: HTTP method (GET, POST, DELETE).
            path: Request path (appended to base_url).
            token: Bearer token; no Authorization header when empty.
            fail_on_status: Raise on non-2xx when True, return the
                response for inspection when False.
            **kwargs: Additional arguments passed to httpx.request.

        Returns:
            The httpx.Response.

        Raises:
            ExternalServiceError: Non-2xx response and fail_on_status is True.
            BackendUnreachableError: Connection, timeout or protocol fault.
        """
        client = await self._get_client()

        headers = dict(kwargs.pop("headers", None) or {})
        if token:
            headers["Authorization"] = f"Bearer {token}"

        log.debug("request_sent", method=method, path=path, authenticated=bool(token))

        try:
            response = await client.request(method, path, headers=headers, **kwargs)
        except httpx.TransportError as e:
            log.error("request_transport_error", method=method, path=path, error=str(e))
            raise BackendUnreachableError(
                service=self.base_url,
                message=f"{method} {path} failed: {e}",
            ) from e

        log.debug(
            "response_received",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if fail_on_status and not response.is_success:
            detail = error_detail(response)
            log.warning(
                "request_rejected",
                method=method,
                path=path,
                status_code=response.status_code,
                detail=detail,
            )
            raise ExternalServiceError(
                service=self.base_url,
                message=f"{method} {path} returned {response.status_code}"
                + (f": {detail}" if detail else ""),
                status_code=response.status_code,
                detail=detail,
            )

        return response
