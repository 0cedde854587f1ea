"""HTTP transport used by conversation sessions.

Sessions only need a GET for the handshake and a POST for each turn.
Anything satisfying the Transport protocol can stand in for the httpx
implementation below.
"""

from typing import Protocol

import httpx

from banter.exceptions import TransportError
from banter.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_USER_AGENT = "banter/0.1"


class Transport(Protocol):
    """Minimal async HTTP surface a session depends on."""

    async def get(self, url: str) -> httpx.Response:
        ...

    async def post(
        self,
        url: str,
        *,
        content: str | bytes,
        headers: dict[str, str],
    ) -> httpx.Response:
        ...

    async def aclose(self) -> None:
        ...


class HttpxTransport:
    """Transport backed by httpx.AsyncClient.

    Network failures and HTTP error statuses are raised as TransportError.
    Redirects are followed for the handshake GET only; a redirected POST
    raises TransportError. Timeouts come from the client configuration.
    The client keeps no cookies between requests.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds
            user_agent: User-Agent header sent with every request
            client: Pre-built client to use instead of creating one
        """
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": user_agent},
        )

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def get(self, url: str) -> httpx.Response:
        return await self._send("GET", url, follow_redirects=True)

    async def post(
        self,
        url: str,
        *,
        content: str | bytes,
        headers: dict[str, str],
    ) -> httpx.Response:
        return await self._send(
            "POST", url, content=content, headers=headers, follow_redirects=False
        )

    async def _send(
        self,
        method: str,
        url: str,
        *,
        content: str | bytes | None = None,
        headers: dict[str, str] | None = None,
        follow_redirects: bool = False,
    ) -> httpx.Response:
        try:
            response = await self._client.request(
                method,
                url,
                content=content,
                headers=headers,
                follow_redirects=follow_redirects,
            )
        except httpx.HTTPError as e:
            logger.error(
                "transport_request_failed",
                method=method,
                url=url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise TransportError(f"{method} {url} failed: {e}") from e
        finally:
            # Cookies live in each session's own jar, never in the shared client
            self._client.cookies.clear()

        if 300 <= response.status_code < 400:
            # Only reachable for POST: a followed redirect would replay it as a bare GET
            logger.warning(
                "transport_request_failed",
                method=method,
                url=url,
                status_code=response.status_code,
                location=response.headers.get("location"),
            )
            raise TransportError(
                f"{method} {url} was redirected with HTTP {response.status_code}",
                status_code=response.status_code,
            )

        if response.status_code >= 400:
            logger.warning(
                "transport_request_failed",
                method=method,
                url=url,
                status_code=response.status_code,
                response_preview=response.text[:200],
            )
            raise TransportError(
                f"{method} {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        return response
