"""Session cookie jar for the conversational service."""

from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING

from banter.exceptions import ProtocolError
from banter.observability.logging import get_logger

if TYPE_CHECKING:
    from banter.client.transport import Transport

logger = get_logger(__name__)


class CookieJar:
    """Ordered mapping of cookie name to value.

    A jar is filled from one handshake response and is only ever replaced
    as a whole; it exposes no per-cookie mutation.
    """

    def __init__(self, cookies: Mapping[str, str] | None = None) -> None:
        self._cookies: dict[str, str] = dict(cookies or {})

    @classmethod
    def from_set_cookie(cls, headers: Iterable[str]) -> "CookieJar":
        """Parse Set-Cookie header values.

        Attributes after the first ``;`` (Path, Expires, HttpOnly, ...) are
        dropped. Later duplicates overwrite earlier ones.

        Args:
            headers: Raw Set-Cookie header values

        Returns:
            A jar holding one entry per named cookie
        """
        cookies: dict[str, str] = {}
        for header in headers:
            pair = header.split(";", 1)[0]
            name, _, value = pair.partition("=")
            name = name.strip()
            if not name:
                continue
            cookies[name] = value.strip()
        return cls(cookies)

    @classmethod
    async def bootstrap(cls, transport: "Transport", url: str) -> "CookieJar":
        """Fetch a fresh jar with a single handshake request.

        Args:
            transport: Transport used for the GET
            url: Handshake URL (the service root)

        Returns:
            Jar populated from the handshake response

        Raises:
            ProtocolError: If the response sets no usable cookie
            TransportError: If the handshake request itself fails
        """
        logger.info("cookie_bootstrap_started", url=url)
        response = await transport.get(url)
        headers = response.headers.get_list("set-cookie")
        if not headers:
            logger.warning("cookie_bootstrap_failed", url=url, reason="no_set_cookie")
            raise ProtocolError("missing session cookie")

        jar = cls.from_set_cookie(headers)
        if not jar:
            logger.warning("cookie_bootstrap_failed", url=url, reason="malformed_set_cookie")
            raise ProtocolError("missing session cookie")

        logger.info("cookie_bootstrap_completed", url=url, cookie_names=list(jar))
        return jar

    def serialize(self) -> str:
        """Render the jar as a Cookie request header value."""
        return ";".join(f"{name}={value}" for name, value in self._cookies.items())

    def as_dict(self) -> dict[str, str]:
        return dict(self._cookies)

    def get(self, name: str, default: str | None = None) -> str | None:
        return self._cookies.get(name, default)

    def __iter__(self) -> Iterator[str]:
        return iter(self._cookies)

    def __len__(self) -> int:
        return len(self._cookies)

    def __contains__(self, name: object) -> bool:
        return name in self._cookies

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CookieJar):
            return self._cookies == other._cookies
        if isinstance(other, Mapping):
            return self._cookies == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"CookieJar({list(self._cookies)!r})"
