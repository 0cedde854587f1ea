"""Conversation session: one conversation, one turn at a time.

A session owns a ConversationState and drives the protocol for each
turn: lazy cookie handshake, request encoding with checksum, POST, and
positional decoding of the reply back into state.

Usage:
    async with HttpxTransport() as transport:
        session = ConversationSession.create(transport)
        reply = await session.send_message("Hello")
        saved = session.get_state()

        # later, possibly in another session instance
        other = ConversationSession.create(transport, state=saved)
        result = await other.send_message("Still there?", return_state=True)
"""

from pydantic import BaseModel, ConfigDict, Field

from banter.client.transport import Transport
from banter.config.models.service import ServiceConfig
from banter.conversation.models import ConversationState, TurnResult
from banter.exceptions import ProtocolError
from banter.observability.logging import get_logger
from banter.protocol.checksum import compute_checksum
from banter.protocol.codec import encode_params
from banter.protocol.cookies import CookieJar
from banter.protocol.decoder import decode_response
from banter.protocol.schema import CHECKSUM_FIELD, STIMULUS_FIELD

logger = get_logger(__name__)

_SERVICE_FIELDS = ServiceConfig.model_fields

DEFAULT_BASE_URL: str = _SERVICE_FIELDS["base_url"].default
DEFAULT_HANDSHAKE_PATH: str = _SERVICE_FIELDS["handshake_path"].default
DEFAULT_MESSAGE_PATH: str = _SERVICE_FIELDS["message_path"].default


class OutboundRequest(BaseModel):
    """A fully built turn request, ready to hand to the transport."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Message endpoint URL")
    params: dict[str, str] = Field(..., description="Parameters in wire order")
    body: str = Field(..., description="Form-encoded body")
    headers: dict[str, str] = Field(..., description="Request headers")


class ConversationSession:
    """Protocol driver for a single conversation.

    A session starts Uninitialized (no cookies). The first send performs
    the handshake once and then proceeds; every successful turn replaces
    the session's params with the decoded response. Turns on one session
    must be awaited one after another.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        base_url: str = DEFAULT_BASE_URL,
        handshake_path: str = DEFAULT_HANDSHAKE_PATH,
        message_path: str = DEFAULT_MESSAGE_PATH,
        state: ConversationState | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            transport: HTTP transport for the handshake and turns
            base_url: Service root URL
            handshake_path: Path fetched to obtain session cookies
            message_path: Path turns are POSTed to
            state: State to resume from (copied)
        """
        self._transport = transport
        self.base_url = base_url.rstrip("/")
        self.handshake_url = f"{self.base_url}{handshake_path}"
        self.message_url = f"{self.base_url}{message_path}"
        self._state = state.snapshot() if state is not None else ConversationState()

    @classmethod
    def create(
        cls,
        transport: Transport,
        state: ConversationState | None = None,
        **kwargs,
    ) -> "ConversationSession":
        """Create a session, optionally resuming from exported state."""
        return cls(transport, state=state, **kwargs)

    @property
    def is_ready(self) -> bool:
        """Whether the session holds cookies and can send turns."""
        return self._state.is_initialized

    def get_state(self) -> ConversationState:
        """Return a copy of the current cookies and params."""
        return self._state.snapshot()

    def set_state(self, state: ConversationState | dict) -> None:
        """Replace the session's state with a copy of ``state``.

        Accepts a ConversationState or its dict form. Missing params fall
        back to the request defaults; missing cookies leave the session
        Uninitialized.
        """
        if isinstance(state, dict):
            state = ConversationState.model_validate(state)
        self._state = state.snapshot()

    def delete_state(self) -> None:
        """Discard cookies and reset params to the request defaults."""
        self._state = ConversationState()
        logger.info("session_state_reset")

    def reset_cookies(self) -> None:
        """Discard cookies but keep params, forcing a new handshake."""
        self._state = self._state.model_copy(update={"cookies": None}, deep=True)
        logger.info("session_cookies_reset")

    def build_request(self, message: str) -> OutboundRequest:
        """Build the request for a turn without sending it.

        The checksum is computed over the encoded params with the new
        stimulus in place, then stored as icognocheck before the final
        encoding.

        Raises:
            ProtocolError: If the session has no cookies yet
            EncodingError: If a param value cannot be encoded
        """
        if self._state.cookies is None:
            raise ProtocolError("session has no cookies; send a message to bootstrap")

        params = dict(self._state.params)
        params[STIMULUS_FIELD] = message
        params[CHECKSUM_FIELD] = compute_checksum(params)
        body = encode_params(params)

        headers = {
            "Cache-Control": "no-cache",
            "Content-Length": str(len(body.encode("utf-8"))),
            "Content-Type": "application/x-www-form-urlencoded",
            "Cookie": CookieJar(self._state.cookies).serialize(),
        }
        return OutboundRequest(
            url=self.message_url,
            params=params,
            body=body,
            headers=headers,
        )

    async def _bootstrap(self) -> None:
        jar = await CookieJar.bootstrap(self._transport, self.handshake_url)
        self._state = self._state.model_copy(update={"cookies": jar.as_dict()}, deep=True)

    async def send_message(
        self,
        message: str,
        state: ConversationState | None = None,
        return_state: bool = False,
    ) -> str | TurnResult:
        """Send one message and return the reply.

        Args:
            message: Text to send as the stimulus
            state: State to adopt before sending (copied)
            return_state: Return a TurnResult with the new state instead of
                only the reply text

        Returns:
            Reply text, or TurnResult when return_state is True

        Raises:
            ProtocolError: If the handshake yields no session cookie
            TransportError: If the handshake or the POST fails
            EncodingError: If a param value cannot be encoded
        """
        if state is not None:
            self.set_state(state)

        if not self.is_ready:
            await self._bootstrap()

        request = self.build_request(message)
        logger.debug(
            "turn_request_built",
            url=request.url,
            content_length=request.headers["Content-Length"],
            icognocheck=request.params[CHECKSUM_FIELD],
        )

        response = await self._transport.post(
            request.url,
            content=request.body.encode("utf-8"),
            headers=request.headers,
        )

        reply, updated = decode_response(response.text, self._state)
        self._state = updated
        logger.info(
            "turn_completed",
            reply_length=len(reply),
            sessionid=updated.params.get("sessionid", ""),
        )

        if return_state:
            return TurnResult(message=reply, state=self.get_state())
        return reply

