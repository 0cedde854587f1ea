"""Banter client.

Owns one HTTP transport and hands out independent conversation sessions.

Usage:
    from banter.client import BanterClient

    async with BanterClient.from_settings() as client:
        reply = await client.send_message("Hello!")

        # A second, isolated conversation on the same connection pool
        other = client.new_session()
        await other.send_message("Hi there")
"""

from banter.client.transport import HttpxTransport, Transport
from banter.config import get_settings
from banter.config.models.service import ServiceConfig
from banter.config.settings import Settings
from banter.conversation.models import ConversationState, TurnResult
from banter.conversation.session import ConversationSession
from banter.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


class BanterClient:
    """Async client for the conversational service.

    Attributes:
        service: Service endpoints and timeouts
        session: Default conversation used by send_message
    """

    def __init__(
        self,
        service: ServiceConfig | None = None,
        transport: Transport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            service: Service configuration, model defaults when omitted
            transport: Transport to use instead of an HttpxTransport
        """
        self.service = service or ServiceConfig()
        self._transport = transport or HttpxTransport(
            timeout=self.service.timeout,
            user_agent=self.service.user_agent,
        )
        self.session = self.new_session()

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        configure_logging: bool = True,
    ) -> "BanterClient":
        """Create a client from loaded configuration.

        Args:
            settings: Settings to use, get_settings() when omitted
            configure_logging: Apply the observability.logging section

        Returns:
            Configured BanterClient
        """
        settings = settings or get_settings()
        if configure_logging:
            log_config = settings.observability.logging
            setup_logging(
                level=log_config.level,
                format=log_config.format,
                redact_pii=log_config.redact_pii,
            )
        logger.debug("client_created", base_url=settings.service.base_url)
        return cls(service=settings.service)

    async def __aenter__(self) -> "BanterClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the transport."""
        await self._transport.aclose()

    def new_session(self, state: ConversationState | None = None) -> ConversationSession:
        """Start an independent conversation, optionally resuming ``state``."""
        return ConversationSession.create(
            self._transport,
            state=state,
            base_url=self.service.base_url,
            handshake_path=self.service.handshake_path,
            message_path=self.service.message_path,
        )

    async def send_message(
        self,
        message: str,
        state: ConversationState | None = None,
        return_state: bool = False,
    ) -> str | TurnResult:
        """Send a message on the default session."""
        return await self.session.send_message(message, state=state, return_state=return_state)

    def get_state(self) -> ConversationState:
        return self.session.get_state()

    def set_state(self, state: ConversationState | dict) -> None:
        self.session.set_state(state)

    def delete_state(self) -> None:
        self.session.delete_state()
