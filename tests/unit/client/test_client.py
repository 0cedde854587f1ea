"""Unit tests for BanterClient."""

from unittest.mock import AsyncMock

from banter.client.client import BanterClient
from banter.client.transport import HttpxTransport
from banter.config.models.service import ServiceConfig
from banter.config.settings import Settings
from banter.conversation.models import ConversationState, TurnResult


class TestConstruction:
    """Tests for building clients."""

    async def test_default_transport(self) -> None:
        """Without a transport an HttpxTransport is created."""
        async with BanterClient() as client:
            assert isinstance(client._transport, HttpxTransport)
            assert client.session.message_url == "https://www.cleverbot.com/webservicemin"

    async def test_from_settings(self) -> None:
        """Service settings flow into sessions."""
        settings = Settings(service=ServiceConfig(base_url="http://service.test/"))
        client = BanterClient.from_settings(settings, configure_logging=False)
        try:
            session = client.new_session()
            assert session.handshake_url == "http://service.test/"
            assert session.message_url == "http://service.test/webservicemin"
        finally:
            await client.close()

    async def test_close_closes_transport(self, mock_transport: AsyncMock) -> None:
        """Leaving the context closes the transport."""
        async with BanterClient(transport=mock_transport):
            pass
        mock_transport.aclose.assert_awaited_once()


class TestConversations:
    """Tests for session handling."""

    async def test_send_message_uses_default_session(self, mock_transport: AsyncMock) -> None:
        """send_message drives the default session."""
        client = BanterClient(transport=mock_transport)

        reply = await client.send_message("Hello")

        assert reply == "Hi there."
        assert client.get_state().params["sessionid"] == "S1"

    async def test_return_state(self, mock_transport: AsyncMock) -> None:
        """return_state passes through to the session."""
        client = BanterClient(transport=mock_transport)
        result = await client.send_message("Hello", return_state=True)
        assert isinstance(result, TurnResult)

    async def test_sessions_are_isolated(self, mock_transport: AsyncMock) -> None:
        """New sessions do not see the default session's state."""
        client = BanterClient(transport=mock_transport)
        await client.send_message("Hello")

        other = client.new_session()

        assert other.is_ready is False
        assert other.get_state().params["sessionid"] == ""

    async def test_state_passthrough(self, mock_transport: AsyncMock) -> None:
        """get/set/delete state act on the default session."""
        client = BanterClient(transport=mock_transport)
        client.set_state(ConversationState(cookies={"a": "1"}))
        assert client.session.is_ready is True

        client.delete_state()
        assert client.session.is_ready is False
