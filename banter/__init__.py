"""banter: async client for the cleverbot webservicemin protocol.

Usage:
    from banter import BanterClient

    async with BanterClient.from_settings() as client:
        reply = await client.send_message("Hello!")
        state = client.get_state()
"""

from banter.client import BanterClient, HttpxTransport
from banter.conversation import ConversationSession, ConversationState, TurnResult
from banter.exceptions import BanterError, EncodingError, ProtocolError, TransportError

__all__ = [
    "BanterClient",
    "BanterError",
    "ConversationSession",
    "ConversationState",
    "EncodingError",
    "HttpxTransport",
    "ProtocolError",
    "TransportError",
    "TurnResult",
]
