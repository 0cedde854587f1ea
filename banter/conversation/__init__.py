"""Conversation state and the session that drives each turn."""

from banter.conversation.models import ConversationState, TurnResult
from banter.conversation.session import ConversationSession, OutboundRequest

__all__ = ["ConversationSession", "ConversationState", "OutboundRequest", "TurnResult"]
