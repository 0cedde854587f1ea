"""Conversation state models."""

from pydantic import BaseModel, ConfigDict, Field

from banter.protocol.schema import default_params


class ConversationState(BaseModel):
    """Everything needed to continue a conversation on the next turn.

    ``cookies`` is None until the handshake has run. ``params`` holds the
    last-known value of every protocol field and is resent, in order, on
    the next request.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    cookies: dict[str, str] | None = Field(
        default=None, description="Session cookies, None before the handshake"
    )
    params: dict[str, str] = Field(
        default_factory=default_params, description="Protocol fields to resend"
    )

    @property
    def is_initialized(self) -> bool:
        """Whether a cookie jar has been acquired."""
        return self.cookies is not None

    def snapshot(self) -> "ConversationState":
        """Return an independent copy safe to hand to another session."""
        return self.model_copy(deep=True)


class TurnResult(BaseModel):
    """Reply text together with the state it produced."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Reply text from the service")
    state: ConversationState = Field(..., description="State after the turn")
