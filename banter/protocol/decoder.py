"""Positional decoding of webservicemin responses."""

from typing import TYPE_CHECKING

from banter.protocol.schema import (
    RESPONSE_DELIMITER,
    RESPONSE_SCHEMA,
    SKIP,
    ResponseSlot,
)

if TYPE_CHECKING:
    from banter.conversation.models import ConversationState


def split_fields(body: str) -> list[str]:
    """Split a response body into its positional fields."""
    return body.split(RESPONSE_DELIMITER)


def decode_response(
    body: str,
    state: "ConversationState",
    schema: tuple[ResponseSlot, ...] = RESPONSE_SCHEMA,
) -> tuple[str, "ConversationState"]:
    """Fold a response body into conversation state.

    Field ``i`` is stored under ``schema[i]``. Reserved slots are never
    assigned, fields past the end of the schema are ignored, and named
    slots the body does not reach keep their previous value (or ``""`` if
    they never had one). The input state is left untouched.

    Args:
        body: Raw response text
        state: State the request was built from
        schema: Positional field layout

    Returns:
        Tuple of (reply text, updated state)
    """
    fields = split_fields(body)
    params = dict(state.params)

    for slot, value in zip(schema, fields):
        if slot is SKIP:
            continue
        params[slot] = value

    for slot in schema:
        if slot is not SKIP:
            params.setdefault(slot, "")

    updated = state.model_copy(update={"params": params}, deep=True)
    return fields[0], updated
