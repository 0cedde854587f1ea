"""Wire schemas for the webservicemin protocol.

Both tables are contracts with a server we do not control. Field order
matters: the request order fixes where the checksum slice lands and the
response order is the only thing identifying each returned field.
"""

from enum import Enum
from typing import Final


class Reserved(Enum):
    """Marker for response slots that carry no named field."""

    SKIP = "skip"


SKIP: Final = Reserved.SKIP

ResponseSlot = str | Reserved

# Request fields in wire order, with the values sent on a fresh conversation
REQUEST_DEFAULTS: Final[tuple[tuple[str, str], ...]] = (
    ("stimulus", ""),
    ("start", "y"),
    ("sessionid", ""),
    ("vText8", ""),
    ("vText7", ""),
    ("vText6", ""),
    ("vText5", ""),
    ("vText4", ""),
    ("vText3", ""),
    ("vText2", ""),
    ("icognoid", "wsf"),
    ("icognocheck", ""),
    ("fno", "0"),
    ("prevref", ""),
    ("emotionaloutput", ""),
    ("emotionalhistory", ""),
    ("asbotname", ""),
    ("ttsvoice", ""),
    ("typing", ""),
    ("lineref", ""),
    ("sub", "Say"),
    ("islearning", "1"),
    ("cleanslate", "false"),
)

REQUEST_FIELDS: Final[tuple[str, ...]] = tuple(name for name, _ in REQUEST_DEFAULTS)

STIMULUS_FIELD: Final = "stimulus"
CHECKSUM_FIELD: Final = "icognocheck"

# Positional layout of the \r-delimited response body
RESPONSE_SCHEMA: Final[tuple[ResponseSlot, ...]] = (
    "message",
    "sessionid",
    "logurl",
    "vText8",
    "vText7",
    "vText6",
    "vText5",
    "vText4",
    "vText3",
    "vText2",
    "prevref",
    SKIP,
    "emotionalhistory",
    "ttsLocMP3",
    "ttsLocTXT",
    "ttsLocTXT3",
    "ttsText",
    "lineref",
    "lineURL",
    "linePOST",
    "lineChoices",
    "lineChoicesAbbrev",
    "typingData",
    "divert",
)

RESPONSE_DELIMITER: Final = "\r"


def default_params() -> dict[str, str]:
    """Return a fresh copy of the request defaults in wire order."""
    return dict(REQUEST_DEFAULTS)


def named_slots(schema: tuple[ResponseSlot, ...] = RESPONSE_SCHEMA) -> list[str]:
    """Return the field names of a response schema, skipping reserved slots."""
    return [slot for slot in schema if slot is not SKIP]
