"""Unit tests for the wire schemas."""

from banter.protocol.schema import (
    REQUEST_FIELDS,
    RESPONSE_SCHEMA,
    SKIP,
    default_params,
    named_slots,
)


class TestRequestSchema:
    """Tests for the request field table."""

    def test_field_order(self) -> None:
        """Request fields keep their wire order."""
        assert REQUEST_FIELDS[:3] == ("stimulus", "start", "sessionid")
        assert REQUEST_FIELDS[10:12] == ("icognoid", "icognocheck")
        assert REQUEST_FIELDS[-1] == "cleanslate"
        assert len(REQUEST_FIELDS) == 23

    def test_defaults(self) -> None:
        """Fresh conversations send the documented defaults."""
        params = default_params()
        assert params["start"] == "y"
        assert params["icognoid"] == "wsf"
        assert params["fno"] == "0"
        assert params["sub"] == "Say"
        assert params["islearning"] == "1"
        assert params["cleanslate"] == "false"
        assert params["stimulus"] == ""

    def test_default_params_is_fresh_copy(self) -> None:
        """Callers can mutate their copy freely."""
        first = default_params()
        first["start"] = "n"
        assert default_params()["start"] == "y"


class TestResponseSchema:
    """Tests for the positional response table."""

    def test_length_and_reserved_slot(self) -> None:
        """24 slots with the reserved marker at index 11."""
        assert len(RESPONSE_SCHEMA) == 24
        assert RESPONSE_SCHEMA[11] is SKIP
        assert [i for i, slot in enumerate(RESPONSE_SCHEMA) if slot is SKIP] == [11]

    def test_anchor_positions(self) -> None:
        """Known fields sit at their wire positions."""
        assert RESPONSE_SCHEMA[0] == "message"
        assert RESPONSE_SCHEMA[1] == "sessionid"
        assert RESPONSE_SCHEMA[10] == "prevref"
        assert RESPONSE_SCHEMA[12] == "emotionalhistory"
        assert RESPONSE_SCHEMA[23] == "divert"

    def test_named_slots_excludes_reserved(self) -> None:
        """named_slots lists the 23 named fields."""
        names = named_slots()
        assert len(names) == 23
        assert SKIP not in names
