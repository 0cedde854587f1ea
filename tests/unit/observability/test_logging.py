"""Tests for structured logging."""

import pytest
import structlog

from banter.observability.logging import PIIRedactor, get_logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_json_format(self) -> None:
        """Should configure JSON format for production."""
        setup_logging(level="INFO", format="json", redact_pii=False)
        get_logger("test").info("test_message")

    def test_setup_console_format(self) -> None:
        """Should configure console format for development."""
        setup_logging(level="DEBUG", format="console", redact_pii=False)
        get_logger("test").debug("test_message")

    def test_json_output_redacted(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Cookies never reach the rendered output."""
        setup_logging(level="INFO", format="json", redact_pii=True)
        get_logger("test").info("turn_completed", cookies={"XVIS": "SECRET"})

        err = capsys.readouterr().err
        assert "turn_completed" in err
        assert "SECRET" not in err

    def test_level_filtering(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Events below the configured level are dropped."""
        setup_logging(level="WARNING", format="json", redact_pii=False)
        get_logger("test").info("quiet_event")

        assert "quiet_event" not in capsys.readouterr().err

    def teardown_method(self) -> None:
        structlog.reset_defaults()


class TestPIIRedactor:
    """Tests for PII redaction."""

    @pytest.fixture
    def redactor(self) -> PIIRedactor:
        return PIIRedactor()

    @pytest.mark.parametrize("key", ["cookie", "cookies", "sessionid", "icognocheck", "stimulus"])
    def test_redacts_session_keys(self, redactor: PIIRedactor, key: str) -> None:
        """Protocol secrets and user text are masked by key."""
        result = redactor(None, None, {key: "value", "other": "ok"})  # type: ignore[arg-type]
        assert result[key] == "[REDACTED]"
        assert result["other"] == "ok"

    def test_key_match_case_insensitive(self, redactor: PIIRedactor) -> None:
        """Header-style capitalisation is still redacted."""
        result = redactor(None, None, {"Cookie": "a=1"})  # type: ignore[arg-type]
        assert result["Cookie"] == "[REDACTED]"

    def test_redacts_email_pattern_in_string_value(self, redactor: PIIRedactor) -> None:
        """Should redact email patterns found in string values."""
        result = redactor(None, None, {"reply": "mail user@example.com"})  # type: ignore[arg-type]
        assert "[EMAIL]" in result["reply"]
        assert "user@example.com" not in result["reply"]

    def test_redacts_phone_pattern_in_string_value(self, redactor: PIIRedactor) -> None:
        """Should redact phone patterns found in string values."""
        result = redactor(None, None, {"reply": "Call +1-555-123-4567 now"})  # type: ignore[arg-type]
        assert "[PHONE]" in result["reply"]

    def test_handles_nested_dicts(self, redactor: PIIRedactor) -> None:
        """Should handle nested dictionaries."""
        event = {"request": {"headers": {"cookie": "a=1", "content-length": "10"}}}
        result = redactor(None, None, event)  # type: ignore[arg-type]
        assert result["request"]["headers"]["cookie"] == "[REDACTED]"
        assert result["request"]["headers"]["content-length"] == "10"

    def test_handles_lists(self, redactor: PIIRedactor) -> None:
        """Should redact inside lists."""
        result = redactor(None, None, {"items": ["a@b.co", {"token": "x"}, 3]})  # type: ignore[arg-type]
        assert result["items"][0] == "[EMAIL]"
        assert result["items"][1]["token"] == "[REDACTED]"
        assert result["items"][2] == 3
