"""Shared test fixtures for the banter test suite."""

from collections.abc import Callable, Generator
from pathlib import Path
from unittest.mock import AsyncMock

import httpx
import pytest

from banter.protocol.schema import RESPONSE_SCHEMA, SKIP


def make_reply_body(**fields: str) -> str:
    """Build a \\r-delimited response body from named response fields."""
    values = []
    for slot in RESPONSE_SCHEMA:
        if slot is SKIP:
            values.append(fields.get("reserved", ""))
        else:
            values.append(fields.get(slot, ""))
    return "\r".join(values)


@pytest.fixture
def reply_body() -> Callable[..., str]:
    """Factory building response bodies from named fields."""
    return make_reply_body


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    from banter.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def handshake_response() -> httpx.Response:
    """Handshake response setting two session cookies."""
    return httpx.Response(
        200,
        headers=[
            ("set-cookie", "XVIS=TE1939AFFIAGAYQZ; Path=/; Expires=Wed, 01 Jan 2031 00:00:00 GMT"),
            ("set-cookie", "CBALT=1~hello; Path=/; HttpOnly"),
        ],
        text="<html></html>",
    )


@pytest.fixture
def reply_response() -> httpx.Response:
    """Turn response with a reply and a session id."""
    return httpx.Response(
        200,
        text=make_reply_body(message="Hi there.", sessionid="S1", prevref="R1"),
    )


@pytest.fixture
def mock_transport(
    handshake_response: httpx.Response,
    reply_response: httpx.Response,
) -> AsyncMock:
    """Transport double returning canned handshake and turn responses."""
    transport = AsyncMock()
    transport.get = AsyncMock(return_value=handshake_response)
    transport.post = AsyncMock(return_value=reply_response)
    transport.aclose = AsyncMock()
    return transport
