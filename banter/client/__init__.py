"""Banter client and HTTP transport."""

from banter.client.client import BanterClient
from banter.client.transport import HttpxTransport, Transport

__all__ = ["BanterClient", "HttpxTransport", "Transport"]
