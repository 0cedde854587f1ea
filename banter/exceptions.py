"""Exception hierarchy for the banter client.

All errors raised by this package inherit from BanterError, so callers
can catch one type at the conversation boundary.
"""


class BanterError(Exception):
    """Base exception for all banter errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ProtocolError(BanterError):
    """Raised when the service breaks the session protocol.

    The handshake response carrying no usable session cookie is the
    main case. It is fatal for the turn and never retried.
    """


class TransportError(BanterError):
    """Raised by a transport when the HTTP exchange fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EncodingError(BanterError):
    """Raised when a parameter value cannot be form-encoded."""

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key
