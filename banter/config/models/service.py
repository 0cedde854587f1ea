"""Remote service configuration models."""

from pydantic import BaseModel, Field, field_validator


class ServiceConfig(BaseModel):
    """Where the conversational service lives and how to reach it."""

    base_url: str = Field(
        default="https://www.cleverbot.com",
        description="Service root URL",
    )
    handshake_path: str = Field(
        default="/",
        description="Path fetched to obtain session cookies",
    )
    message_path: str = Field(
        default="/webservicemin",
        description="Path each turn is POSTed to",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="Request timeout in seconds",
    )
    user_agent: str = Field(
        default="banter/0.1",
        description="User-Agent header sent with every request",
    )

    @field_validator("handshake_path", "message_path")
    @classmethod
    def ensure_leading_slash(cls, value: str) -> str:
        """Paths are appended to base_url, so they must start with '/'."""
        if not value.startswith("/"):
            return f"/{value}"
        return value
