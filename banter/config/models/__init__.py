"""Configuration section models."""

from banter.config.models.observability import LoggingConfig, ObservabilityConfig
from banter.config.models.service import ServiceConfig

__all__ = ["LoggingConfig", "ObservabilityConfig", "ServiceConfig"]
