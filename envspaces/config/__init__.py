"""Validated configuration models for envspaces."""

from .models import BoxConfig, LoggingConfig, configure_logging, create_box_from_config

__all__ = [
    "BoxConfig",
    "LoggingConfig",
    "create_box_from_config",
    "configure_logging",
]
