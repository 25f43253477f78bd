"""Application-side log configuration built on loguru."""

from .loguru_bootstrap import InterceptHandler, get_logger, setup_logging

__all__ = ["InterceptHandler", "setup_logging", "get_logger"]
