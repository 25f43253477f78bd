"""
Utility package for envspaces: exception hierarchy, seeded random number
generators and component loggers.
"""

from .exceptions import (
    ConfigurationError,
    EnvSpacesError,
    ErrorSeverity,
    ValidationError,
    format_error_details,
)
from .logging import (
    ComponentType,
    configure_logging_for_development,
    get_component_logger,
)
from .seeding import get_random_seed, rs_random, validate_seed

__all__ = [
    "EnvSpacesError",
    "ValidationError",
    "ConfigurationError",
    "ErrorSeverity",
    "format_error_details",
    "ComponentType",
    "get_component_logger",
    "configure_logging_for_development",
    "validate_seed",
    "get_random_seed",
    "rs_random",
]
