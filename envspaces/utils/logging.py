"""Component logger helpers for envspaces.

Library modules never configure handlers themselves; they obtain a
namespaced standard-library logger from :func:`get_component_logger` and leave
sink configuration to the application (see
:mod:`envspaces.logging.loguru_bootstrap`).
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Dict, Optional

from ..core.constants import PACKAGE_NAME
from .exceptions import ValidationError

DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DEVELOPMENT_LOG_FORMAT = (
    "%(asctime)s - %(levelname)s - %(name)s:%(lineno)d - %(message)s"
)
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

__all__ = [
    "ComponentType",
    "get_component_logger",
    "configure_logging_for_development",
    "DEFAULT_LOG_FORMAT",
]


class ComponentType(Enum):
    SPACES = "spaces"
    SEEDING = "seeding"
    REGISTRATION = "registration"
    CONFIG = "config"
    UTILS = "utils"


_logger_cache: Dict[str, logging.Logger] = {}
_cache_lock = threading.Lock()


def get_component_logger(
    component_name: str,
    component_type: ComponentType = ComponentType.UTILS,
    logger_level: Optional[str] = None,
) -> logging.Logger:
    """Create or retrieve the logger for an envspaces component.

    ``component_name`` is a free-form name; dotted module paths starting with
    the package prefix (i.e. ``__name__``) are used as they are, anything else
    is placed under ``envspaces.<component_type>.``.

    Args:
        component_name: Logger name, e.g. ``"box"`` or ``__name__``.
        component_type: Category used to build the logger namespace.
        logger_level: Optional level override such as ``"DEBUG"``.

    Returns:
        logging.Logger: Cached logger for the component.

    Raises:
        ValidationError: If ``component_type`` or ``logger_level`` is invalid.
    """
    if not isinstance(component_type, ComponentType):
        raise ValidationError(
            f"component_type must be ComponentType enum, got {type(component_type)}",
            parameter_name="component_type",
            parameter_value=component_type,
            expected_format="ComponentType member",
        )

    if component_name == PACKAGE_NAME or component_name.startswith(f"{PACKAGE_NAME}."):
        logger_name = component_name
    else:
        logger_name = f"{PACKAGE_NAME}.{component_type.value}.{component_name}"

    with _cache_lock:
        logger = _logger_cache.get(logger_name)
        if logger is None:
            logger = logging.getLogger(logger_name)
            _logger_cache[logger_name] = logger

    if logger_level is not None:
        level = logging.getLevelName(logger_level.upper())
        if not isinstance(level, int):
            raise ValidationError(
                f"Unknown logging level '{logger_level}'",
                parameter_name="logger_level",
                parameter_value=logger_level,
                expected_format="one of DEBUG, INFO, WARNING, ERROR, CRITICAL",
            )
        logger.setLevel(level)

    return logger


def configure_logging_for_development(
    level: int | str = logging.DEBUG, fmt: str = DEVELOPMENT_LOG_FORMAT
) -> logging.Logger:
    """Attach a console handler to the package root logger.

    Intended for notebooks and quick scripts; applications should prefer
    :func:`envspaces.logging.setup_logging`.
    """
    root = logging.getLogger(PACKAGE_NAME)
    if not any(getattr(h, "_envspaces_dev", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=DEFAULT_DATE_FORMAT))
        handler._envspaces_dev = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(level)
    return root
