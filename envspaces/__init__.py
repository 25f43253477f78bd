"""Public package initializer exposing spaces, seeding helpers and registration records."""

from __future__ import annotations

from typing import Dict

from .core import (
    PACKAGE_NAME,
    PACKAGE_VERSION,
    ArrayBound,
    Bound,
    Device,
    ScalarBound,
    as_bound,
)
from .envs import EnvSpec, WrapperSpec, get_env_id, parse_env_id
from .spaces import Box, Space, short_repr
from .utils import (
    ConfigurationError,
    EnvSpacesError,
    ValidationError,
    get_component_logger,
    rs_random,
    validate_seed,
)

__version__ = "0.1.0"


def get_package_info() -> Dict[str, object]:
    """Return package metadata and the versions of the numerical stack."""
    import gymnasium
    import numpy

    return {
        "package_name": PACKAGE_NAME,
        "package_version": PACKAGE_VERSION,
        "version": __version__,
        "numpy_version": numpy.__version__,
        "gymnasium_version": gymnasium.__version__,
        "spaces": [Box.__name__],
    }


__all__ = [
    "__version__",
    "get_package_info",
    "Space",
    "Box",
    "short_repr",
    "Bound",
    "ScalarBound",
    "ArrayBound",
    "as_bound",
    "Device",
    "EnvSpec",
    "WrapperSpec",
    "parse_env_id",
    "get_env_id",
    "rs_random",
    "validate_seed",
    "get_component_logger",
    "EnvSpacesError",
    "ValidationError",
    "ConfigurationError",
]
