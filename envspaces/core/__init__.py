"""Core constants and value types for envspaces."""

from .bounds import ArrayBound, Bound, ScalarBound, as_bound, materialize
from .constants import (
    DEFAULT_DEVICE,
    DEFAULT_DTYPE,
    PACKAGE_NAME,
    PACKAGE_VERSION,
    SEED_MAX_VALUE,
    SEED_MIN_VALUE,
)
from .types import Device, Shape, ShapeLike, normalize_shape

__all__ = [
    "ArrayBound",
    "Bound",
    "ScalarBound",
    "as_bound",
    "materialize",
    "Device",
    "Shape",
    "ShapeLike",
    "normalize_shape",
    "DEFAULT_DEVICE",
    "DEFAULT_DTYPE",
    "PACKAGE_NAME",
    "PACKAGE_VERSION",
    "SEED_MAX_VALUE",
    "SEED_MIN_VALUE",
]
