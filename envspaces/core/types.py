"""Small value types shared by the spaces: the compute-device tag and shape
normalization."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Optional, Tuple, Union

import numpy as np

from ..utils.exceptions import ValidationError
from .constants import DEFAULT_DEVICE, SUPPORTED_DEVICES

Shape = Tuple[int, ...]
ShapeLike = Union[int, Iterable[int]]

__all__ = ["Device", "Shape", "ShapeLike", "normalize_shape"]


class Device(str, Enum):
    """Placement tag recorded on a space. Spaces never move data themselves."""

    CPU = "cpu"
    CUDA = "cuda"
    METAL = "metal"

    @classmethod
    def from_value(cls, value: Optional[Union["Device", str]]) -> "Device":
        if value is None:
            return cls(DEFAULT_DEVICE)
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValidationError(
            f"Unsupported device {value!r}",
            parameter_name="device",
            parameter_value=value,
            expected_format=f"one of {', '.join(SUPPORTED_DEVICES)}",
        )

    def __str__(self) -> str:
        return self.value


def normalize_shape(shape: Any) -> Shape:
    """Convert an int or iterable of ints into a tuple of non-negative ints.

    Raises:
        ValidationError: If ``shape`` is not made of non-negative integers.
    """
    if isinstance(shape, (int, np.integer)) and not isinstance(shape, bool):
        shape = (shape,)

    try:
        dims = tuple(shape)
    except TypeError as exc:
        raise ValidationError(
            f"Shape must be an int or an iterable of ints, got {type(shape).__name__}",
            parameter_name="shape",
            parameter_value=shape,
            expected_format="tuple of non-negative integers",
        ) from exc

    for dim in dims:
        if isinstance(dim, bool) or not isinstance(dim, (int, np.integer)) or dim < 0:
            raise ValidationError(
                f"Shape dimensions must be non-negative integers, got {dims}",
                parameter_name="shape",
                parameter_value=dims,
                expected_format="tuple of non-negative integers",
            )
    return tuple(int(dim) for dim in dims)
