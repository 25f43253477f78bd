"""Scalar-or-array bounds accepted by :class:`envspaces.spaces.Box`.

A bound is either a single number applied to every element
(:class:`ScalarBound`) or an already shaped array (:class:`ArrayBound`). Raw
user input is converted with :func:`as_bound`, so the shape-inference rules in
``Box`` only ever deal with these two cases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

import numpy as np

from ..utils.exceptions import ValidationError
from .types import Shape

__all__ = ["ScalarBound", "ArrayBound", "Bound", "as_bound", "materialize"]


@dataclass(frozen=True)
class ScalarBound:
    """A single value used for every element of the space."""

    value: Union[int, float]

    def __post_init__(self) -> None:
        if isinstance(self.value, (bool, np.bool_)) or not isinstance(
            self.value, (int, float, np.integer, np.floating)
        ):
            raise ValidationError(
                f"Scalar bound must be a real number, got {type(self.value).__name__}",
                parameter_name="bound",
                parameter_value=self.value,
                expected_format="int or float",
            )


@dataclass(frozen=True, eq=False)
class ArrayBound:
    """A pre-shaped array of per-element bounds."""

    array: np.ndarray

    def __post_init__(self) -> None:
        if not isinstance(self.array, np.ndarray):
            raise ValidationError(
                f"Array bound must be a numpy array, got {type(self.array).__name__}",
                parameter_name="bound",
                parameter_value=self.array,
                expected_format="numpy.ndarray",
            )
        if not _is_real_dtype(self.array.dtype):
            raise ValidationError(
                f"Array bound must have a real numeric dtype, got {self.array.dtype}",
                parameter_name="bound",
                parameter_value=self.array,
                expected_format="integer or floating array",
            )

    @property
    def shape(self) -> Shape:
        return tuple(self.array.shape)


Bound = Union[ScalarBound, ArrayBound]


def _is_real_dtype(dtype: np.dtype) -> bool:
    return np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)


def as_bound(value: Any) -> Bound:
    """Wrap raw bound input into a :data:`Bound`.

    Python and NumPy scalars (and 0-d arrays) become :class:`ScalarBound`;
    lists, tuples and arrays become :class:`ArrayBound`.

    Raises:
        ValidationError: If ``value`` is not numeric.
    """
    if isinstance(value, (ScalarBound, ArrayBound)):
        return value

    if isinstance(value, (str, bytes)) or value is None:
        raise ValidationError(
            f"Bound must be a number or an array of numbers, got {type(value).__name__}",
            parameter_name="bound",
            parameter_value=value,
            expected_format="scalar or array-like of numbers",
        )

    if np.isscalar(value):
        return ScalarBound(value)

    try:
        array = np.asarray(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"Bound could not be converted to an array: {exc}",
            parameter_name="bound",
            parameter_value=value,
            expected_format="scalar or array-like of numbers",
        ) from exc

    if array.ndim == 0:
        return ScalarBound(array.item())
    return ArrayBound(array)


def materialize(bound: Bound, shape: Shape) -> np.ndarray:
    """Return the full array for ``bound`` at ``shape``.

    An integer scalar is broadcast with the integer dtype NumPy picks for it,
    so values beyond 2**53 stay exact. Other scalars are broadcast as float64
    so ±inf survive until the boundedness flags are computed. An array bound is
    returned as-is.
    """
    if isinstance(bound, ScalarBound):
        if isinstance(bound.value, (int, np.integer)):
            fill = np.asarray(bound.value)
            # Python ints beyond uint64 come back as object arrays
            if fill.dtype != object:
                return np.full(shape, fill, dtype=fill.dtype)
        return np.full(shape, bound.value, dtype=np.float64)
    return bound.array
