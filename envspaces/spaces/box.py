"""Implementation of a space that represents closed boxes in euclidean space."""

from __future__ import annotations

from typing import Any, Optional, Union

import numpy as np

from ..core.bounds import ArrayBound, Bound, ScalarBound, as_bound, materialize
from ..core.constants import BOUNDED_MANNERS, DEFAULT_DTYPE, EMPTY_REPR
from ..core.types import Device, Shape, normalize_shape
from ..utils.exceptions import ValidationError
from ..utils.logging import ComponentType, get_component_logger
from .space import SeedLike, Space

__all__ = ["Box", "short_repr"]

_logger = get_component_logger("box", ComponentType.SPACES)


def _format_scalar(value: Any) -> str:
    if isinstance(value, np.floating):
        return np.format_float_positional(value, trim="-")
    return str(value)


def short_repr(arr: np.ndarray) -> str:
    """Short representation of a bound array.

    Empty arrays render as ``[]`` and uniform arrays as ``[<value>]`` (so
    ``[-1., -1., -1.]`` becomes ``[-1]``); anything else falls back to the
    full numpy rendering.
    """
    arr = np.asarray(arr)
    if arr.size == 0:
        return EMPTY_REPR

    flat = arr.ravel()
    low, high = flat.min(), flat.max()
    if low == high:
        return f"[{_format_scalar(low)}]"
    return str(arr)


def _validate_dtype(dtype: Any) -> np.dtype:
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        _logger.error(f"Invalid dtype {dtype!r}")
        raise ValidationError(
            f"Invalid dtype {dtype!r}",
            parameter_name="dtype",
            parameter_value=dtype,
            expected_format="numpy integer or floating dtype",
        ) from exc

    if not (np.issubdtype(resolved, np.integer) or np.issubdtype(resolved, np.floating)):
        _logger.error(f"Non-numeric Box dtype {resolved}")
        raise ValidationError(
            f"Box dtype must be an integer or floating type, got {resolved}",
            parameter_name="dtype",
            parameter_value=dtype,
            expected_format="numpy integer or floating dtype",
        )
    return resolved


def _resolve_shape(low: Bound, high: Bound, shape: Optional[Any]) -> Shape:
    if shape is not None:
        resolved = normalize_shape(shape)
        for name, bound in (("low", low), ("high", high)):
            if isinstance(bound, ArrayBound) and bound.shape != resolved:
                _logger.error(f"{name}.shape {bound.shape} does not match shape {resolved}")
                raise ValidationError(
                    f"{name}.shape {bound.shape} does not match the provided shape {resolved}",
                    parameter_name=name,
                    parameter_value=bound.array,
                    expected_format=f"scalar or array of shape {resolved}",
                )
        return resolved

    if isinstance(low, ScalarBound) or isinstance(high, ScalarBound):
        _logger.error("Scalar bound given without an explicit shape")
        raise ValidationError(
            "low/high must be an array when shape is not provided",
            parameter_name="low" if isinstance(low, ScalarBound) else "high",
            parameter_value=low.value if isinstance(low, ScalarBound) else high.value,
            expected_format="array-like bound, or pass shape explicitly",
        )

    if low.shape != high.shape:
        _logger.error(f"Mismatched bound shapes: low {low.shape}, high {high.shape}")
        raise ValidationError(
            "low and high must have the same shape",
            parameter_name="high",
            parameter_value=high.array,
            expected_format=f"array of shape {low.shape}",
            context={"low_shape": low.shape, "high_shape": high.shape},
        )
    return low.shape


def _clamp_to_dtype(arr: np.ndarray, dtype: np.dtype, name: str) -> np.ndarray:
    """Cast ``arr`` to ``dtype``, saturating values outside the dtype's range.

    ±inf become the dtype's min/max. Integer targets reject fractional values
    instead of truncating them.
    """
    if np.issubdtype(dtype, np.floating):
        finfo = np.finfo(dtype)
        work = arr.astype(np.promote_types(arr.dtype, dtype))
        return np.array(np.clip(work, finfo.min, finfo.max), dtype=dtype)

    info = np.iinfo(dtype)
    if np.issubdtype(arr.dtype, np.integer):
        # Exact integer clip; both limits fit the source dtype
        src = np.iinfo(arr.dtype)
        lo, hi = max(src.min, info.min), min(src.max, info.max)
        return np.array(np.clip(arr, lo, hi), dtype=dtype)

    finite = arr[np.isfinite(arr)]
    if not np.array_equal(finite, np.floor(finite)):
        _logger.error(f"Fractional {name} bound for integer dtype {dtype}")
        raise ValidationError(
            f"{name} must hold whole numbers for integer dtype {dtype}",
            parameter_name=name,
            parameter_value=arr,
            expected_format="integral values or +/-inf",
        )

    below = arr <= float(info.min)
    above = arr >= float(info.max)
    inside = ~(below | above)
    out = np.empty(arr.shape, dtype=dtype)
    out[below] = info.min
    out[above] = info.max
    out[inside] = arr[inside]
    return out


class Box(Space[np.ndarray]):
    r"""A (possibly unbounded) box in :math:`\mathbb{R}^n`.

    A Box is the Cartesian product of n closed intervals, each of the form
    :math:`[a, b]`, :math:`(-\infty, b]`, :math:`[a, \infty)` or
    :math:`(-\infty, \infty)`.

    There are two common use cases:

    * Identical bound for each dimension::

        >>> Box(low=-1.0, high=2.0, shape=(3, 4), dtype=np.float32)
        Box([-1], [2], (3, 4), float32)

    * Independent bound for each dimension::

        >>> Box(low=np.array([-1.0, -2.0]), high=np.array([2.0, 4.0]), dtype=np.float32)
        Box([-1. -2.], [2. 4.], (2,), float32)

    Infinite bounds are recorded in :attr:`bounded_below` /
    :attr:`bounded_above` and then replaced by the dtype's representable
    min/max, so :attr:`low` and :attr:`high` never contain infinities.
    """

    def __init__(
        self,
        low: Union[float, int, np.ndarray, Any],
        high: Union[float, int, np.ndarray, Any],
        shape: Optional[Any] = None,
        dtype: Any = DEFAULT_DTYPE,
        seed: SeedLike = None,
        device: Optional[Union[Device, str]] = None,
    ):
        """Constructor of :class:`Box`.

        Args:
            low: Lower bound, a scalar applied to every element or an array.
            high: Upper bound, a scalar applied to every element or an array.
            shape: Shape of the space. Required when either bound is a scalar;
                otherwise inferred from the (identically shaped) arrays.
            dtype: Integer or floating element type.
            seed: Integer seed, an existing ``numpy.random.Generator``, or None.
            device: Compute-device tag, CPU by default.

        Raises:
            ValidationError: If a scalar bound is given without ``shape``, the
                bound shapes disagree, a bound contains NaN, ``dtype`` is not
                numeric, or an integer ``dtype`` is given fractional bounds.
        """
        resolved_dtype = _validate_dtype(dtype)
        low_bound = as_bound(low)
        high_bound = as_bound(high)
        resolved_shape = _resolve_shape(low_bound, high_bound, shape)

        low_arr = materialize(low_bound, resolved_shape)
        high_arr = materialize(high_bound, resolved_shape)
        for name, arr in (("low", low_arr), ("high", high_arr)):
            if np.issubdtype(arr.dtype, np.floating) and np.isnan(arr).any():
                _logger.error(f"NaN in {name} bound")
                raise ValidationError(
                    f"{name} must not contain NaN",
                    parameter_name=name,
                    parameter_value=arr,
                    expected_format="real numbers or +/-inf",
                )

        # Must run before clamping, which removes the infinities.
        self._bounded_below = np.array(-np.inf < low_arr, dtype=bool)
        self._bounded_above = np.array(np.inf > high_arr, dtype=bool)

        self._low = _clamp_to_dtype(low_arr, resolved_dtype, "low")
        self._high = _clamp_to_dtype(high_arr, resolved_dtype, "high")
        for arr in (self._low, self._high, self._bounded_below, self._bounded_above):
            arr.flags.writeable = False

        self.low_repr = short_repr(self._low)
        self.high_repr = short_repr(self._high)

        super().__init__(resolved_shape, resolved_dtype, seed, device)
        _logger.debug(
            f"Created Box(low={self.low_repr}, high={self.high_repr}, "
            f"shape={self.shape}, dtype={self.dtype}, device={self.device})"
        )

    @property
    def shape(self) -> Shape:
        """Has stricter type than the base class: a Box always has a shape."""
        return self._shape  # type: ignore[return-value]

    @property
    def low(self) -> np.ndarray:
        return self._low

    @property
    def high(self) -> np.ndarray:
        return self._high

    @property
    def bounded_below(self) -> np.ndarray:
        """Per-element flags: True where the original lower bound was finite."""
        return self._bounded_below

    @property
    def bounded_above(self) -> np.ndarray:
        """Per-element flags: True where the original upper bound was finite."""
        return self._bounded_above

    def is_bounded(self, manner: str = "both") -> bool:
        """Check whether the box is bounded in some sense.

        Args:
            manner: One of ``"both"``, ``"below"`` or ``"above"``.

        Raises:
            ValidationError: If ``manner`` is not one of the above.
        """
        below = bool(np.all(self._bounded_below))
        above = bool(np.all(self._bounded_above))
        if manner == "both":
            return below and above
        if manner == "below":
            return below
        if manner == "above":
            return above
        _logger.error(f"Unknown boundedness manner {manner!r}")
        raise ValidationError(
            f"manner is not in {{'below', 'above', 'both'}}, actual value: {manner}",
            parameter_name="manner",
            parameter_value=manner,
            expected_format=f"one of {', '.join(BOUNDED_MANNERS)}",
        )

    def is_flattenable(self) -> bool:
        return True

    def sample(self, mask: Optional[Any] = None) -> np.ndarray:
        raise NotImplementedError("Box.sample is not implemented")

    def contains(self, x: Any) -> bool:
        raise NotImplementedError("Box.contains is not implemented")

    def __repr__(self) -> str:
        return f"Box({self.low_repr}, {self.high_repr}, {self.shape}, {self.dtype})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Box)
            and self.shape == other.shape
            and self.dtype == other.dtype
            and np.array_equal(self.low, other.low)
            and np.array_equal(self.high, other.high)
        )
