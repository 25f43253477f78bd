"""
Pydantic configuration models for spaces and logging.

These models validate plain dictionaries (e.g. loaded from YAML) before they
are turned into runtime objects.

Example:
    >>> from envspaces.config import create_box_from_config
    >>>
    >>> box = create_box_from_config({"low": -1.0, "high": 1.0, "shape": [3]})
"""

from pathlib import Path
from typing import Any, List, Literal, Mapping, Optional, Tuple, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..core.constants import DEFAULT_DEVICE, SEED_MAX_VALUE, SEED_MIN_VALUE
from ..logging import setup_logging
from ..spaces.box import Box
from ..utils.exceptions import ConfigurationError
from ..utils.logging import ComponentType, get_component_logger

__all__ = [
    "BoxConfig",
    "LoggingConfig",
    "create_box_from_config",
    "configure_logging",
]

_logger = get_component_logger("config", ComponentType.CONFIG)

BoundValue = Union[float, List[Any]]


class BoxConfig(BaseModel):
    """Configuration for a :class:`~envspaces.spaces.Box`.

    Attributes:
        low: Lower bound, a number or a (nested) list of numbers
        high: Upper bound, a number or a (nested) list of numbers
        shape: Explicit shape; required when a bound is a number
        dtype: Name of a numpy integer or floating dtype
        seed: Seed for the space's generator (optional)
        device: Compute-device tag

    Example:
        >>> config = BoxConfig(low=0.0, high=1.0, shape=(2, 2))
        >>> config = BoxConfig(low=[-1.0, -2.0], high=[1.0, "inf"])
    """

    low: BoundValue = Field(description="Lower bound (number or nested list)")
    high: BoundValue = Field(description="Upper bound (number or nested list)")
    shape: Optional[Tuple[int, ...]] = Field(
        default=None, description="Explicit shape, required for scalar bounds"
    )
    dtype: str = Field(default="float32", description="Element dtype name")
    seed: Optional[int] = Field(
        default=None, ge=SEED_MIN_VALUE, le=SEED_MAX_VALUE, description="RNG seed"
    )
    device: Literal["cpu", "cuda", "metal"] = Field(
        default=DEFAULT_DEVICE, description="Compute-device tag"
    )

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    @field_validator("low", "high")
    @classmethod
    def validate_bound(cls, v):
        """Validate list bounds form a rectangular numeric array."""
        if isinstance(v, list):
            try:
                np.asarray(v, dtype=np.float64)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"bound must be a rectangular list of numbers: {exc}")
        return v

    @field_validator("shape")
    @classmethod
    def validate_shape(cls, v):
        if v is not None and any(dim < 0 for dim in v):
            raise ValueError(f"shape dimensions must be non-negative, got {v}")
        return v

    @field_validator("dtype")
    @classmethod
    def validate_dtype(cls, v):
        try:
            dtype = np.dtype(v)
        except TypeError as exc:
            raise ValueError(f"unknown dtype {v!r}") from exc
        if not (np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)):
            raise ValueError(f"dtype must be an integer or floating type, got {v!r}")
        return dtype.name


class LoggingConfig(BaseModel):
    """Configuration forwarded to :func:`envspaces.logging.setup_logging`."""

    level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    console: bool = True
    file_path: Optional[Path] = None
    rotation: Optional[str] = None
    retention: Optional[str] = None
    serialize: bool = False

    model_config = ConfigDict(extra="forbid")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v


def _validate_model(model_cls, config: Any, parameter: str):
    if isinstance(config, model_cls):
        return config
    if not isinstance(config, Mapping):
        raise ConfigurationError(
            f"{parameter} must be a {model_cls.__name__} or a mapping, got {type(config).__name__}",
            config_parameter=parameter,
            parameter_value=config,
        )
    try:
        return model_cls.model_validate(dict(config))
    except PydanticValidationError as exc:
        _logger.error(f"Invalid {model_cls.__name__}: {exc}")
        raise ConfigurationError(
            f"Invalid {model_cls.__name__}: {exc.error_count()} validation error(s)",
            config_parameter=parameter,
            parameter_value=dict(config),
            valid_options={name: str(field.annotation) for name, field in model_cls.model_fields.items()},
        ) from exc


def _bound_value(value: BoundValue) -> Union[float, np.ndarray]:
    return np.asarray(value, dtype=np.float64) if isinstance(value, list) else value


def create_box_from_config(config: Union[BoxConfig, Mapping[str, Any]]) -> Box:
    """Build a :class:`Box` from a :class:`BoxConfig` or a plain mapping.

    Raises:
        ConfigurationError: If the mapping does not validate.
        ValidationError: If the validated values are rejected by ``Box``
            (e.g. a scalar bound without ``shape``).
    """
    box_config = _validate_model(BoxConfig, config, "box_config")
    return Box(
        _bound_value(box_config.low),
        _bound_value(box_config.high),
        shape=box_config.shape,
        dtype=box_config.dtype,
        seed=box_config.seed,
        device=box_config.device,
    )


def configure_logging(
    config: Optional[Union[LoggingConfig, Mapping[str, Any]]] = None,
) -> LoggingConfig:
    """Apply a :class:`LoggingConfig` through loguru and return it."""
    logging_config = _validate_model(
        LoggingConfig, LoggingConfig() if config is None else config, "logging_config"
    )
    setup_logging(**logging_config.model_dump())
    return logging_config
