"""Base class for observation and action spaces.

Spaces define the format of valid actions and observations. They:

* describe how to interact with an environment, i.e. what actions need to look
  like and what observations will look like,
* report whether their elements can be losslessly flattened into a numeric
  vector for learning code,
* provide a method to sample random elements, useful for exploration and
  debugging.

Each space owns its random number generator. Seeding one space never affects
another, and no process-wide random state is used.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar, Union

import numpy as np

from ..core.types import Device, Shape, normalize_shape
from ..utils.exceptions import ValidationError
from ..utils.logging import ComponentType, get_component_logger
from ..utils.seeding import rs_random

T_cov = TypeVar("T_cov", covariant=True)

SeedLike = Union[int, np.integer, np.random.Generator, None]

__all__ = ["Space", "SeedLike"]

_logger = get_component_logger("space", ComponentType.SPACES)


class Space(ABC, Generic[T_cov]):
    """Abstract space with sampling, seeding and membership operations.

    Args:
        shape: Shape of the space elements, if the space has one.
        dtype: Element dtype, if the space has one.
        seed: Integer seed, an existing ``numpy.random.Generator`` to adopt,
            or None to seed from OS entropy.
        device: Compute-device tag; defaults to CPU.
    """

    def __init__(
        self,
        shape: Optional[Any] = None,
        dtype: Optional[Any] = None,
        seed: SeedLike = None,
        device: Optional[Union[Device, str]] = None,
    ):
        self._shape: Optional[Shape] = None if shape is None else normalize_shape(shape)
        self.dtype = None if dtype is None else np.dtype(dtype)
        self.device = Device.from_value(device)
        self._np_random: np.random.Generator
        self._np_random_seed: Optional[int]
        self._np_random, self._np_random_seed = self._resolve_rng(seed)

    @staticmethod
    def _resolve_rng(seed: SeedLike):
        if isinstance(seed, np.random.Generator):
            return seed, None
        if isinstance(seed, np.random.RandomState):
            _logger.error("Rejected legacy RandomState seed")
            raise ValidationError(
                "Legacy numpy.random.RandomState is not supported, pass a Generator",
                parameter_name="seed",
                parameter_value=seed,
                expected_format="int, numpy.random.Generator or None",
            )
        return rs_random(seed)

    @property
    def shape(self) -> Optional[Shape]:
        return self._shape

    @property
    def np_random(self) -> np.random.Generator:
        """The generator used by :meth:`sample`."""
        return self._np_random

    @property
    def np_random_seed(self) -> Optional[int]:
        """Seed of the current generator, or None when a generator was adopted."""
        return self._np_random_seed

    @abstractmethod
    def is_flattenable(self) -> bool:
        """Whether elements can be losslessly mapped to a flat numeric vector."""

    @abstractmethod
    def sample(self, mask: Optional[Any] = None) -> T_cov:
        """Randomly sample an element of this space.

        Args:
            mask: Optional space-specific constraint on the sampled element.
        """

    def seed(self, seed: Optional[int] = None) -> List[int]:
        """Replace the generator with a fresh one built from ``seed``.

        The old generator is discarded, so later samples depend only on the
        new seed.

        Returns:
            list[int]: The seeds that were applied.
        """
        self._np_random, self._np_random_seed = rs_random(seed)
        _logger.debug(f"Reseeded {type(self).__name__} with seed {self._np_random_seed}")
        return [self._np_random_seed]

    @abstractmethod
    def contains(self, x: Any) -> bool:
        """Return True if ``x`` is a valid member of this space."""

    def __contains__(self, x: Any) -> bool:
        return self.contains(x)
