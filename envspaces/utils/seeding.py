"""Seeded random number generators for spaces.

Every space owns its own ``numpy.random.Generator``; nothing in this module
touches process-wide random state. :func:`rs_random` returns the generator
together with the seed it was built from so callers can record the seed that
was actually used.
"""

import os
from typing import Any, Optional, Tuple

import numpy

import gymnasium.utils.seeding

from ..core.constants import SEED_MAX_VALUE, SEED_MIN_VALUE, VALID_SEED_TYPES
from .exceptions import ValidationError
from .logging import ComponentType, get_component_logger

_logger = get_component_logger("seeding", ComponentType.SEEDING)

__all__ = [
    "validate_seed",
    "get_random_seed",
    "rs_random",
]


def validate_seed(seed: Any) -> Tuple[bool, Optional[int], str]:
    """Validate a seed without normalizing it.

    Accepts None (random seed request), non-negative integers up to
    ``SEED_MAX_VALUE`` and ``numpy.integer`` values (converted to native int).
    Booleans, floats, strings and out-of-range integers are rejected.

    Args:
        seed (Any): Seed value to validate

    Returns:
        Tuple[bool, Optional[int], str]: (is_valid, validated_seed, error_message)

    Examples:
        >>> validate_seed(42)
        (True, 42, '')
        >>> validate_seed(None)
        (True, None, '')
        >>> validate_seed(-1)
        (False, None, 'Seed must be non-negative, got -1')
    """
    if seed is None:
        return (True, None, "")

    if isinstance(seed, bool) or not isinstance(seed, tuple(VALID_SEED_TYPES)):
        return (False, None, f"Seed must be integer type, got {type(seed).__name__}")

    seed = int(seed)
    if seed < SEED_MIN_VALUE:
        return (False, None, f"Seed must be non-negative, got {seed}")
    if seed > SEED_MAX_VALUE:
        return (
            False,
            None,
            f"Seed {seed} exceeds maximum {SEED_MAX_VALUE} (range: [{SEED_MIN_VALUE}, {SEED_MAX_VALUE}])",
        )
    return (True, seed, "")


def get_random_seed() -> int:
    """Draw a seed from OS entropy within ``[SEED_MIN_VALUE, SEED_MAX_VALUE]``."""
    entropy_bytes = os.urandom(4)
    random_seed = int.from_bytes(entropy_bytes, byteorder="big", signed=False)
    random_seed = SEED_MIN_VALUE + random_seed % (SEED_MAX_VALUE - SEED_MIN_VALUE + 1)
    _logger.debug(f"Generated random seed {random_seed} from system entropy")
    return random_seed


def rs_random(seed: Optional[int] = None) -> Tuple[numpy.random.Generator, int]:
    """Create a seeded generator and report the seed it was built from.

    If ``seed`` is None a seed is drawn from OS entropy, otherwise the given
    seed is used verbatim. The same seed always yields a generator producing
    the same sequence.

    Args:
        seed (Optional[int]): Seed value, or None for an entropy-derived seed

    Returns:
        Tuple[numpy.random.Generator, int]: The generator and the resolved seed

    Raises:
        ValidationError: If ``seed`` is not a valid seed
    """
    is_valid, validated_seed, error_message = validate_seed(seed)
    if not is_valid:
        _logger.error(f"Seed validation failed: {error_message}")
        raise ValidationError(
            message=f"Invalid seed for RNG creation: {error_message}",
            parameter_name="seed",
            parameter_value=seed,
            expected_format=f"integer in [{SEED_MIN_VALUE}, {SEED_MAX_VALUE}] or None",
        )

    resolved_seed = get_random_seed() if validated_seed is None else validated_seed
    np_random, _ = gymnasium.utils.seeding.np_random(resolved_seed)

    _logger.debug(f"Created seeded RNG with seed: {resolved_seed}")
    return (np_random, resolved_seed)
