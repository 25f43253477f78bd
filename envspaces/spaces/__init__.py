"""Observation and action spaces."""

from .box import Box, short_repr
from .space import SeedLike, Space

__all__ = ["Space", "Box", "SeedLike", "short_repr"]
