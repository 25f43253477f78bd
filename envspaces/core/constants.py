"""Core constants used throughout the `envspaces` package.

Primitive numerical values live directly in this module, while package
metadata and space defaults are loaded from `config/constants.yaml` so they
can be changed without touching code.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import numpy as np
import yaml

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "constants.yaml"

_DEFAULT_CONFIG: Dict[str, Any] = {
    "package": {
        "name": "envspaces",
        "version": "0.1.0",
    },
    "spaces": {
        "default_dtype": "float32",
        "default_device": "cpu",
    },
    "testing": {
        "default_seeds": [42, 123, 456, 789, 999],
    },
}


def _load_constants_config() -> Dict[str, Any]:
    if not CONFIG_PATH.exists():
        return _DEFAULT_CONFIG

    try:
        with CONFIG_PATH.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except (OSError, yaml.YAMLError):
        return _DEFAULT_CONFIG

    merged = {key: dict(value) for key, value in _DEFAULT_CONFIG.items()}
    for key, value in data.items():
        if isinstance(value, dict):
            merged.setdefault(key, {}).update(value)
        else:
            merged[key] = value
    return merged


_CONFIG = _load_constants_config()


PACKAGE_NAME = _CONFIG["package"].get("name", _DEFAULT_CONFIG["package"]["name"])
PACKAGE_VERSION = _CONFIG["package"].get(
    "version", _DEFAULT_CONFIG["package"]["version"]
)


# Spaces
DEFAULT_DTYPE = np.dtype(_CONFIG["spaces"].get("default_dtype", "float32"))
DEFAULT_DEVICE = str(_CONFIG["spaces"].get("default_device", "cpu"))
SUPPORTED_DEVICES = ("cpu", "cuda", "metal")
BOUNDED_MANNERS = ("both", "below", "above")
EMPTY_REPR = "[]"


# Seeding
SEED_MIN_VALUE = 0
SEED_MAX_VALUE = 2**32 - 1  # seeds are unsigned 32-bit integers
VALID_SEED_TYPES = [int, np.integer]


# Environment ids follow the `[namespace/]name[-vN]` convention
ENV_ID_PATTERN = r"^(?:(?P<namespace>[\w:-]+)\/)?(?:(?P<name>[\w:.-]+?))(?:-v(?P<version>\d+))?$"


DEFAULT_TEST_SEEDS = list(_CONFIG["testing"].get("default_seeds", [])) or list(
    _DEFAULT_CONFIG["testing"]["default_seeds"]
)


__all__ = [
    "CONFIG_PATH",
    "PACKAGE_NAME",
    "PACKAGE_VERSION",
    "DEFAULT_DTYPE",
    "DEFAULT_DEVICE",
    "SUPPORTED_DEVICES",
    "BOUNDED_MANNERS",
    "EMPTY_REPR",
    "SEED_MIN_VALUE",
    "SEED_MAX_VALUE",
    "VALID_SEED_TYPES",
    "ENV_ID_PATTERN",
    "DEFAULT_TEST_SEEDS",
]
