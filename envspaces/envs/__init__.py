"""Environment registration records."""

from .spec import EnvSpec, WrapperSpec, get_env_id, parse_env_id

__all__ = ["EnvSpec", "WrapperSpec", "parse_env_id", "get_env_id"]
