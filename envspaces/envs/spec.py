"""Registration records describing how an environment is built.

These are plain metadata containers: they do not import entry points and there
is no registry lookup.
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..core.constants import ENV_ID_PATTERN
from ..utils.exceptions import ValidationError
from ..utils.logging import ComponentType, get_component_logger

_logger = get_component_logger("spec", ComponentType.REGISTRATION)

ENV_ID_RE = re.compile(ENV_ID_PATTERN)

__all__ = ["WrapperSpec", "EnvSpec", "parse_env_id", "get_env_id"]


def parse_env_id(env_id: str) -> Tuple[Optional[str], str, Optional[int]]:
    """Parse an environment id of the form ``[namespace/]name[-vN]``.

    Examples:
        >>> parse_env_id("CartPole-v1")
        (None, 'CartPole', 1)
        >>> parse_env_id("MyOrg/Reacher")
        ('MyOrg', 'Reacher', None)

    Raises:
        ValidationError: If the id does not follow the convention.
    """
    match = ENV_ID_RE.fullmatch(env_id) if isinstance(env_id, str) else None
    if not match:
        _logger.error(f"Malformed environment id: {env_id!r}")
        raise ValidationError(
            f"Malformed environment ID: {env_id}. IDs must be of the form "
            "[namespace/](env-name)-v(version), namespace and version are optional",
            parameter_name="id",
            parameter_value=env_id,
            expected_format="[namespace/]name[-vN]",
        )
    namespace, name, version = match.group("namespace", "name", "version")
    return namespace, name, None if version is None else int(version)


def get_env_id(namespace: Optional[str], name: str, version: Optional[int]) -> str:
    """Build an environment id from its parts; inverse of :func:`parse_env_id`."""
    full_name = name
    if namespace is not None:
        full_name = f"{namespace}/{name}"
    if version is not None:
        full_name = f"{full_name}-v{version}"
    return full_name


@dataclass(frozen=True)
class WrapperSpec:
    """A wrapper applied on top of an environment.

    Attributes:
        name: Wrapper class name.
        entry_point: Import path of the wrapper, ``module:attr``.
        kwargs: Keyword arguments the wrapper was created with.
    """

    name: str
    entry_point: str
    kwargs: Optional[Dict[str, Any]] = None


@dataclass
class EnvSpec:
    """Specification used to create an environment.

    Attributes:
        id: Environment id, ``[namespace/]name[-vN]``.
        entry_point: Import path of the environment, ``module:attr``.
        reward_threshold: Reward at which the task is considered solved.
        nondeterministic: Whether the environment is non-deterministic even
            after seeding.
        max_episode_steps: Step limit applied through a time-limit wrapper.
        order_enforce: Whether reset must be called before step.
        disable_env_checker: Whether to skip the environment checker.
        kwargs: Extra keyword arguments passed to the entry point.
        applied_wrappers: Wrappers applied to the environment, outermost last.
        namespace: Parsed from ``id``.
        name: Parsed from ``id``.
        version: Parsed from ``id``.
    """

    id: str
    entry_point: str

    # Environment attributes
    reward_threshold: Optional[float] = None
    nondeterministic: bool = False

    # Wrappers
    max_episode_steps: Optional[int] = None
    order_enforce: bool = True
    disable_env_checker: bool = False

    # Environment arguments
    kwargs: Dict[str, Any] = field(default_factory=dict)

    # post-init attributes
    namespace: Optional[str] = field(init=False)
    name: str = field(init=False)
    version: Optional[int] = field(init=False)

    applied_wrappers: Tuple[WrapperSpec, ...] = ()

    def __post_init__(self) -> None:
        self.namespace, self.name, self.version = parse_env_id(self.id)

        if self.max_episode_steps is not None and (
            isinstance(self.max_episode_steps, bool)
            or not isinstance(self.max_episode_steps, int)
            or self.max_episode_steps <= 0
        ):
            raise ValidationError(
                f"max_episode_steps must be a positive integer, got {self.max_episode_steps!r}",
                parameter_name="max_episode_steps",
                parameter_value=self.max_episode_steps,
                expected_format="positive integer or None",
            )
        self.kwargs = dict(self.kwargs or {})
        self.applied_wrappers = tuple(self.applied_wrappers)

    def to_string(self) -> str:
        return f"{type(self).__name__}<{self.id}>"

    def __str__(self) -> str:
        return self.to_string()

    def with_wrapper(self, wrapper: WrapperSpec) -> "EnvSpec":
        """Return a copy of this spec with ``wrapper`` appended to the applied wrappers."""
        if not isinstance(wrapper, WrapperSpec):
            raise ValidationError(
                f"Expected a WrapperSpec, got {type(wrapper).__name__}",
                parameter_name="wrapper",
                parameter_value=wrapper,
                expected_format="WrapperSpec",
            )
        return dataclasses.replace(
            self,
            kwargs=dict(self.kwargs),
            applied_wrappers=self.applied_wrappers + (wrapper,),
        )
