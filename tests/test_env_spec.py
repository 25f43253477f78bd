import pytest

from envspaces.envs import EnvSpec, WrapperSpec, get_env_id, parse_env_id
from envspaces.utils.exceptions import ValidationError


@pytest.mark.parametrize(
    "env_id, expected",
    [
        ("CartPole-v1", (None, "CartPole", 1)),
        ("MyOrg/Reacher", ("MyOrg", "Reacher", None)),
        ("ALE/Pong-v5", ("ALE", "Pong", 5)),
        ("Plain", (None, "Plain", None)),
        ("my-env.name-v10", (None, "my-env.name", 10)),
    ],
)
def test_parse_env_id(env_id, expected):
    assert parse_env_id(env_id) == expected


@pytest.mark.parametrize("env_id", ["", "bad id!", "a/b/c", None, 12])
def test_parse_env_id_rejects_malformed(env_id):
    with pytest.raises(ValidationError, match="Malformed environment ID"):
        parse_env_id(env_id)


@pytest.mark.parametrize(
    "parts, expected",
    [
        ((None, "CartPole", 1), "CartPole-v1"),
        (("MyOrg", "Reacher", None), "MyOrg/Reacher"),
        ((None, "Plain", None), "Plain"),
    ],
)
def test_get_env_id(parts, expected):
    assert get_env_id(*parts) == expected
    assert parse_env_id(expected) == parts


class TestEnvSpec:
    def test_id_components_populated(self):
        spec = EnvSpec(id="ALE/Pong-v5", entry_point="ale_py.env:AtariEnv")

        assert spec.namespace == "ALE"
        assert spec.name == "Pong"
        assert spec.version == 5

    def test_defaults(self):
        spec = EnvSpec(id="CartPole-v1", entry_point="pkg.envs:CartPoleEnv")

        assert spec.reward_threshold is None
        assert spec.nondeterministic is False
        assert spec.max_episode_steps is None
        assert spec.order_enforce is True
        assert spec.disable_env_checker is False
        assert spec.kwargs == {}
        assert spec.applied_wrappers == ()

    def test_string_form(self):
        spec = EnvSpec(id="CartPole-v1", entry_point="pkg.envs:CartPoleEnv")
        assert str(spec) == "EnvSpec<CartPole-v1>"
        assert spec.to_string() == "EnvSpec<CartPole-v1>"

    def test_malformed_id_rejected(self):
        with pytest.raises(ValidationError):
            EnvSpec(id="not a valid id", entry_point="pkg:Env")

    @pytest.mark.parametrize("steps", [0, -5, 2.5, True])
    def test_invalid_max_episode_steps(self, steps):
        with pytest.raises(ValidationError, match="max_episode_steps"):
            EnvSpec(id="CartPole-v1", entry_point="pkg:Env", max_episode_steps=steps)

    def test_kwargs_are_copied(self):
        kwargs = {"size": 3}
        spec = EnvSpec(id="Grid-v0", entry_point="pkg:Grid", kwargs=kwargs)

        kwargs["size"] = 10
        assert spec.kwargs == {"size": 3}

    def test_with_wrapper_returns_new_spec(self):
        spec = EnvSpec(id="Grid-v0", entry_point="pkg:Grid", max_episode_steps=100)
        wrapper = WrapperSpec(name="TimeLimit", entry_point="pkg.wrappers:TimeLimit", kwargs={"max_episode_steps": 100})

        wrapped = spec.with_wrapper(wrapper)

        assert wrapped is not spec
        assert wrapped.applied_wrappers == (wrapper,)
        assert spec.applied_wrappers == ()
        assert wrapped.id == spec.id
        assert wrapped.max_episode_steps == 100

    def test_with_wrapper_rejects_other_types(self):
        spec = EnvSpec(id="Grid-v0", entry_point="pkg:Grid")
        with pytest.raises(ValidationError):
            spec.with_wrapper("TimeLimit")  # type: ignore[arg-type]

    def test_wrapper_spec_is_frozen(self):
        wrapper = WrapperSpec(name="TimeLimit", entry_point="pkg:TimeLimit")
        with pytest.raises(AttributeError):
            wrapper.name = "Other"  # type: ignore[misc]
