import dataclasses
import pytest
from pathnorm.core.policy import (
    PathPolicy,
    PolicyError,
    RAW,
    NO_SHORTHANDS,
    MINIMAL,
    DEFAULT_POLICY,
    PRESETS,
)


def test_default_policy_accepts_everything():
    policy = PathPolicy()
    assert not policy.needs_adapter()
    assert not policy.needs_division()
    assert not RAW.needs_adapter()


@pytest.mark.parametrize(
    "flag",
    [
        "absolute_only",
        "no_ortho_shorthand",
        "no_quadratic_shorthand",
        "no_cubic_shorthand",
        "arc_as_cubic",
    ],
)
def test_any_flag_needs_adapter(flag):
    policy = PathPolicy(**{flag: True})
    assert policy.needs_adapter()


def test_quadratic_as_cubic_requires_no_cubic_shorthand():
    with pytest.raises(PolicyError):
        PathPolicy(quadratic_as_cubic=True)

    policy = PathPolicy(quadratic_as_cubic=True, no_cubic_shorthand=True)
    assert policy.needs_adapter()
    assert policy.needs_division()
    assert policy.expands_quadratic_shorthand()


def test_policy_error_is_a_value_error():
    assert issubclass(PolicyError, ValueError)


def test_policy_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        MINIMAL.absolute_only = False  # type: ignore[misc]


def test_presets():
    assert DEFAULT_POLICY is NO_SHORTHANDS
    assert set(PRESETS) == {"raw", "no_shorthands", "minimal"}
    assert NO_SHORTHANDS.no_ortho_shorthand
    assert NO_SHORTHANDS.no_cubic_shorthand
    assert NO_SHORTHANDS.no_quadratic_shorthand
    assert not NO_SHORTHANDS.absolute_only
    assert all(
        getattr(MINIMAL, f.name)
        for f in dataclasses.fields(MINIMAL)
        if f.name != "name"
    )


def test_to_dict_from_dict():
    data = MINIMAL.to_dict()
    assert data["name"] == "minimal"
    assert data["arc_as_cubic"] is True
    assert PathPolicy.from_dict(data) == MINIMAL

    unnamed = PathPolicy(absolute_only=True)
    assert "name" not in unnamed.to_dict()


def test_from_dict_ignores_unknown_keys():
    policy = PathPolicy.from_dict(
        {"absolute_only": True, "arc_as_cubic": False, "color": "red"}
    )
    assert policy.absolute_only is True
    assert policy.arc_as_cubic is False
    assert policy.name is None


def test_from_dict_validates():
    with pytest.raises(PolicyError):
        PathPolicy.from_dict({"quadratic_as_cubic": True})


@pytest.mark.parametrize("value", ["false", "true", 1, 0, None])
def test_from_dict_rejects_non_bool_flags(value):
    with pytest.raises(PolicyError):
        PathPolicy.from_dict({"absolute_only": value})
