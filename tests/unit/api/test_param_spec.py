from __future__ import annotations

import pytest

from flexible_params.api.config import ParamSpec, ParamSpecBuilder
from flexible_params.utils.exceptions import ConfigurationError


def test_param_spec_coerces_and_freezes_fields():
    rename = {"default": "value"}
    spec = ParamSpec(names="text", rename=rename, remaining_name=None, lowercase=1)
    assert spec.names == ("text",)
    assert spec.remaining_name == ""
    assert spec.lowercase is True
    assert spec.positional_by_default is False
    with pytest.raises(TypeError):
        spec.rename["x"] = "y"  # type: ignore[index]
    # Later changes to the caller's dict do not leak in.
    rename["late"] = "x"
    assert "late" not in spec.rename


def test_param_spec_is_frozen():
    spec = ParamSpec()
    with pytest.raises(AttributeError):
        spec.lowercase = True  # type: ignore[misc]


def test_param_spec_normalizes_both_shapes():
    spec = ParamSpec(names=("key", "value"), positional_by_default=True)
    assert spec.to_mapping(["k", "v"]) == {"key": "k", "value": "v"}
    assert spec.to_sequence(["-value", "v", "-key", "k"]) == ["k", "v"]
    assert spec.normalize(["k"], "sequence") == ["k"]


def test_builder_assembles_spec():
    spec = (
        ParamSpecBuilder("name", "text", "rows", "cols")
        .alias("text", "default", "value")
        .alias("cols", "columns")
        .drop("debug")
        .remaining("text")
        .build()
    )
    assert spec.names == ("name", "text", "rows", "cols")
    assert dict(spec.rename) == {
        "default": "text",
        "value": "text",
        "columns": "cols",
        "debug": "",
    }
    out = spec.to_mapping([{"-name": "bio", "columns": 40, "debug": True}, "Hello"])
    assert out == {"name": "bio", "cols": 40, "text": "Hello"}


def test_builder_flags_and_name_replacement():
    spec = (
        ParamSpecBuilder("ignored")
        .names("p", "q")
        .rename({"Q": "q"})
        .lowercase()
        .positional_by_default()
        .build()
    )
    assert spec.names == ("p", "q")
    assert spec.lowercase is True
    assert spec.positional_by_default is True
    assert spec.to_mapping(["a", "b"]) == {"p": "a", "q": "b"}


def test_from_mapping_builds_spec():
    spec = ParamSpec.from_mapping(
        {
            "names": ["name", "value"],
            "rename": {"default": "value"},
            "remaining_name": "rest",
            "lowercase": False,
            "positional_by_default": True,
        }
    )
    assert spec.names == ("name", "value")
    assert spec.to_mapping(["-Default", 1]) == {"Default": 1}
    assert spec.to_mapping(["-default", 1]) == {"value": 1}


def test_from_mapping_accepts_single_name_and_empty_table():
    assert ParamSpec.from_mapping({"names": "text"}).names == ("text",)
    assert ParamSpec.from_mapping({}).names == ()


@pytest.mark.parametrize(
    "config, param",
    [
        ({"names": 3}, "names"),
        ({"names": ["a", 1]}, "names"),
        ({"rename": ["a"]}, "rename"),
        ({"rename": {"a": 1}}, "rename"),
        ({"remaining_name": 1}, "remaining_name"),
        ({"lowercase": "yes"}, "lowercase"),
        ({"positional_by_default": 1}, "positional_by_default"),
    ],
)
def test_from_mapping_rejects_wrong_types(config, param):
    with pytest.raises(ConfigurationError) as excinfo:
        ParamSpec.from_mapping(config, source="test-table")
    assert excinfo.value.details["param"] == param
    assert excinfo.value.details["source"] == "test-table"


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(ConfigurationError, match="Unknown signature option"):
        ParamSpec.from_mapping({"names": [], "defaults": {}})


def test_from_mapping_rejects_non_table():
    with pytest.raises(ConfigurationError, match="must be a table"):
        ParamSpec.from_mapping(["names"])  # type: ignore[arg-type]
