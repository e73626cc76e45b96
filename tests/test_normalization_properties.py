"""Behavioural properties of parameter-list normalization.

These pin down the contract callers depend on, including the lenient quirks:
empty input, positional identity, marker stripping, deletion, remaining-value
aggregation, ambiguity tie-break, odd-count positional and case folding.
"""

from __future__ import annotations

import pytest

from flexible_params import normalize_to_mapping, normalize_to_sequence

NAMES = ["p", "q", "r", "s"]


@pytest.mark.parametrize("default", [True, False])
@pytest.mark.parametrize("source", [[], (), None])
def test_empty_input_gives_empty_output(source, default):
    assert normalize_to_mapping(source, default, NAMES) == {}
    assert normalize_to_sequence(source, default, NAMES) == []


@pytest.mark.parametrize(
    "source",
    [
        ["-p", 1, "-q", 2],
        [{"p": 1, "s": [4, 5]}],
        ["p", 1, "r", 3],
        [{"-q": 2}, "extra"],
    ],
)
def test_mapping_then_sequence_agrees_with_direct_sequence(source):
    mapping = normalize_to_mapping(source, False, NAMES)
    direct = normalize_to_sequence(source, False, NAMES)
    assert [mapping.get(name) for name in NAMES] == direct


@pytest.mark.parametrize("source", [["a"], ["a", "b", "c"], ["a", "b", "c", "d"]])
def test_positional_sequence_is_identity(source):
    out = normalize_to_sequence(source, True, NAMES)
    assert out == source
    assert all(a is b for a, b in zip(out, source))


def test_marker_stripping():
    assert normalize_to_mapping(["-color", "red"]) == normalize_to_mapping(["color", "red"])
    assert normalize_to_mapping([{"-color": "red"}]) == {"color": "red"}


@pytest.mark.parametrize(
    "source",
    [["-secret", 1, "-keep", 2], [{"secret": 1, "keep": 2}], [{"-secret": 1, "keep": 2}, "r"]],
)
def test_key_renamed_to_empty_string_never_appears(source):
    out = normalize_to_mapping(source, False, ["keep", "secret"], {"secret": ""}, "rest")
    assert "secret" not in out
    assert "" not in out
    assert out["keep"] == 2
    assert normalize_to_sequence(source, False, ["keep", "secret"], {"secret": ""})[1] is None


def test_remaining_values_aggregate_into_list():
    out = normalize_to_mapping([{"-a": 1}, "x", "y"], False, [], {}, "rest")
    assert out == {"a": 1, "rest": ["x", "y"]}


def test_single_remaining_value_stays_scalar():
    out = normalize_to_mapping([{"-a": 1}, "x"], False, [], {}, "rest")
    assert out == {"a": 1, "rest": "x"}


def test_ambiguous_input_uses_default_guess():
    source = ["a", "b", "c", "d"]
    assert normalize_to_mapping(source, True, NAMES) == {"p": "a", "q": "b", "r": "c", "s": "d"}
    assert normalize_to_mapping(source, False, NAMES) == {"a": "b", "c": "d"}


@pytest.mark.parametrize("default", [True, False])
def test_odd_count_forces_positional(default):
    assert normalize_to_mapping(["a", "b", "c"], default, ["x", "y", "z"]) == {
        "x": "a",
        "y": "b",
        "z": "c",
    }


def test_lowercase_folding_before_rename():
    out = normalize_to_mapping([{"-Color": "red"}], False, [], {"color": "hue"}, "", True)
    assert out == {"hue": "red"}


def test_short_name_list_silently_drops_positional_values():
    assert normalize_to_mapping(["a", "b", "c"], False, ["x"]) == {"x": "a"}


def test_sequence_values_pass_through_unchanged():
    values = [1, 2]
    out = normalize_to_mapping(["-v", values])
    assert out["v"] is values
    assert values == [1, 2]
