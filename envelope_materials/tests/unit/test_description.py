import pytest

from envelope_materials import ConfigurationError, MaterialDescription, merge_descriptions
from envelope_materials.materials.description import overridden_keys


def test_description_is_read_only_copy() -> None:
    source = {"TestKey": "test value"}
    description = MaterialDescription(source)
    source["TestKey"] = "changed"
    assert description["TestKey"] == "test value"
    with pytest.raises(TypeError):
        description["TestKey"] = "nope"  # type: ignore[index]


def test_description_keys_are_case_sensitive() -> None:
    description = MaterialDescription({"content-key-alg": "AES"})
    assert "Content-Key-Alg" not in description


@pytest.mark.parametrize("entries", [{"a": 1}, {1: "a"}, {"a": None}])
def test_description_rejects_non_string_entries(entries) -> None:
    with pytest.raises(ConfigurationError):
        MaterialDescription(entries)


def test_updated_returns_new_description() -> None:
    original = MaterialDescription({"a": "1"})
    updated = original.updated({"a": "2", "b": "3"})
    assert original == {"a": "1"}
    assert updated == {"a": "2", "b": "3"}


def test_merge_keeps_fixed_entries() -> None:
    fixed = {"key-wrapping-alg": "RSA/ECB/PKCS1Padding", "owner": "provider"}
    per_call = {"key-wrapping-alg": "RSA/ECB/OAEPWithSHA-1AndMGF1Padding", "extra": "x"}
    merged = merge_descriptions(fixed, per_call)
    assert merged == {
        "key-wrapping-alg": "RSA/ECB/PKCS1Padding",
        "owner": "provider",
        "extra": "x",
    }
    assert overridden_keys(fixed, per_call) == ["key-wrapping-alg"]


def test_merge_with_no_per_call_entries() -> None:
    assert merge_descriptions({"a": "1"}, None) == {"a": "1"}
    assert overridden_keys({"a": "1"}, None) == []
