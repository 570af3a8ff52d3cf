from hypothesis import given, settings, strategies as st

from envelope_materials import (
    CONTENT_KEY_ALGORITHM,
    ENVELOPE_KEY,
    KEY_WRAPPING_ALGORITHM,
    MacSecret,
    WrappedMaterials,
    WrappedMaterialsProvider,
    merge_descriptions,
)
from envelope_materials.context import EncryptionContext

_entries = st.dictionaries(st.text(max_size=12), st.text(max_size=12), max_size=6)
_kek = bytes(range(32))
_provider = WrappedMaterialsProvider(_kek, _kek, MacSecret(b"m" * 32))
_reserved = {CONTENT_KEY_ALGORITHM, KEY_WRAPPING_ALGORITHM, ENVELOPE_KEY}


@given(_entries, _entries)
def test_merge_fixed_entries_always_win(fixed: dict[str, str], per_call: dict[str, str]) -> None:
    merged = merge_descriptions(fixed, per_call)
    assert set(merged) == set(fixed) | set(per_call)
    for key, value in fixed.items():
        assert merged[key] == value
    for key, value in per_call.items():
        if key not in fixed:
            assert merged[key] == value


@given(_entries)
@settings(max_examples=50)
def test_unknown_entries_pass_through(extra: dict[str, str]) -> None:
    extra = {key: value for key, value in extra.items() if key not in _reserved}
    enc = _provider.get_encryption_materials(EncryptionContext(material_description=extra))
    for key, value in extra.items():
        assert enc.material_description[key] == value
    dec = _provider.get_decryption_materials(EncryptionContext(material_description=enc.material_description))
    assert dec.content_key == enc.content_key


@given(st.sampled_from(["AES", "AES/128", "AES/192", "AES/256", "ChaCha20", "ChaCha20/256"]))
@settings(max_examples=30)
def test_content_keys_are_fresh(token: str) -> None:
    materials = WrappedMaterials()
    first, _ = materials.derive_content_key({CONTENT_KEY_ALGORITHM: token})
    second, _ = materials.derive_content_key({CONTENT_KEY_ALGORITHM: token})
    assert first.algorithm == second.algorithm
    assert first.key != second.key
