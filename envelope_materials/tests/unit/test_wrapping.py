import os

import pytest
from cryptography.hazmat.primitives.keywrap import InvalidUnwrap

from envelope_materials import ConfigurationError
from envelope_materials.crypto.wrapping import (
    AES_WRAP,
    RSA_OAEP_SHA256,
    RSA_PKCS1,
    TRANSFORMS,
    default_transform_for,
    get_transform,
    is_rsa_transform,
)


@pytest.mark.parametrize("name", [name for name in TRANSFORMS if is_rsa_transform(name)])
def test_rsa_transforms_wrap_and_unwrap(name: str, wrapping_pair) -> None:
    transform = get_transform(name)
    content_key = os.urandom(32)
    wrapped = transform.wrap(wrapping_pair.public_key, content_key)
    assert wrapped != content_key
    assert transform.unwrap(wrapping_pair.private_key, wrapped) == content_key


def test_aes_key_wrap_transform() -> None:
    transform = get_transform(AES_WRAP)
    kek = os.urandom(32)
    content_key = os.urandom(16)
    wrapped = transform.wrap(kek, content_key)
    assert len(wrapped) == 24
    assert transform.unwrap(kek, wrapped) == content_key
    with pytest.raises(InvalidUnwrap):
        transform.unwrap(os.urandom(32), wrapped)


def test_unknown_transform_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        get_transform("RSA/ECB/NoPadding")


def test_transform_key_acceptance(wrapping_pair) -> None:
    rsa_transform = get_transform(RSA_PKCS1)
    assert rsa_transform.accepts_wrapping_key(wrapping_pair.public_key)
    assert not rsa_transform.accepts_wrapping_key(wrapping_pair.private_key)
    assert rsa_transform.accepts_unwrapping_key(wrapping_pair.private_key)
    aes_transform = get_transform(AES_WRAP)
    assert aes_transform.accepts_wrapping_key(os.urandom(16))
    assert not aes_transform.accepts_wrapping_key(os.urandom(20))
    assert not aes_transform.accepts_wrapping_key(wrapping_pair.public_key)


def test_default_transform_for_key_type(wrapping_pair) -> None:
    defaults = {"rsa_default": RSA_OAEP_SHA256, "symmetric_default": AES_WRAP}
    assert default_transform_for(wrapping_pair.public_key, **defaults) == RSA_OAEP_SHA256
    assert default_transform_for(os.urandom(32), **defaults) == AES_WRAP
    with pytest.raises(ConfigurationError):
        default_transform_for("not a key", **defaults)
