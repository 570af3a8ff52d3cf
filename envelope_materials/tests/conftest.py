import os

import pytest
from cryptography.hazmat.primitives.asymmetric import ed25519, rsa

from envelope_materials import MacSecret, SignatureKeyPair, WrappingKeyPair


@pytest.fixture(scope="session")
def wrapping_pair() -> WrappingKeyPair:
    return WrappingKeyPair.from_private_key(rsa.generate_private_key(public_exponent=65537, key_size=2048))


@pytest.fixture(scope="session")
def signature_pair() -> SignatureKeyPair:
    private = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return SignatureKeyPair(private_key=private, public_key=private.public_key())


@pytest.fixture(scope="session")
def ed25519_pair() -> SignatureKeyPair:
    return SignatureKeyPair(private_key=ed25519.Ed25519PrivateKey.generate())


@pytest.fixture(scope="session")
def mac_secret() -> MacSecret:
    return MacSecret(os.urandom(32))


class SequenceRandom:
    """Deterministic stand-in for the system random source."""

    def __init__(self) -> None:
        self.calls = 0

    def token_bytes(self, length: int) -> bytes:
        self.calls += 1
        return bytes((self.calls + i) % 256 for i in range(length))


@pytest.fixture()
def sequence_random() -> SequenceRandom:
    return SequenceRandom()
