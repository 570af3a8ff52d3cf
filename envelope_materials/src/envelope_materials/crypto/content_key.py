
from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Mapping

from ..core.exceptions import ConfigurationError
from .random import RandomSource

# Valid lengths in bits per content key algorithm, and the length used when a
# description names the algorithm without a length suffix.
KEY_LENGTHS: Final[Mapping[str, tuple[int, ...]]] = {
    "AES": (128, 192, 256),
    "ChaCha20": (256,),
}
DEFAULT_KEY_BITS: Final[Mapping[str, int]] = {
    "AES": 256,
    "ChaCha20": 256,
}


@dataclass(frozen=True, slots=True)
class ContentKey:
    """Symmetric content key plus the algorithm it is intended for"""

    algorithm: str
    key: bytes

    @property
    def bits(self) -> int:
        return len(self.key) * 8

    def __repr__(self) -> str:
        return f"ContentKey(algorithm={self.algorithm!r}, bits={self.bits})"


def parse_content_key_algorithm(token: str) -> tuple[str, int | None]:
    """Split ``ALG`` or ``ALG/BITS`` into its parts.

    The algorithm must be known; ``BITS`` is checked against the algorithm's
    valid lengths. Returns ``(algorithm, None)`` when no length is given.
    """
    algorithm, sep, bits_text = token.partition("/")
    if not algorithm:
        raise ConfigurationError(f"Malformed content key algorithm: {token!r}")
    if algorithm not in KEY_LENGTHS:
        raise ConfigurationError(f"Unsupported content key algorithm: {algorithm}")
    if not sep:
        return algorithm, None
    # ASCII digits only, and short enough that int() cannot refuse it.
    if not (bits_text.isascii() and bits_text.isdigit()) or len(bits_text) > 5:
        raise ConfigurationError(f"Malformed content key length: {token!r}")
    bits = int(bits_text)
    validate_key_bits(algorithm, bits)
    return algorithm, bits


def validate_key_bits(algorithm: str, bits: int) -> None:
    allowed = KEY_LENGTHS.get(algorithm)
    if allowed is None:
        raise ConfigurationError(f"Unsupported content key algorithm: {algorithm}")
    if bits not in allowed:
        raise ConfigurationError(
            f"{bits} is not a valid key length for {algorithm}; expected one of {allowed}"
        )


def generate_content_key(algorithm: str, bits: int | None, rng: RandomSource) -> ContentKey:
    """Draw a new, independent content key from ``rng``"""
    if bits is None:
        bits = DEFAULT_KEY_BITS[algorithm]
    validate_key_bits(algorithm, bits)
    return ContentKey(algorithm=algorithm, key=rng.token_bytes(bits // 8))


def content_key_from_bytes(algorithm: str, key: bytes, bits: int | None = None) -> ContentKey:
    """Rebuild a content key recovered by unwrapping.

    Raises ``ValueError`` when the length does not fit the algorithm (or the
    explicit ``bits``) so the caller can fold it into its own opaque failure.
    """
    if len(key) * 8 not in KEY_LENGTHS[algorithm] or (bits is not None and len(key) * 8 != bits):
        raise ValueError("Recovered key length does not match algorithm")
    return ContentKey(algorithm=algorithm, key=key)


__all__ = [
    "ContentKey",
    "KEY_LENGTHS",
    "DEFAULT_KEY_BITS",
    "parse_content_key_algorithm",
    "validate_key_bits",
    "generate_content_key",
    "content_key_from_bytes",
]
