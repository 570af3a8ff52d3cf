"""Randomness capability used for content key generation.

Key generation never reaches for process-wide randomness on its own; a
:class:`RandomSource` is handed to it instead so tests can substitute a
deterministic source.
"""

from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Thread-safe source of cryptographically secure random bytes."""

    def token_bytes(self, length: int) -> bytes:  # pragma: no cover - protocol
        ...


class SystemRandomSource:
    """OS CSPRNG backed source. ``secrets`` is safe to share across threads."""

    __slots__ = ()

    def token_bytes(self, length: int) -> bytes:
        if length <= 0:
            raise ValueError("Random length must be positive")
        return secrets.token_bytes(length)

    def __repr__(self) -> str:
        return "SystemRandomSource()"


SYSTEM_RANDOM: RandomSource = SystemRandomSource()

__all__ = ["RandomSource", "SystemRandomSource", "SYSTEM_RANDOM"]
