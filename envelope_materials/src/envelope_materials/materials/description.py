"""Material description: the persisted string map that records algorithm choices."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Final, Iterator

from ..core.exceptions import ConfigurationError

CONTENT_KEY_ALGORITHM: Final[str] = "content-key-alg"
KEY_WRAPPING_ALGORITHM: Final[str] = "key-wrapping-alg"
ENVELOPE_KEY: Final[str] = "envelope-key"


class MaterialDescription(Mapping[str, str]):
    """Immutable ``str -> str`` mapping.

    Keys are case-sensitive. Unknown keys are carried along untouched; only the
    recognized keys above are interpreted by this package.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        data = dict(entries or {})
        for key, value in data.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ConfigurationError(
                    f"Material description entries must be strings: {key!r}={value!r}"
                )
        self._entries = data

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f"MaterialDescription({self._entries!r})"

    def updated(self, entries: Mapping[str, str]) -> "MaterialDescription":
        """Return a copy with ``entries`` written over the current values"""
        merged = dict(self._entries)
        merged.update(entries)
        return MaterialDescription(merged)

    def to_dict(self) -> dict[str, str]:
        return dict(self._entries)


EMPTY_DESCRIPTION: Final[MaterialDescription] = MaterialDescription()


def merge_descriptions(
    fixed: Mapping[str, str], per_call: Mapping[str, str] | None
) -> MaterialDescription:
    """Overlay provider-fixed entries on top of per-call entries.

    Per-call entries may add keys but never replace a key the provider fixes:
    the fixed entries are applied last.
    """
    merged = dict(per_call or {})
    merged.update(fixed)
    return MaterialDescription(merged)


def overridden_keys(fixed: Mapping[str, str], per_call: Mapping[str, str] | None) -> list[str]:
    """Per-call keys whose values were discarded in favour of fixed entries"""
    if not per_call:
        return []
    return sorted(key for key, value in per_call.items() if key in fixed and fixed[key] != value)


__all__ = [
    "CONTENT_KEY_ALGORITHM",
    "KEY_WRAPPING_ALGORITHM",
    "ENVELOPE_KEY",
    "MaterialDescription",
    "EMPTY_DESCRIPTION",
    "merge_descriptions",
    "overridden_keys",
]
