# Value objects handed back to the record encryption pipeline.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..crypto.content_key import ContentKey
from .description import MaterialDescription


@dataclass(frozen=True, slots=True)
class EncryptionMaterials:
    content_key: ContentKey
    signing_key: Any = field(repr=False)
    material_description: MaterialDescription


@dataclass(frozen=True, slots=True)
class DecryptionMaterials:
    content_key: ContentKey
    verification_key: Any = field(repr=False)
    material_description: MaterialDescription


__all__ = ["EncryptionMaterials", "DecryptionMaterials"]
