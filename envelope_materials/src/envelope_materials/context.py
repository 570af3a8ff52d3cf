
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from .materials.description import EMPTY_DESCRIPTION, MaterialDescription


@dataclass(frozen=True, slots=True)
class EncryptionContext:
    """Per-record metadata supplied by the item encryption pipeline.

    Only ``material_description`` is read by the providers; the record fields
    are carried for the pipeline's own use.
    """

    material_description: MaterialDescription = EMPTY_DESCRIPTION
    table_name: Optional[str] = None
    hash_key_name: Optional[str] = None
    range_key_name: Optional[str] = None
    attribute_values: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        if not isinstance(self.material_description, MaterialDescription):
            object.__setattr__(
                self, "material_description", MaterialDescription(self.material_description)
            )

    def with_material_description(self, description: Mapping[str, str]) -> "EncryptionContext":
        return replace(self, material_description=MaterialDescription(description))


__all__ = ["EncryptionContext"]
