"""Configuration models and loading for envelope materials."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..core.exceptions import ConfigurationError
from ..crypto.content_key import KEY_LENGTHS, validate_key_bits
from ..crypto.wrapping import AES_WRAP, RSA_OAEP_SHA256, TRANSFORMS, is_rsa_transform

_CONFIG_ENV = "EM_CONFIG"


class ContentKeyDefaults(BaseModel):
    model_config = ConfigDict(frozen=True)

    algorithm: str = Field(default="AES", description="Content key algorithm when none is described")
    bits: int = Field(default=256, description="Content key length for the default algorithm")

    @field_validator("algorithm")
    @classmethod
    def _validate_algorithm(cls, value: str) -> str:
        if value not in KEY_LENGTHS:
            raise ValueError(f"Unsupported content key algorithm: {value}")
        return value

    @model_validator(mode="after")
    def _validate_bits(self) -> "ContentKeyDefaults":
        try:
            validate_key_bits(self.algorithm, self.bits)
        except ConfigurationError as exc:
            raise ValueError(str(exc)) from None
        return self


class WrappingDefaults(BaseModel):
    model_config = ConfigDict(frozen=True)

    rsa: str = Field(default=RSA_OAEP_SHA256, description="Transform for RSA wrapping keys")
    symmetric: str = Field(default=AES_WRAP, description="Transform for symmetric wrapping keys")
    min_rsa_key_bits: int = Field(default=2048, ge=1024)

    @field_validator("rsa")
    @classmethod
    def _validate_rsa(cls, value: str) -> str:
        if not is_rsa_transform(value):
            raise ValueError(f"Not an RSA key wrapping algorithm: {value}")
        return value

    @field_validator("symmetric")
    @classmethod
    def _validate_symmetric(cls, value: str) -> str:
        if value not in TRANSFORMS or is_rsa_transform(value):
            raise ValueError(f"Not a symmetric key wrapping algorithm: {value}")
        return value


class LoggingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()


class MaterialsConfig(BaseModel):
    content_key: ContentKeyDefaults = Field(default_factory=ContentKeyDefaults)
    wrapping: WrappingDefaults = Field(default_factory=WrappingDefaults)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(frozen=True)


DEFAULT_CONFIG = MaterialsConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    env_path = os.getenv(_CONFIG_ENV)
    if env_path:
        yield Path(env_path).expanduser()
    yield Path.cwd() / ".envelope_materials" / "config.yaml"


def load_config(path: Optional[Path] = None) -> MaterialsConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ConfigurationError(f"Invalid YAML in {candidate}: {exc}") from exc
            try:
                return MaterialsConfig.model_validate(data)
            except ValidationError as exc:
                raise ConfigurationError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)


__all__ = [
    "ContentKeyDefaults",
    "WrappingDefaults",
    "LoggingConfig",
    "MaterialsConfig",
    "DEFAULT_CONFIG",
    "config_search_paths",
    "load_config",
    "dump_default_config",
]
