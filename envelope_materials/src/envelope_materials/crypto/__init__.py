"""Cryptographic primitives used to build materials."""
from .content_key import ContentKey, generate_content_key, parse_content_key_algorithm
from .random import SYSTEM_RANDOM, RandomSource, SystemRandomSource
from .wrapping import TRANSFORMS, get_transform

__all__ = [
    "ContentKey",
    "generate_content_key",
    "parse_content_key_algorithm",
    "RandomSource",
    "SystemRandomSource",
    "SYSTEM_RANDOM",
    "TRANSFORMS",
    "get_transform",
]
