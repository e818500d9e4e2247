"""Mastodon entity types and their JSON codecs.

Submodules:
-----------
- api_mastodon_types: The entity models and enumerations.
- decoders: Decoders built from types, with validation errors as DecodeErrors.
- encode_decode: The decoder for every entity, encoding and the entry points.
"""
from . import api_mastodon_types, decoders, encode_decode

__all__ = ["api_mastodon_types", "decoders", "encode_decode"]
