"""A client library for the Mastodon REST API.

Submodules:
-----------
- api: The HTTP client, the request builders and the OAuth login flow.
- api.mastodon.types: Mastodon entities and their JSON encoders and decoders.
- argparser: Provides command-line argument parsing functionality.
- helpers: Logging setup, timestamps and credential storage.
- main: Fetches one entity and prints it.
"""
from .api import HttpMethod, Mastodon
from .api.mastodon import login
from .api.mastodon.types import api_mastodon_types, decoders, encode_decode
from .helpers import cache_manager, helpers
from .main import main

__all__ = [
    "HttpMethod",
    "Mastodon",
    "api_mastodon_types",
    "cache_manager",
    "decoders",
    "encode_decode",
    "helpers",
    "login",
    "main",
]
