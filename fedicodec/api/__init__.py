"""__init__.py for api."""

from .mastodon import Mastodon, api_mastodon
from .client import HttpMethod  # noqa: I001

__all__ = [
    "HttpMethod",
    "Mastodon",
    "api_mastodon",
]
