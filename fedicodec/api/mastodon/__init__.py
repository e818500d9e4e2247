"""__init__.py for mastodon.

Submodules:
-----------
- Mastodon: Sends requests to a Mastodon server and decodes the responses.
- login: The OAuth login flow.
- types: Type definitions for Mastodon API entities and their JSON codecs.
"""

from .api_mastodon import Mastodon

__all__ = ["Mastodon"]
