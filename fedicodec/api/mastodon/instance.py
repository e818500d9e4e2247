"""Mastodon API instance endpoints."""
from fedicodec.api.mastodon.request import Request
from fedicodec.api.mastodon.types.api_mastodon_types import Emoji, Instance
from fedicodec.api.mastodon.types.encode_decode import (
    emoji_list_decoder,
    instance_decoder,
)


class InstanceInfo:
    """Class containing Mastodon API instance endpoints."""

    def instance(self) -> Request[Instance]:
        """Information about the server.

        Reference: https://docs.joinmastodon.org/methods/instance/#v1
        """
        return Request("GET", "/api/v1/instance", instance_decoder)

    def custom_emojis(self) -> Request[list[Emoji]]:
        """Custom emojis that are available on the server.

        Reference: https://docs.joinmastodon.org/methods/custom_emojis/#get
        """
        return Request("GET", "/api/v1/custom_emojis", emoji_list_decoder)
