"""Mastodon API filters endpoints."""
from typing import Any

from fedicodec.api.mastodon.request import Request, body
from fedicodec.api.mastodon.types.api_mastodon_types import Filter, FilterContext
from fedicodec.api.mastodon.types.decoders import anything
from fedicodec.api.mastodon.types.encode_decode import (
    filter_decoder,
    filter_list_decoder,
)


class Filters:
    """Class containing Mastodon API filters endpoints."""

    def filters(self) -> Request[list[Filter]]:
        """All filters of the user.

        Reference: https://docs.joinmastodon.org/methods/filters/#get-v1
        """
        return Request("GET", "/api/v1/filters", filter_list_decoder)

    def filter(self, filter_id: str) -> Request[Filter]:
        """A single filter.

        Reference: https://docs.joinmastodon.org/methods/filters/#get-one-v1
        """
        return Request("GET", f"/api/v1/filters/{filter_id}", filter_decoder)

    def filter_create(
        self,
        phrase: str,
        context: list[FilterContext],
        irreversible: bool = False,
        whole_word: bool = False,
        expires_in: int | None = None,
    ) -> Request[Filter]:
        """Create a filter.

        Reference: https://docs.joinmastodon.org/methods/filters/#create-v1
        """
        return Request(
            "POST",
            "/api/v1/filters",
            filter_decoder,
            json=body(
                phrase=phrase,
                context=[c.value for c in context],
                irreversible=irreversible,
                whole_word=whole_word,
                expires_in=expires_in,
            ),
        )

    def filter_delete(self, filter_id: str) -> Request[Any]:
        """Delete a filter.

        Reference: https://docs.joinmastodon.org/methods/filters/#delete-v1
        """
        return Request("DELETE", f"/api/v1/filters/{filter_id}", anything)
