"""Mastodon API favourites endpoints."""
from fedicodec.api.mastodon.request import Request, paging
from fedicodec.api.mastodon.types.api_mastodon_types import Status
from fedicodec.api.mastodon.types.encode_decode import status_list_decoder


class Favourites:
    """Class containing Mastodon API favourites endpoints."""

    def favourites(
        self,
        max_id: str | None = None,
        min_id: str | None = None,
        since_id: str | None = None,
        limit: int | None = None,
    ) -> Request[list[Status]]:
        """Statuses the user has favourited.

        Reference: https://docs.joinmastodon.org/methods/favourites/#get
        """
        return Request(
            "GET",
            "/api/v1/favourites",
            status_list_decoder,
            params=paging(max_id, since_id, min_id, limit),
        )

    def bookmarks(
        self,
        max_id: str | None = None,
        since_id: str | None = None,
        min_id: str | None = None,
        limit: int | None = None,
    ) -> Request[list[Status]]:
        """Statuses the user has bookmarked.

        Reference: https://docs.joinmastodon.org/methods/bookmarks/#get
        """
        return Request(
            "GET",
            "/api/v1/bookmarks",
            status_list_decoder,
            params=paging(max_id, since_id, min_id, limit),
        )
