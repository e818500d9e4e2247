"""Mastodon API search endpoints."""
from fedicodec.api.mastodon.request import Request, query
from fedicodec.api.mastodon.types.api_mastodon_types import Results
from fedicodec.api.mastodon.types.encode_decode import results_decoder


class Search:
    """Class containing Mastodon API search endpoints."""

    def search_v2(  # noqa: PLR0913
        self,
        q: str,
        search_type: str | None = None,
        resolve: bool = False,
        following: bool = False,
        account_id: str | None = None,
        exclude_unreviewed: bool = False,
        max_id: str | None = None,
        min_id: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Request[Results]:
        """Perform a search.

        Reference: https://docs.joinmastodon.org/methods/search/#v2
        """
        params = query(
            q=q,
            type=search_type,
            resolve=resolve,
            following=following,
            account_id=account_id,
            exclude_unreviewed=exclude_unreviewed,
            max_id=max_id,
            min_id=min_id,
            limit=limit,
            offset=offset,
        )
        return Request("GET", "/api/v2/search", results_decoder, params=params)
