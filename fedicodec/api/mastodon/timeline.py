"""Mastodon API timeline endpoints."""
from fedicodec.api.mastodon.request import Request, paging, query
from fedicodec.api.mastodon.types.api_mastodon_types import Conversation, Status
from fedicodec.api.mastodon.types.encode_decode import (
    conversation_list_decoder,
    status_list_decoder,
)


class Timeline:
    """Class containing Mastodon API timeline endpoints."""

    def timelines_home(
        self,
        max_id: str | None = None,
        since_id: str | None = None,
        min_id: str | None = None,
        limit: int | None = None,
    ) -> Request[list[Status]]:
        """Home timeline.

        Reference: https://docs.joinmastodon.org/methods/timelines/#home
        """
        return Request(
            "GET",
            "/api/v1/timelines/home",
            status_list_decoder,
            params=paging(max_id, since_id, min_id, limit),
        )

    def timelines_public(  # noqa: PLR0913
        self,
        local: bool = False,
        remote: bool = False,
        only_media: bool = False,
        max_id: str | None = None,
        since_id: str | None = None,
        min_id: str | None = None,
        limit: int | None = None,
    ) -> Request[list[Status]]:
        """Public timeline.

        Reference: https://docs.joinmastodon.org/methods/timelines/#public
        """
        params = query(
            local=local, remote=remote, only_media=only_media,
        ) + paging(max_id, since_id, min_id, limit)
        return Request(
            "GET",
            "/api/v1/timelines/public",
            status_list_decoder,
            params=params,
        )

    def timelines_hashtag(
        self,
        hashtag: str,
        local: bool = False,
        max_id: str | None = None,
        limit: int | None = None,
    ) -> Request[list[Status]]:
        """Public statuses containing the given hashtag.

        Reference: https://docs.joinmastodon.org/methods/timelines/#tag
        """
        return Request(
            "GET",
            f"/api/v1/timelines/tag/{hashtag.lstrip('#')}",
            status_list_decoder,
            params=query(local=local) + paging(max_id=max_id, limit=limit),
        )

    def timelines_list(
        self,
        list_id: str,
        max_id: str | None = None,
        limit: int | None = None,
    ) -> Request[list[Status]]:
        """Statuses from the accounts of a list.

        Reference: https://docs.joinmastodon.org/methods/timelines/#list
        """
        return Request(
            "GET",
            f"/api/v1/timelines/list/{list_id}",
            status_list_decoder,
            params=paging(max_id=max_id, limit=limit),
        )

    def conversations(
        self,
        max_id: str | None = None,
        limit: int | None = None,
    ) -> Request[list[Conversation]]:
        """Direct conversations of the user.

        Reference: https://docs.joinmastodon.org/methods/conversations/#get
        """
        return Request(
            "GET",
            "/api/v1/conversations",
            conversation_list_decoder,
            params=paging(max_id=max_id, limit=limit),
        )
