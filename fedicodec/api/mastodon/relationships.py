"""Mastodon API relationships endpoints."""
from fedicodec.api.mastodon.request import Request, body, paging
from fedicodec.api.mastodon.types.api_mastodon_types import (
    AccountList,
    Relationship,
)
from fedicodec.api.mastodon.types.encode_decode import (
    account_list_decoder,
    relationship_decoder,
)


class Relationships:
    """Class containing Mastodon API relationships endpoints."""

    def follow_requests(
        self,
        max_id: str | None = None,
        since_id: str | None = None,
        limit: int | None = None,
    ) -> Request[AccountList]:
        """Follow requests the user has received.

        Reference: https://docs.joinmastodon.org/methods/follow_requests/#get
        """
        return Request(
            "GET",
            "/api/v1/follow_requests",
            account_list_decoder,
            params=paging(max_id=max_id, since_id=since_id, limit=limit),
        )

    def _account_action(
        self,
        account_id: str,
        action: str,
        json: dict | None = None,
    ) -> Request[Relationship]:
        return Request(
            "POST",
            f"/api/v1/accounts/{account_id}/{action}",
            relationship_decoder,
            json=json,
        )

    def account_follow(
        self,
        account_id: str,
        reblogs: bool | None = None,
    ) -> Request[Relationship]:
        """Follow the given account.

        Reference: https://docs.joinmastodon.org/methods/accounts/#follow
        """
        return self._account_action(account_id, "follow", body(reblogs=reblogs))

    def account_unfollow(self, account_id: str) -> Request[Relationship]:
        """Unfollow the given account.

        Reference: https://docs.joinmastodon.org/methods/accounts/#unfollow
        """
        return self._account_action(account_id, "unfollow")

    def account_block(self, account_id: str) -> Request[Relationship]:
        """Block the given account.

        Reference: https://docs.joinmastodon.org/methods/accounts/#block
        """
        return self._account_action(account_id, "block")

    def account_unblock(self, account_id: str) -> Request[Relationship]:
        """Unblock the given account.

        Reference: https://docs.joinmastodon.org/methods/accounts/#unblock
        """
        return self._account_action(account_id, "unblock")

    def account_mute(
        self,
        account_id: str,
        notifications: bool | None = None,
    ) -> Request[Relationship]:
        """Mute the given account.

        Reference: https://docs.joinmastodon.org/methods/accounts/#mute
        """
        return self._account_action(
            account_id, "mute", body(notifications=notifications))

    def account_unmute(self, account_id: str) -> Request[Relationship]:
        """Unmute the given account.

        Reference: https://docs.joinmastodon.org/methods/accounts/#unmute
        """
        return self._account_action(account_id, "unmute")
