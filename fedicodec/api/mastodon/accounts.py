"""Mastodon API accounts endpoints."""
from fedicodec.api.mastodon.request import Request, body, paging, query
from fedicodec.api.mastodon.types.api_mastodon_types import (
    Account,
    AccountList,
    RelationshipList,
    Status,
)
from fedicodec.api.mastodon.types.encode_decode import (
    account_decoder,
    account_list_decoder,
    relationship_list_decoder,
    status_list_decoder,
)


class Accounts:
    """Class containing Mastodon API accounts endpoints."""

    def account(self, account_id: str) -> Request[Account]:
        """View information about a profile.

        Reference: https://docs.joinmastodon.org/methods/accounts/#get
        """
        return Request("GET", f"/api/v1/accounts/{account_id}", account_decoder)

    def account_lookup(self, acct: str) -> Request[Account]:
        """Quickly lookup a username to see if it is available.

        Skips WebFinger resolution.

        Reference: https://docs.joinmastodon.org/methods/accounts/#lookup
        """
        return Request(
            "GET",
            "/api/v1/accounts/lookup",
            account_decoder,
            params=query(acct=acct),
        )

    def account_verify_credentials(self) -> Request[Account]:
        """Test to make sure that the user token works.

        Reference: https://docs.joinmastodon.org/methods/accounts/#verify_credentials
        """
        return Request(
            "GET", "/api/v1/accounts/verify_credentials", account_decoder)

    def account_update_credentials(
        self,
        display_name: str | None = None,
        note: str | None = None,
        locked: bool | None = None,
        bot: bool | None = None,
    ) -> Request[Account]:
        """Update the user's display and preferences.

        Reference: https://docs.joinmastodon.org/methods/accounts/#update_credentials
        """
        return Request(
            "PATCH",
            "/api/v1/accounts/update_credentials",
            account_decoder,
            json=body(display_name=display_name, note=note, locked=locked, bot=bot),
        )

    def account_statuses(  # noqa: PLR0913
        self,
        account_id: str,
        only_media: bool = False,
        pinned: bool = False,
        exclude_replies: bool = False,
        exclude_reblogs: bool = False,
        tagged: str | None = None,
        max_id: str | None = None,
        min_id: str | None = None,
        since_id: str | None = None,
        limit: int | None = None,
    ) -> Request[list[Status]]:
        """Statuses posted to the given account.

        Reference: https://docs.joinmastodon.org/methods/accounts/#statuses
        """
        params = query(
            only_media=only_media,
            pinned=pinned,
            exclude_replies=exclude_replies,
            exclude_reblogs=exclude_reblogs,
            tagged=tagged,
        ) + paging(max_id, since_id, min_id, limit)
        return Request(
            "GET",
            f"/api/v1/accounts/{account_id}/statuses",
            status_list_decoder,
            params=params,
        )

    def account_following(
        self,
        account_id: str,
        max_id: str | None = None,
        since_id: str | None = None,
        limit: int | None = None,
    ) -> Request[AccountList]:
        """Accounts which the given account is following.

        If network is not hidden by the account owner.

        Reference: https://docs.joinmastodon.org/methods/accounts/#following
        """
        return Request(
            "GET",
            f"/api/v1/accounts/{account_id}/following",
            account_list_decoder,
            params=paging(max_id=max_id, since_id=since_id, limit=limit),
        )

    def account_followers(
        self,
        account_id: str,
        max_id: str | None = None,
        since_id: str | None = None,
        limit: int | None = None,
    ) -> Request[AccountList]:
        """Accounts which follow the given account.

        If network is not hidden by the account owner.

        Reference: https://docs.joinmastodon.org/methods/accounts/#followers
        """
        return Request(
            "GET",
            f"/api/v1/accounts/{account_id}/followers",
            account_list_decoder,
            params=paging(max_id=max_id, since_id=since_id, limit=limit),
        )

    def account_relationships(
        self,
        account_ids: list[str],
    ) -> Request[RelationshipList]:
        """Relationships of the user to the given accounts.

        Reference: https://docs.joinmastodon.org/methods/accounts/#relationships
        """
        return Request(
            "GET",
            "/api/v1/accounts/relationships",
            relationship_list_decoder,
            params=query(id=account_ids),
        )

    def account_search(
        self,
        q: str,
        limit: int | None = None,
        resolve: bool = False,
        following: bool = False,
    ) -> Request[AccountList]:
        """Search for matching accounts by username or display name.

        Reference: https://docs.joinmastodon.org/methods/accounts/#search
        """
        return Request(
            "GET",
            "/api/v1/accounts/search",
            account_list_decoder,
            params=query(q=q, limit=limit, resolve=resolve, following=following),
        )
