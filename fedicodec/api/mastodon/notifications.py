"""Mastodon API notifications endpoints."""
from typing import Any

from fedicodec.api.mastodon.request import Request, paging, query
from fedicodec.api.mastodon.types.api_mastodon_types import (
    Notification,
    NotificationType,
)
from fedicodec.api.mastodon.types.decoders import anything
from fedicodec.api.mastodon.types.encode_decode import (
    notification_decoder,
    notification_list_decoder,
)


class Notifications:
    """Class containing Mastodon API notifications endpoints."""

    def notifications(  # noqa: PLR0913
        self,
        max_id: str | None = None,
        since_id: str | None = None,
        min_id: str | None = None,
        limit: int | None = None,
        types: list[NotificationType] | None = None,
        exclude_types: list[NotificationType] | None = None,
        account_id: str | None = None,
    ) -> Request[list[Notification]]:
        """Notifications concerning the user.

        Reference: https://docs.joinmastodon.org/methods/notifications/#get
        """
        params = paging(max_id, since_id, min_id, limit) + query(
            types=[t.value for t in types] if types else None,
            exclude_types=[t.value for t in exclude_types] if exclude_types else None,
            account_id=account_id,
        )
        return Request(
            "GET",
            "/api/v1/notifications",
            notification_list_decoder,
            params=params,
        )

    def notification(self, notification_id: str) -> Request[Notification]:
        """View information about a notification with a given ID.

        Reference: https://docs.joinmastodon.org/methods/notifications/#get-one
        """
        return Request(
            "GET",
            f"/api/v1/notifications/{notification_id}",
            notification_decoder,
        )

    def notifications_clear(self) -> Request[Any]:
        """Clear all notifications from the server.

        Reference: https://docs.joinmastodon.org/methods/notifications/#clear
        """
        return Request("POST", "/api/v1/notifications/clear", anything)

    def notification_dismiss(self, notification_id: str) -> Request[Any]:
        """Dismiss a single notification from the server.

        Reference: https://docs.joinmastodon.org/methods/notifications/#dismiss
        """
        return Request(
            "POST",
            f"/api/v1/notifications/{notification_id}/dismiss",
            anything,
        )
