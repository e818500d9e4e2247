"""Mastodon API statuses endpoints."""
from fedicodec.api.mastodon.request import Request, body
from fedicodec.api.mastodon.types.api_mastodon_types import (
    Context,
    ScheduledStatus,
    Status,
    Visibility,
)
from fedicodec.api.mastodon.types.encode_decode import (
    context_decoder,
    scheduled_status_decoder,
    status_decoder,
)


class Statuses:
    """Class containing Mastodon API statuses endpoints."""

    def status(self, status_id: str) -> Request[Status]:
        """Obtain information about a status.

        Reference: https://docs.joinmastodon.org/methods/statuses/#get
        """
        return Request("GET", f"/api/v1/statuses/{status_id}", status_decoder)

    def status_context(self, status_id: str) -> Request[Context]:
        """View statuses above and below this status in the thread.

        Reference: https://docs.joinmastodon.org/methods/statuses/#context
        """
        return Request(
            "GET", f"/api/v1/statuses/{status_id}/context", context_decoder)

    def status_post(  # noqa: PLR0913
        self,
        status: str,
        in_reply_to_id: str | None = None,
        media_ids: list[str] | None = None,
        sensitive: bool = False,
        spoiler_text: str | None = None,
        visibility: Visibility | None = None,
        language: str | None = None,
    ) -> Request[Status]:
        """Publish a status with the given parameters.

        Reference: https://docs.joinmastodon.org/methods/statuses/#create
        """
        return Request(
            "POST",
            "/api/v1/statuses",
            status_decoder,
            json=body(
                status=status,
                in_reply_to_id=in_reply_to_id,
                media_ids=media_ids or [],
                sensitive=sensitive or None,
                spoiler_text=spoiler_text,
                visibility=visibility.value if visibility else None,
                language=language,
            ),
        )

    def status_schedule(
        self,
        status: str,
        scheduled_at: str,
        visibility: Visibility | None = None,
    ) -> Request[ScheduledStatus]:
        """Schedule a status to be published at ``scheduled_at``.

        Reference: https://docs.joinmastodon.org/methods/statuses/#create
        """
        return Request(
            "POST",
            "/api/v1/statuses",
            scheduled_status_decoder,
            json=body(
                status=status,
                scheduled_at=scheduled_at,
                visibility=visibility.value if visibility else None,
            ),
        )

    def status_delete(self, status_id: str) -> Request[Status]:
        """Delete one of your own statuses.

        Returns the deleted status, with source text for redrafting.

        Reference: https://docs.joinmastodon.org/methods/statuses/#delete
        """
        return Request("DELETE", f"/api/v1/statuses/{status_id}", status_decoder)

    def status_reblog(self, status_id: str) -> Request[Status]:
        """Reshare a status on your own profile.

        Reference: https://docs.joinmastodon.org/methods/statuses/#boost
        """
        return Request(
            "POST", f"/api/v1/statuses/{status_id}/reblog", status_decoder)

    def status_unreblog(self, status_id: str) -> Request[Status]:
        """Undo a reshare of a status.

        Reference: https://docs.joinmastodon.org/methods/statuses/#unreblog
        """
        return Request(
            "POST", f"/api/v1/statuses/{status_id}/unreblog", status_decoder)

    def status_favourite(self, status_id: str) -> Request[Status]:
        """Add a status to your favourites list.

        Reference: https://docs.joinmastodon.org/methods/statuses/#favourite
        """
        return Request(
            "POST", f"/api/v1/statuses/{status_id}/favourite", status_decoder)

    def status_unfavourite(self, status_id: str) -> Request[Status]:
        """Remove a status from your favourites list.

        Reference: https://docs.joinmastodon.org/methods/statuses/#unfavourite
        """
        return Request(
            "POST", f"/api/v1/statuses/{status_id}/unfavourite", status_decoder)
