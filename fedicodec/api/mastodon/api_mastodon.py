"""Mastodon API functions."""
import logging
import re
from typing import Any, TypeVar

import aiohttp

from fedicodec.api.client import HttpMethod
from fedicodec.api.mastodon.accounts import Accounts
from fedicodec.api.mastodon.api_mastodon_errors import DecodeError
from fedicodec.api.mastodon.favourites import Favourites
from fedicodec.api.mastodon.filters import Filters
from fedicodec.api.mastodon.instance import InstanceInfo
from fedicodec.api.mastodon.login import OAuth
from fedicodec.api.mastodon.notifications import Notifications
from fedicodec.api.mastodon.relationships import Relationships
from fedicodec.api.mastodon.request import Request
from fedicodec.api.mastodon.search import Search
from fedicodec.api.mastodon.statuses import Statuses
from fedicodec.api.mastodon.timeline import Timeline
from fedicodec.api.mastodon.types.encode_decode import decode_value

T = TypeVar("T")

USER_AGENT = "fedicodec/1.0.0 (+https://docs.joinmastodon.org/client/intro/)"


def normalize_server(server: str) -> str:
    """Strip the scheme and trailing slash, in case someone provided a url."""
    return re.sub("^(https?://)?([^/]*)/?$", "\\2", server)


class Mastodon(Statuses, Accounts, Notifications, Favourites, Timeline,
            Search, Relationships, Filters, InstanceInfo, OAuth,
            ):
    """A class representing a Mastodon instance."""

    def __init__(
        self,
        server: str,
        token: str | None = None,
        session: aiohttp.ClientSession | None = None,
        timeout: int = 60,
    ) -> None:
        """Initialize the Mastodon instance.

        Without a ``session``, one is created on the first request and
        closed by ``cleanup``.
        """
        self.server = normalize_server(server)
        self.timeout = timeout
        self._owns_session = session is None
        logging.debug(f"Creating Mastodon client for {self.server}")
        self.client = HttpMethod(
            api_base_url=self.server,
            session=session,  # type: ignore[arg-type]
            token=token,
        )

    def _ensure_session(self) -> None:
        if self.client.session is None:
            self.client.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={"User-Agent": USER_AGENT},
            )

    @property
    def token(self) -> str | None:
        """The access token sent with every request."""
        return self.client.token

    @token.setter
    def token(self, token: str | None) -> None:
        self.client.token = token

    async def send(self, request: Request[T]) -> T:
        """Perform ``request`` and decode the response body.

        Raises
        ------
        HttpError: If the server answers with an error status.
        MastodonNetworkError: If the server cannot be reached.
        DecodeError: If the body is not what ``request.decoder`` expects.
        """
        self._ensure_session()
        body: Any = await self.client.request(
            request.method,
            request.path,
            params=list(request.params) or None,
            json=request.json,
        )
        result = decode_value(request.decoder, body)
        if isinstance(result, DecodeError):
            logging.error(
                f"Unexpected response to {request.method} {request.path} "
                f"from {self.server}: {result}",
            )
            raise result
        return result

    async def cleanup(self) -> None:
        """Close the session, if this instance created it."""
        if self._owns_session and self.client.session is not None:
            await self.client.session.close()
            self.client.session = None

    async def __aenter__(self) -> "Mastodon":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.cleanup()
