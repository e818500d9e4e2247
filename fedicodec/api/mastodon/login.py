"""OAuth login to a Mastodon server.

Logging in takes three steps:

1. ``create_app`` registers this client with the server, once per server.
2. The user opens ``authorization_url`` and is given an authorization code.
3. ``login`` exchanges the code for a token and verifies it.

Reference: https://docs.joinmastodon.org/client/token/
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from fedicodec.api.mastodon.request import Request, body
from fedicodec.api.mastodon.types.api_mastodon_types import (
    App,
    Authorization,
    Token,
)
from fedicodec.api.mastodon.types.encode_decode import app_decoder, token_decoder

if TYPE_CHECKING:
    from fedicodec.api.mastodon.api_mastodon import Mastodon

DEFAULT_SCOPES = ("read", "write", "follow", "push")
OUT_OF_BAND_REDIRECT = "urn:ietf:wg:oauth:2.0:oob"


class OAuth:
    """Class containing Mastodon API OAuth endpoints."""

    def app_create(
        self,
        client_name: str,
        redirect_uri: str = OUT_OF_BAND_REDIRECT,
        scopes: tuple[str, ...] = DEFAULT_SCOPES,
        website: str | None = None,
    ) -> Request[App]:
        """Create a new application to obtain OAuth2 credentials.

        Reference: https://docs.joinmastodon.org/methods/apps/#create
        """
        return Request(
            "POST",
            "/api/v1/apps",
            app_decoder,
            json=body(
                client_name=client_name,
                redirect_uris=redirect_uri,
                scopes=" ".join(scopes),
                website=website,
            ),
        )

    def oauth_token(
        self,
        app: App,
        code: str,
        scopes: tuple[str, ...] = DEFAULT_SCOPES,
    ) -> Request[Token]:
        """Obtain an access token for an authorization code.

        Reference: https://docs.joinmastodon.org/methods/oauth/#token
        """
        return Request(
            "POST",
            "/oauth/token",
            token_decoder,
            json=body(
                grant_type="authorization_code",
                code=code,
                client_id=app.client_id,
                client_secret=app.client_secret,
                redirect_uri=app.redirect_uri,
                scope=" ".join(scopes),
            ),
        )


async def create_app(
    api: Mastodon,
    client_name: str,
    redirect_uri: str = OUT_OF_BAND_REDIRECT,
    scopes: tuple[str, ...] = DEFAULT_SCOPES,
    website: str | None = None,
) -> App:
    """Register a client application on the server of ``api``."""
    logging.info(f"Registering {client_name} on {api.server}")
    return await api.send(
        api.app_create(client_name, redirect_uri, scopes, website))


def authorization_url(
    server: str,
    app: App,
    scopes: tuple[str, ...] = DEFAULT_SCOPES,
) -> str:
    """The page where the user grants ``app`` access to their account."""
    params = urlencode({
        "response_type": "code",
        "client_id": app.client_id,
        "redirect_uri": app.redirect_uri,
        "scope": " ".join(scopes),
    })
    return f"https://{server}/oauth/authorize?{params}"


async def get_token(
    api: Mastodon,
    app: App,
    code: str,
    scopes: tuple[str, ...] = DEFAULT_SCOPES,
) -> Token:
    """Exchange an authorization code for an access token."""
    return await api.send(api.oauth_token(app, code, scopes))


async def login(
    api: Mastodon,
    app: App,
    code: str,
    scopes: tuple[str, ...] = DEFAULT_SCOPES,
) -> Authorization:
    """Get a token for ``code`` and check that it works.

    On success the token is also installed on ``api``.
    """
    token = await get_token(api, app, code, scopes)
    api.token = token.access_token
    account = await api.send(api.account_verify_credentials())
    logging.info(f"Logged in to {api.server} as {account.acct}")
    return Authorization(
        client_id=app.client_id,
        client_secret=app.client_secret,
        token=token.access_token,
        server=api.server,
    )
