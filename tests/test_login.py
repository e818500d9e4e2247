"""Test the OAuth login flow."""
from unittest.mock import AsyncMock, MagicMock
from urllib.parse import parse_qs, urlsplit

import pytest

from fedicodec.api.mastodon import login
from fedicodec.api.mastodon.api_mastodon import Mastodon
from fedicodec.api.mastodon.api_mastodon_errors import HttpError
from fedicodec.api.mastodon.types.api_mastodon_types import App, Authorization
from fedicodec.api.mastodon.types.encode_decode import app_decoder
from tests.mocks import APP, TOKEN, account_mock

pytest_plugins = ('pytest_asyncio',)  # noqa: Q000


class TestOAuthRequests:
    """Test the OAuth request builders."""

    mastodon = Mastodon("mastodon.social")

    def test_app_create(self) -> None:
        """The app is registered with the out of band redirect."""
        request = self.mastodon.app_create("fedicodec")
        assert request.method == "POST"
        assert request.path == "/api/v1/apps"
        assert request.json == {
            "client_name": "fedicodec",
            "redirect_uris": "urn:ietf:wg:oauth:2.0:oob",
            "scopes": "read write follow push",
        }

    def test_oauth_token(self) -> None:
        """The code is exchanged with the app credentials."""
        app = app_decoder(APP)
        request = self.mastodon.oauth_token(app, "code", scopes=("read",))
        assert request.path == "/oauth/token"
        assert request.json == {
            "grant_type": "authorization_code",
            "code": "code",
            "client_id": app.client_id,
            "client_secret": app.client_secret,
            "redirect_uri": app.redirect_uri,
            "scope": "read",
        }


class TestAuthorizationUrl:
    """Test the authorization_url function."""

    def test_authorization_url(self) -> None:
        """The URL asks for a code for the app."""
        app = app_decoder(APP)
        url = urlsplit(login.authorization_url("mastodon.social", app))
        assert url.scheme == "https"
        assert url.netloc == "mastodon.social"
        assert url.path == "/oauth/authorize"
        assert parse_qs(url.query) == {
            "response_type": ["code"],
            "client_id": [app.client_id],
            "redirect_uri": ["urn:ietf:wg:oauth:2.0:oob"],
            "scope": ["read write follow push"],
        }


class TestLogin:
    """Test create_app and login."""

    async def test_create_app(self) -> None:
        """The registered app is decoded."""
        mastodon = Mastodon("mastodon.social", session=MagicMock())
        mastodon.client.request = AsyncMock(return_value=APP)  # type: ignore[method-assign]
        app = await login.create_app(mastodon, "test app")
        assert isinstance(app, App)
        assert app.client_id == APP["client_id"]

    async def test_login(self) -> None:
        """A working token becomes an Authorization and is installed."""
        mastodon = Mastodon("mastodon.social", session=MagicMock())
        mastodon.client.request = AsyncMock(  # type: ignore[method-assign]
            side_effect=[TOKEN, account_mock()])
        app = app_decoder(APP)
        authorization = await login.login(mastodon, app, "code")
        assert authorization == Authorization(
            client_id=app.client_id,
            client_secret=app.client_secret,
            token=TOKEN["access_token"],
            server="mastodon.social",
        )
        assert mastodon.token == TOKEN["access_token"]
        verify = mastodon.client.request.await_args_list[1]
        assert verify.args == ("GET", "/api/v1/accounts/verify_credentials")

    async def test_login_rejected(self) -> None:
        """A rejected code raises the HttpError."""
        mastodon = Mastodon("mastodon.social", session=MagicMock())
        mastodon.client.request = AsyncMock(  # type: ignore[method-assign]
            side_effect=HttpError(400, "Bad Request"))
        with pytest.raises(HttpError):
            await login.login(mastodon, app_decoder(APP), "bad code")
