"""Test the Mastodon class."""
from typing import ClassVar
from unittest.mock import AsyncMock, MagicMock

import pytest

from fedicodec.api.mastodon.api_mastodon import Mastodon, normalize_server
from fedicodec.api.mastodon.api_mastodon_errors import (
    HttpError,
    MissingField,
    UnknownEnumValue,
)
from fedicodec.api.mastodon.request import Request, body, paging, query
from fedicodec.api.mastodon.types.api_mastodon_types import (
    AccountList,
    FilterContext,
    NotificationType,
    Relationship,
    RelationshipList,
    Results,
    Status,
    Visibility,
)
from fedicodec.api.mastodon.types.encode_decode import status_decoder
from tests.mocks import RELATIONSHIP, account_mock, status_mock

pytest_plugins = ('pytest_asyncio',)  # noqa: Q000


def mastodon_mock(response: object) -> Mastodon:
    """A Mastodon instance whose client answers every request with ``response``."""
    mastodon = Mastodon("example.com", "token", session=MagicMock())
    mastodon.client.request = AsyncMock(return_value=response)  # type: ignore[method-assign]
    return mastodon


class TestRequestHelpers:
    """Test query, body and paging."""

    def test_query(self) -> None:
        """None and False are left out, True is sent as true."""
        assert query(a="1", b=None, c=False, d=True, e=5) == (
            ("a", "1"), ("d", "true"), ("e", "5"))

    def test_query_lists(self) -> None:
        """Lists are sent as repeated array parameters."""
        assert query(id=["1", "2"]) == (("id[]", "1"), ("id[]", "2"))

    def test_body(self) -> None:
        """None and empty lists are left out, False is kept."""
        assert body(status="hi", media_ids=[], sensitive=False, language=None) == {
            "status": "hi", "sensitive": False}

    def test_paging(self) -> None:
        """Only the given paging parameters are sent."""
        assert paging(max_id="10", limit=20) == (("max_id", "10"), ("limit", "20"))
        assert paging() == ()


class TestMastodon:
    """Test the Mastodon class."""

    mastodon: ClassVar[Mastodon] = Mastodon("https://example.com/", "token")

    def test_init(self) -> None:
        """The server name is normalized and the token installed."""
        assert self.mastodon.server == "example.com"
        assert self.mastodon.token == "token"  # noqa: S105
        assert self.mastodon.client.api_base_url == "example.com"

    def test_normalize_server(self) -> None:
        """Schemes and trailing slashes are removed."""
        assert normalize_server("mastodon.social") == "mastodon.social"
        assert normalize_server("http://mastodon.social/") == "mastodon.social"

    def test_token_setter(self) -> None:
        """Setting the token changes what the client sends."""
        mastodon = Mastodon("example.com", session=MagicMock())
        assert mastodon.client.headers() == {}
        mastodon.token = "new"  # noqa: S105
        assert mastodon.client.headers() == {"Authorization": "Bearer new"}

    class TestRequests:
        """Test the request builders."""

        mastodon: ClassVar[Mastodon] = Mastodon("example.com")

        def test_status(self) -> None:
            """Test the status request."""
            request = self.mastodon.status("109612104811129202")
            assert request == Request(
                "GET", "/api/v1/statuses/109612104811129202", status_decoder)

        def test_status_post(self) -> None:
            """Test the status_post request leaves out unset fields."""
            request = self.mastodon.status_post(
                "Hello", visibility=Visibility.UNLISTED)
            assert request.method == "POST"
            assert request.path == "/api/v1/statuses"
            assert request.json == {"status": "Hello", "visibility": "unlisted"}

        def test_status_schedule(self) -> None:
            """Test the status_schedule request."""
            request = self.mastodon.status_schedule(
                "Later", "2030-01-01T00:00:00.000Z")
            assert request.json == {
                "status": "Later", "scheduled_at": "2030-01-01T00:00:00.000Z"}

        def test_status_actions(self) -> None:
            """Test the status action requests."""
            assert self.mastodon.status_reblog("1").path == \
                "/api/v1/statuses/1/reblog"
            assert self.mastodon.status_unfavourite("1").path == \
                "/api/v1/statuses/1/unfavourite"
            assert self.mastodon.status_delete("1").method == "DELETE"

        def test_account_statuses(self) -> None:
            """Test the account_statuses request."""
            request = self.mastodon.account_statuses(
                "1", exclude_replies=True, limit=40)
            assert request.path == "/api/v1/accounts/1/statuses"
            assert request.params == (("exclude_replies", "true"), ("limit", "40"))

        def test_account_lookup(self) -> None:
            """Test the account_lookup request."""
            request = self.mastodon.account_lookup("teq@mastodon.shatteredsky.net")
            assert request.params == (("acct", "teq@mastodon.shatteredsky.net"),)

        def test_account_update_credentials(self) -> None:
            """Test the account_update_credentials request keeps False."""
            request = self.mastodon.account_update_credentials(locked=False)
            assert request.method == "PATCH"
            assert request.json == {"locked": False}

        def test_account_relationships(self) -> None:
            """Test the account_relationships request."""
            request = self.mastodon.account_relationships(["1", "2"])
            assert request.params == (("id[]", "1"), ("id[]", "2"))
            result = request.decoder([RELATIONSHIP])
            assert isinstance(result, RelationshipList)

        def test_notifications(self) -> None:
            """Test the notifications request with type filters."""
            request = self.mastodon.notifications(
                limit=5, exclude_types=[NotificationType.FOLLOW])
            assert request.params == (("limit", "5"), ("exclude_types[]", "follow"))

        def test_timelines(self) -> None:
            """Test the timeline requests."""
            assert self.mastodon.timelines_home(limit=1).params == (("limit", "1"),)
            assert self.mastodon.timelines_public(local=True).params == (
                ("local", "true"),)
            assert self.mastodon.timelines_hashtag("#python").path == \
                "/api/v1/timelines/tag/python"

        def test_search_v2(self) -> None:
            """Test the search_v2 request."""
            request = self.mastodon.search_v2("python", resolve=True)
            assert request.path == "/api/v2/search"
            assert request.params == (("q", "python"), ("resolve", "true"))

        def test_relationship_actions(self) -> None:
            """Test the account action requests."""
            follow = self.mastodon.account_follow("1", reblogs=False)
            assert follow.path == "/api/v1/accounts/1/follow"
            assert follow.json == {"reblogs": False}
            assert self.mastodon.account_unmute("1").json is None

        def test_filter_create(self) -> None:
            """Test the filter_create request."""
            request = self.mastodon.filter_create(
                "spoiler", [FilterContext.HOME, FilterContext.PUBLIC])
            assert request.json == {
                "phrase": "spoiler",
                "context": ["home", "public"],
                "irreversible": False,
                "whole_word": False,
            }

    class TestSend:
        """Test the send method."""

        async def test_send_status(self) -> None:
            """Test a status response is decoded."""
            mastodon = mastodon_mock(status_mock())
            result = await mastodon.send(mastodon.status("1"))
            assert isinstance(result, Status)
            mastodon.client.request.assert_awaited_once_with(
                "GET", "/api/v1/statuses/1", params=None, json=None)

        async def test_send_params(self) -> None:
            """Test query parameters are passed as pairs."""
            mastodon = mastodon_mock([])
            result = await mastodon.send(mastodon.account_followers("1", limit=2))
            assert result == AccountList(accounts=[])
            assert mastodon.client.request.call_args.kwargs["params"] == [
                ("limit", "2")]

        async def test_send_list(self) -> None:
            """Test a list response is decoded element by element."""
            mastodon = mastodon_mock([status_mock(id="1"), status_mock(id="2")])
            result = await mastodon.send(mastodon.timelines_home())
            assert [s.id for s in result] == ["1", "2"]

        async def test_send_search(self) -> None:
            """Test a search response is decoded as Results."""
            mastodon = mastodon_mock({
                "accounts": [account_mock()], "statuses": [], "hashtags": []})
            result = await mastodon.send(mastodon.search_v2("u"))
            assert isinstance(result, Results)
            assert result.accounts[0].acct == "u"

        async def test_send_relationship(self) -> None:
            """Test an account action response is decoded as a Relationship."""
            mastodon = mastodon_mock(RELATIONSHIP)
            result = await mastodon.send(mastodon.account_follow("1"))
            assert isinstance(result, Relationship)

        async def test_send_empty(self) -> None:
            """Test requests without a meaningful response return the body."""
            mastodon = mastodon_mock({})
            assert await mastodon.send(mastodon.notifications_clear()) == {}

        async def test_send_decode_error(self) -> None:
            """Test an unexpected body raises the DecodeError."""
            mastodon = mastodon_mock(status_mock(visibility="bogus"))
            with pytest.raises(UnknownEnumValue):
                await mastodon.send(mastodon.status("1"))

        async def test_send_missing_field(self) -> None:
            """Test a body missing a field raises MissingField."""
            mastodon = mastodon_mock({"id": "1"})
            with pytest.raises(MissingField):
                await mastodon.send(mastodon.account("1"))

        async def test_send_http_error(self) -> None:
            """Test HTTP errors are passed on."""
            mastodon = mastodon_mock(None)
            mastodon.client.request.side_effect = HttpError(404, "Not Found")
            with pytest.raises(HttpError):
                await mastodon.send(mastodon.status("1"))

    class TestSession:
        """Test the session lifecycle."""

        async def test_given_session_not_closed(self) -> None:
            """A session passed in belongs to the caller."""
            session = MagicMock(close=AsyncMock())
            async with Mastodon("example.com", session=session):
                pass
            session.close.assert_not_awaited()

        async def test_own_session_closed(self) -> None:
            """A session created by the instance is closed on exit."""
            async with Mastodon("example.com") as mastodon:
                mastodon._ensure_session()  # noqa: SLF001
                session = mastodon.client.session
                assert session is not None
            assert session.closed
            assert mastodon.client.session is None
