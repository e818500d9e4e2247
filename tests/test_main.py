"""Test the command line."""
import json
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from fedicodec.api.mastodon.api_mastodon import Mastodon
from fedicodec.api.mastodon.api_mastodon_errors import HttpError
from fedicodec.api.mastodon.types.api_mastodon_types import Authorization
from fedicodec.api.mastodon.types.encode_decode import (
    app_decoder,
    status_decoder,
)
from fedicodec.argparser import parse_arguments
from fedicodec.helpers.cache_manager import AuthorizationStore
from fedicodec.main import build_request, main, to_json
from tests.mocks import APP, status_mock

pytest_plugins = ('pytest_asyncio',)  # noqa: Q000


class TestParseArguments:
    """Test the parse_arguments function."""

    def test_defaults(self) -> None:
        """Flags have their defaults."""
        arguments = parse_arguments(["instance"])
        assert arguments.request == "instance"
        assert arguments.argument is None
        assert arguments.http_timeout == 60
        assert arguments.state_dir == "artifacts"

    def test_config_file(self, tmp_path: Path) -> None:
        """Keys of the config file override flags."""
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"server": "example.com", "http-timeout": 5}))
        arguments = parse_arguments(["home", "-c", str(config), "--server", "x"])
        assert arguments.server == "example.com"
        assert arguments.http_timeout == 5

    def test_missing_config_file(self, tmp_path: Path) -> None:
        """A missing config file is fatal."""
        with pytest.raises(SystemExit):
            parse_arguments(["home", "-c", str(tmp_path / "missing.json")])


class TestBuildRequest:
    """Test the build_request function."""

    mastodon = Mastodon("example.com")

    def test_status(self) -> None:
        """The argument is the status id."""
        request = build_request(self.mastodon, parse_arguments(["status", "42"]))
        assert request.path == "/api/v1/statuses/42"

    def test_limit(self) -> None:
        """The limit is passed to list requests."""
        request = build_request(
            self.mastodon, parse_arguments(["home", "--limit", "3"]))
        assert request.params == (("limit", "3"),)

    def test_missing_argument(self) -> None:
        """Requests for one entity need its id."""
        with pytest.raises(SystemExit):
            build_request(self.mastodon, parse_arguments(["account"]))


class TestToJson:
    """Test the to_json function."""

    def test_entity(self) -> None:
        """A single entity is encoded as an object."""
        status = status_decoder(status_mock())
        assert json.loads(to_json(status))["id"] == status.id

    def test_list(self) -> None:
        """A list of entities is encoded as an array."""
        statuses = [status_decoder(status_mock(id=str(i))) for i in range(2)]
        assert [s["id"] for s in json.loads(to_json(statuses))] == ["0", "1"]


class TestMain:
    """Test the main function."""

    async def test_fetch_status(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """The fetched entity is printed as JSON."""
        send = AsyncMock(return_value=status_decoder(status_mock(id="7")))
        monkeypatch.setattr(Mastodon, "send", send)
        await main(parse_arguments([
            "status", "7", "--server", "example.com", "--state-dir", str(tmp_path)]))
        assert json.loads(capsys.readouterr().out)["id"] == "7"

    async def test_stored_authorization(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """The stored server and token are used when none are given."""
        AuthorizationStore(tmp_path).save_authorization(Authorization(
            client_id="id",
            client_secret="secret",  # noqa: S106
            token="stored",  # noqa: S106
            server="example.com",
        ))
        tokens = []

        async def send(self: Mastodon, _request: object) -> object:
            tokens.append((self.server, self.token))
            return status_decoder(status_mock())

        monkeypatch.setattr(Mastodon, "send", send)
        await main(parse_arguments(["home", "--state-dir", str(tmp_path)]))
        assert tokens == [("example.com", "stored")]

    async def test_no_server(self, tmp_path: Path) -> None:
        """Without a server or an authorization there is nothing to do."""
        with pytest.raises(SystemExit):
            await main(parse_arguments(["home", "--state-dir", str(tmp_path)]))

    async def test_http_error(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """API errors are fatal."""
        monkeypatch.setattr(
            Mastodon, "send", AsyncMock(side_effect=HttpError(404, "Not Found")))
        with pytest.raises(SystemExit):
            await main(parse_arguments([
                "status", "1", "--server", "example.com",
                "--state-dir", str(tmp_path)]))

    async def test_register(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Registering stores the app and prints the authorization URL."""
        monkeypatch.setattr(
            Mastodon, "send", AsyncMock(return_value=app_decoder(APP)))
        await main(parse_arguments([
            "register", "--server", "example.com", "--state-dir", str(tmp_path)]))
        assert capsys.readouterr().out.startswith(
            "https://example.com/oauth/authorize?")
        assert AuthorizationStore(tmp_path).load_app("example.com") == \
            app_decoder(APP)
