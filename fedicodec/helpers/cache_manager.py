"""Manage stored credentials.

This module contains a class for keeping the login state between runs.
The operations include writing and loading the current Authorization, and the
registered App for each server, as JSON files managed by AuthorizationStore.
"""
import json
import logging
from pathlib import Path
from typing import Any

from fedicodec.api.mastodon.api_mastodon_errors import DecodeError
from fedicodec.api.mastodon.types.api_mastodon_types import App, Authorization
from fedicodec.api.mastodon.types.encode_decode import (
    app_decoder,
    authorization_decoder,
    decode_value,
    encode_entity,
)


class AuthorizationStore:
    """A class to manage stored credentials.

    Methods
    -------
    save_authorization(self, authorization: Authorization) -> None
        Write the current authorization to the storage.
    load_authorization(self) -> Authorization | None
        Load the current authorization, if there is one.
    save_app(self, server: str, app: App) -> None
        Remember the app registered on a server.
    load_app(self, server: str) -> App | None
        Load the app registered on a server, if there is one.
    forget(self, server: str) -> None
        Remove everything stored for a server.
    """

    AUTHORIZATION_FILE = "authorization.json"
    APPS_FILE = "apps.json"

    def __init__(self, base_dir: str | Path) -> None:
        """Initialize the AuthorizationStore.

        Parameters
        ----------
        base_dir : str | Path
            The directory for storing the credential files. It is created
            on the first write.

        """
        self.base_dir = Path(base_dir)

    def _get_file_path(self, file_name: str) -> Path:
        return self.base_dir / file_name

    def _write_file(self, file_name: str, data: Any) -> None:
        """Write JSON data to a file.

        Parameters
        ----------
        file_name : str
            The name of the file.
        data : Any
            The JSON value to write to the file.

        """
        self.base_dir.mkdir(parents=True, exist_ok=True)
        file_path = self._get_file_path(file_name)
        with file_path.open("w", encoding="utf-8") as file:
            json.dump(data, file, indent=2)
        logging.debug(f"Wrote {file_path}")

    def _read_file(self, file_name: str) -> Any:
        """Read JSON data from a file.

        Returns None if the file does not exist or is not valid JSON.
        """
        file_path = self._get_file_path(file_name)
        if not file_path.exists():
            return None
        try:
            with file_path.open(encoding="utf-8") as file:
                return json.load(file)
        except (OSError, json.JSONDecodeError):
            logging.exception(f"Error reading {file_path}")
            return None

    def save_authorization(self, authorization: Authorization) -> None:
        """Write the current authorization to disk."""
        self._write_file(
            self.AUTHORIZATION_FILE, encode_entity(authorization))

    def load_authorization(self) -> Authorization | None:
        """Load the current authorization from disk.

        Returns
        -------
        Authorization | None
            The stored authorization, or None if there is none or it
            cannot be decoded.

        """
        data = self._read_file(self.AUTHORIZATION_FILE)
        if data is None:
            return None
        authorization = decode_value(authorization_decoder, data)
        if isinstance(authorization, DecodeError):
            logging.warning(f"Ignoring stored authorization: {authorization}")
            return None
        return authorization

    def _load_apps(self) -> dict[str, Any]:
        apps = self._read_file(self.APPS_FILE)
        if not isinstance(apps, dict):
            return {}
        return apps

    def save_app(self, server: str, app: App) -> None:
        """Remember the app registered on ``server``."""
        apps = self._load_apps()
        apps[server] = encode_entity(app)
        self._write_file(self.APPS_FILE, apps)

    def load_app(self, server: str) -> App | None:
        """Load the app registered on ``server``."""
        data = self._load_apps().get(server)
        if data is None:
            return None
        app = decode_value(app_decoder, data)
        if isinstance(app, DecodeError):
            logging.warning(f"Ignoring stored app for {server}: {app}")
            return None
        return app

    def forget(self, server: str) -> None:
        """Remove the app of ``server``, and the authorization if it is for it."""
        apps = self._load_apps()
        if apps.pop(server, None) is not None:
            self._write_file(self.APPS_FILE, apps)
        authorization = self.load_authorization()
        if authorization is not None and authorization.server == server:
            self._get_file_path(self.AUTHORIZATION_FILE).unlink()
            logging.info(f"Forgot authorization for {server}")
