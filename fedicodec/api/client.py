"""Generic client for API requests."""
import asyncio
import logging
from typing import Any

import aiohttp

from fedicodec.api.mastodon.api_mastodon_errors import (
    DecodeError,
    HttpError,
    MastodonNetworkError,
    TypeMismatch,
)
from fedicodec.api.mastodon.types.encode_decode import decode_value, error_decoder
from fedicodec.helpers.helpers import Response, parse_datetime


class HttpMethod:
    """A class representing a request client."""

    def __init__(
        self,
        api_base_url: str,
        session: aiohttp.ClientSession,
        token: str | None = None,
    ) -> None:
        """Initialize the client."""
        self.api_base_url = api_base_url
        self.token = token
        self.session = session

    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        if self.token is None:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    async def request(
        self,
        method: str,
        endpoint: str,
        params: Any = None,
        json: Any = None,
    ) -> Any:
        """Perform a request to the server and return the JSON body."""
        url = f"https://{self.api_base_url}{endpoint}"
        logging.debug(f"{method} {url} with {params or json}")
        try:
            async with self.session.request(
                method,
                url,
                headers=self.headers(),
                params=params,
                json=json,
            ) as response:
                logging.debug(f"{method} {url} status {response.status}")
                return await self.handle_response(response)
        except asyncio.TimeoutError as e:
            msg = f"Timeout error with API on server {self.api_base_url}."
            logging.warning(msg)
            raise MastodonNetworkError(msg) from e
        except aiohttp.ClientError as e:
            msg = f"Error with API on server {self.api_base_url}: {e}"
            logging.warning(msg)
            raise MastodonNetworkError(msg) from e

    async def get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Perform a GET request to the server."""
        return await self.request("GET", endpoint, params=params)

    async def post(
        self,
        endpoint: str,
        json: Any = None,
    ) -> Any:
        """Perform a POST request to the server."""
        return await self.request("POST", endpoint, json=json)

    async def handle_response_errors(
        self,
        response: aiohttp.ClientResponse,
    ) -> HttpError:
        """Build the HttpError for a failed response.

        The body is decoded as an Error entity when it is one.
        """
        if response.status == Response.UNAUTHORIZED:
            logging.error(
                f"Error with API on server {self.api_base_url}. "
                f"401 Authentication error: {response.reason}",
            )
        elif response.status == Response.TOO_MANY_REQUESTS:
            logging.error(
                f"Error with API on server {self.api_base_url}. "
                f"429 Too many requests: {response.reason}",
            )
        elif response.status >= Response.INTERNAL_SERVER_ERROR:
            logging.warning(
                f"Error with API on server {self.api_base_url}. "
                f"{response.status} Server error: {response.reason}",
            )
        else:
            logging.error(
                f"Error with API on server {self.api_base_url}. "
                f"{response.status} Client error: {response.reason}",
            )
        error = None
        try:
            body = await response.json(content_type=None)
        except ValueError:
            body = None
        if body is not None:
            decoded = decode_value(error_decoder(str(response.status)), body)
            if not isinstance(decoded, DecodeError):
                error = decoded
        return HttpError(
            response.status,
            response.reason,
            error=error,
            ratelimit_reset=parse_datetime(
                response.headers.get("X-RateLimit-Reset")),
        )

    async def handle_response(
        self,
        response: aiohttp.ClientResponse,
    ) -> Any:
        """Return the JSON body of a successful response.

        Raises HttpError for other statuses and TypeMismatch for a body that
        is not JSON.
        """
        if not Response.OK <= response.status < Response.MULTIPLE_CHOICES:
            raise await self.handle_response_errors(response)
        if response.status == Response.NO_CONTENT:
            return {}
        try:
            body = await response.json(content_type=None)
        except ValueError as e:
            logging.error(f"Invalid JSON from {response.url}: {e}")
            msg = f"invalid JSON: {e}"
            raise TypeMismatch(msg) from e
        if body is None:  # Successful response with no body
            return {}
        return body
