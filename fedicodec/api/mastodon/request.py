"""Logical requests to the Mastodon API.

A Request names one HTTP call and the decoder for its response body. The
endpoint classes (Accounts, Statuses, ...) only build Requests; nothing is
sent until ``Mastodon.send`` is awaited.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fedicodec.api.mastodon.types.decoders import Decoder

T = TypeVar("T")

Params = tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class Request(Generic[T]):
    """One call to the API and how to decode its response."""

    method: str
    path: str
    decoder: Decoder[T]
    params: Params = ()
    json: Any = None


def query(**values: Any) -> Params:
    """Build query parameters, leaving out empty values.

    ``None`` and ``False`` are left out, ``True`` is sent as ``true`` and
    lists are sent as repeated ``key[]`` parameters.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in values.items():
        if value is None or value is False:
            continue
        if value is True:
            pairs.append((key, "true"))
        elif isinstance(value, list | tuple):
            pairs.extend((f"{key}[]", str(item)) for item in value)
        else:
            pairs.append((key, str(value)))
    return tuple(pairs)


def body(**values: Any) -> dict[str, Any]:
    """Build a JSON request body, leaving out None and empty lists."""
    return {
        key: value
        for key, value in values.items()
        if value is not None and value != []
    }


def paging(
    max_id: str | None = None,
    since_id: str | None = None,
    min_id: str | None = None,
    limit: int | None = None,
) -> Params:
    """Query parameters for paginated endpoints.

    Reference: https://docs.joinmastodon.org/api/guidelines/#pagination
    """
    return query(max_id=max_id, since_id=since_id, min_id=min_id, limit=limit)
