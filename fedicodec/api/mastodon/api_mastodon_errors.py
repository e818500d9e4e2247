# api_mastodon_errors.py - error classes
from __future__ import annotations

from datetime import datetime  # noqa: TCH003
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types.api_mastodon_types import Error


##
# Exceptions
##
class MastodonError(Exception):
    """Base class for fedicodec exceptions."""


class MastodonIllegalArgumentError(ValueError, MastodonError):
    """Raised when an incorrect parameter is passed to a function."""


class MastodonIOError(IOError, MastodonError):
    """Base class for fedicodec I/O errors."""


class MastodonNetworkError(MastodonIOError):
    """Raised when network communication with the server fails."""


##
# Decode errors
##
class DecodeError(MastodonError):
    """Raised when a JSON value cannot be decoded into an entity.

    ``path`` is the chain of object keys and list indices leading from the
    decoded root to the offending value. ``entity`` is the name of the
    innermost entity that was being decoded when the failure happened.
    """

    reason = "invalid value"

    def __init__(
        self,
        detail: str = "",
        path: tuple[str | int, ...] = (),
        entity: str | None = None,
    ) -> None:
        """Initialize the error."""
        self.detail = detail
        self.path = path
        self.entity = entity
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """A human readable description naming the entity and field."""
        where = "".join(
            f"[{step}]" if isinstance(step, int) else f".{step}"
            for step in self.path
        ) or "<root>"
        prefix = f"{self.entity}: " if self.entity else ""
        suffix = f": {self.detail}" if self.detail else ""
        return f"{prefix}{self.reason} at {where}{suffix}"

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecodeError):
            return NotImplemented
        return (type(self), self.detail, self.path, self.entity) == (
            type(other), other.detail, other.path, other.entity)

    def __hash__(self) -> int:
        return hash((type(self), self.detail, self.path, self.entity))


class MissingField(DecodeError):
    """Raised when a required key is absent."""

    reason = "missing field"


class TypeMismatch(DecodeError):
    """Raised when a key is present with an incompatible JSON type."""

    reason = "type mismatch"


class UnknownEnumValue(DecodeError):
    """Raised when a string is outside of its closed set of values."""

    reason = "unknown variant"


class NoMatchingShape(DecodeError):
    """Raised when no known entity decoder accepts a value."""

    reason = "no matching entity shape"


##
# HTTP errors
##
class HttpError(MastodonError):
    """Raised when the Mastodon API answers with a non-success status.

    ``error`` holds the decoded Error entity when the body could be parsed,
    and ``ratelimit_reset`` the time the rate limit resets, if the server
    sent one.
    """

    def __init__(
        self,
        status: int | None,
        reason: str | None = None,
        error: Error | None = None,
        ratelimit_reset: datetime | None = None,
    ) -> None:
        """Initialize the error."""
        self.status = status
        self.reason = reason
        self.error = error
        self.ratelimit_reset = ratelimit_reset
        message = f"HTTP {status} {reason or ''}".strip()
        if error is not None:
            message = f"{message}: {error.error}"
        super().__init__(message)
