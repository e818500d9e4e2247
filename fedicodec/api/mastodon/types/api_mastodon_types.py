"""Mastodon types.

Entities are frozen pydantic models named and shaped after the wire JSON.
Decoding is strict: a string field does not accept a number, an integer
field does not accept a boolean or a string. The exceptions are the text
fields that the API sends either way, and the enumerations, which are read
from their lowercase wire strings.

A ``null`` for a field with a default gives the default. ``raw`` holds the
payload an entity was decoded from; it is never encoded and does not take
part in equality.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

import pydantic
from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Discriminator,
    ModelWrapValidatorHandler,
    NonNegativeInt,
    SerializationInfo,
    Strict,
    ValidationInfo,
    field_validator,
    model_serializer,
    model_validator,
)

KEEP_RAW = "keep_raw"
"""Validation context key: decoded entities keep their payload in ``raw``."""

_META_SHAPE = "__meta_shape__"

##
# Enumerations
##


class Visibility(Enum):
    """Who can see a status."""

    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"
    DIRECT = "direct"


class AttachmentType(Enum):
    """The kind of media behind an Attachment."""

    UNKNOWN = "unknown"
    IMAGE = "image"
    GIFV = "gifv"
    VIDEO = "video"


class CardType(Enum):
    """The kind of preview a Card renders."""

    LINK = "link"
    PHOTO = "photo"
    VIDEO = "video"
    RICH = "rich"


class FilterContext(Enum):
    """Where a Filter applies."""

    HOME = "home"
    NOTIFICATIONS = "notifications"
    PUBLIC = "public"
    THREAD = "thread"


class NotificationType(Enum):
    """What a Notification is about."""

    FOLLOW = "follow"
    MENTION = "mention"
    REBLOG = "reblog"
    FAVOURITE = "favourite"


_Visibility = Annotated[Visibility, Strict(False)]
_AttachmentType = Annotated[AttachmentType, Strict(False)]
_CardType = Annotated[CardType, Strict(False)]
_FilterContext = Annotated[FilterContext, Strict(False)]
_NotificationType = Annotated[NotificationType, Strict(False)]


def _number_as_text(value: Any) -> Any:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return value


def _int_as_float(value: Any) -> Any:
    if isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


Text = Annotated[str, BeforeValidator(_number_as_text)]
"""A string the API sometimes sends as a number."""

Number = Annotated[float, BeforeValidator(_int_as_float)]


class MastodonEntity(BaseModel):
    """Base class of the API entities."""

    model_config = ConfigDict(frozen=True, strict=True)

    raw: Any = pydantic.Field(default=None, exclude=True, repr=False)

    @classmethod
    def _prepare(cls, data: dict[str, Any], _context: dict[str, Any]) -> dict[str, Any]:
        """Adjust an incoming object before its fields are validated."""
        return data

    @model_validator(mode="wrap")
    @classmethod
    def _from_payload(
        cls,
        value: Any,
        handler: ModelWrapValidatorHandler[MastodonEntity],
        info: ValidationInfo,
    ) -> MastodonEntity:
        if not isinstance(value, dict):
            return handler(value)
        if _META_SHAPE in value:
            value = {key: item for key, item in value.items() if key != _META_SHAPE}
        context = info.context or {}
        data = cls._prepare(value, context)
        if context.get(KEEP_RAW):
            data = {**data, "raw": value}
        return handler(data)

    @field_validator("*", mode="before")
    @classmethod
    def _null_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            field = cls.model_fields[info.field_name]
            if not field.is_required():
                return field.get_default(call_default_factory=True)
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MastodonEntity):
            return NotImplemented
        return type(self) is type(other) and all(
            getattr(self, name) == getattr(other, name)
            for name in type(self).model_fields
            if name != "raw"
        )


##
# Accounts
##


class Emoji(MastodonEntity):
    """A custom emoji.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/CustomEmoji/
    """

    shortcode: str
    """
    The name of the custom emoji, without the surrounding colons.
    """

    url: str
    """
    A link to the custom emoji.
    """

    static_url: str
    """
    A link to a static copy of the custom emoji.
    """

    visible_in_picker: bool = False
    """
    Whether this emoji should be shown in the emoji picker.
    """


class Field(MastodonEntity):
    """A field, displayed on a users profile (e.g. "Pronouns", "Favorite color").

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/Account/
    """

    name: str
    """
    The key of a given field's key-value pair.
    """

    value: str
    """
    The value associated with the `name` key.
    """

    verified_at: str | None = None
    """
    Timestamp of when the server verified a URL value for a rel="me" link. (nullable)
    """


class Source(MastodonEntity):
    """Profile editing information, only returned for the authenticated user."""

    note: str
    """
    Profile bio, in plain text.
    """

    fields: list[Field] = pydantic.Field(default_factory=list)
    privacy: _Visibility | None = None
    """
    The default post privacy to be used for new statuses. (nullable)
    """

    sensitive: bool = False
    language: str | None = None


class Account(MastodonEntity):
    """A user acccount, local or remote.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/Account/
    """

    id: str
    """
    The accounts id.
    """

    username: str
    """
    The username, without the domain part.
    """

    acct: str
    """
    The user's account name as username@domain (@domain omitted for local users).
    """

    display_name: str
    """
    The user's display name.
    """

    locked: bool
    """
    Denotes whether the account can be followed without a follow request.
    """

    created_at: str
    """
    The accounts creation time.
    """

    followers_count: NonNegativeInt
    following_count: NonNegativeInt
    statuses_count: NonNegativeInt

    note: str
    """
    The users bio / profile text / 'note'.
    """

    url: str
    avatar: str
    avatar_static: str
    header: str
    header_static: str

    emojis: list[Emoji] = pydantic.Field(default_factory=list)
    """
    List of custom emoji used in name, bio or fields.
    """

    moved: Account | None = None
    """
    If set, Account that this user has set up as their moved-to address. (optional)
    """

    fields: list[Field] = pydantic.Field(default_factory=list)
    """
    List of up to four (by default) Fields.
    """

    bot: bool = False
    """
    Boolean indicating whether this account is automated.
    """

    source: Source | None = None
    """
    Additional information about the account, useful for profile editing.
    Only present for the authenticated user's own account. (optional)
    """


##
# Media
##


class ImageMetaInfo(MastodonEntity):
    """Dimensions of one rendition of an image."""

    width: int | None = None
    height: int | None = None
    size: str | None = None
    aspect: Number | None = None


class Focus(MastodonEntity):
    """Focal point of an image, both coordinates in the range -1.0 to 1.0."""

    x: Number
    y: Number


class ImageMeta(MastodonEntity):
    """Metadata of an `image` attachment."""

    small: ImageMetaInfo | None = None
    original: ImageMetaInfo | None = None
    focus: Focus | None = None


class VideoMetaInfo(MastodonEntity):
    """Dimensions and encoding of one rendition of a video."""

    width: int | None = None
    height: int | None = None
    frame_rate: Text | None = None
    duration: Number | None = None
    bitrate: int | None = None


class VideoMeta(MastodonEntity):
    """Metadata of a `video` or `gifv` attachment."""

    small: VideoMetaInfo | None = None
    original: VideoMetaInfo | None = None


def _meta_shape(value: Any) -> str | None:
    if isinstance(value, dict):
        return value.get(_META_SHAPE)
    return type(value).__name__


Meta = Annotated[
    Annotated[ImageMeta, pydantic.Tag("ImageMeta")]
    | Annotated[VideoMeta, pydantic.Tag("VideoMeta")],
    Discriminator(_meta_shape),
]
"""Attachment metadata; which shape depends on the attachment type."""

_META_SHAPES = {
    AttachmentType.IMAGE: "ImageMeta",
    AttachmentType.GIFV: "VideoMeta",
    AttachmentType.VIDEO: "VideoMeta",
}


class Attachment(MastodonEntity):
    """A media attachment.

    ``meta`` is an ImageMeta for images, a VideoMeta for videos and gifvs,
    and always None for attachments of unknown type.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/MediaAttachment/
    """

    id: str
    type: _AttachmentType
    url: str
    remote_url: str | None = None
    preview_url: str | None = None
    text_url: str | None = None
    meta: Meta | None = None
    description: str | None = None

    @classmethod
    def _prepare(cls, data: dict[str, Any], _context: dict[str, Any]) -> dict[str, Any]:
        meta = data.get("meta")
        if meta is None:
            return data
        try:
            shape = _META_SHAPES.get(AttachmentType(data.get("type")))
        except ValueError:
            shape = None
        if shape is None:
            return {key: item for key, item in data.items() if key != "meta"}
        if isinstance(meta, dict):
            return {**data, "meta": {**meta, _META_SHAPE: shape}}
        return data


class Card(MastodonEntity):
    """A rich preview card generated from a link in a status.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/PreviewCard/
    """

    url: str
    title: str
    description: str
    type: _CardType
    image: str | None = None
    author_name: str | None = None
    author_url: str | None = None
    provider_name: str | None = None
    provider_url: str | None = None
    html: str | None = None
    width: int | None = None
    height: int | None = None
    embed_url: str | None = None


##
# Statuses
##


class Mention(MastodonEntity):
    """A mention of another user in a status."""

    url: str
    username: str
    acct: str
    id: str


class History(MastodonEntity):
    """Daily usage of a hashtag. The API sends every field as a string."""

    day: Text
    uses: Text
    accounts: Text


class Tag(MastodonEntity):
    """A hashtag, as part of a status or a search result."""

    name: str
    url: str
    history: list[History] = pydantic.Field(default_factory=list)


class PollOption(MastodonEntity):
    """One of the choices of a Poll."""

    title: str
    votes_count: NonNegativeInt = 0
    """
    Zero when the server hides the count until the poll has ended.
    """


class Poll(MastodonEntity):
    """A poll attached to a status.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/Poll/
    """

    id: str
    expires_at: str | None = None
    expired: bool
    multiple: bool
    votes_count: NonNegativeInt
    options: list[PollOption]
    voted: bool = False


class Application(MastodonEntity):
    """The application used to post a status."""

    name: str
    website: str | None = None


class Status(MastodonEntity):
    """A status / toot.

    ``reblog`` holds the reblogged status when this status is a reblog; the
    API nests it one level deep only.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/Status/
    """

    id: str
    uri: str
    url: str | None = None
    account: Account
    in_reply_to_id: str | None = None
    in_reply_to_account_id: str | None = None
    reblog: Status | None = None
    content: str
    """
    Content of the status, as HTML: '<p>Hello from Python</p>'
    """

    created_at: str
    emojis: list[Emoji] = pydantic.Field(default_factory=list)
    replies_count: NonNegativeInt = 0
    reblogs_count: NonNegativeInt = 0
    favourites_count: NonNegativeInt = 0
    reblogged: bool = False
    favourited: bool = False
    muted: bool = False
    sensitive: bool = False
    spoiler_text: str = ""
    visibility: _Visibility
    media_attachments: list[Attachment] = pydantic.Field(default_factory=list)
    mentions: list[Mention] = pydantic.Field(default_factory=list)
    tags: list[Tag] = pydantic.Field(default_factory=list)
    card: Card | None = None
    poll: Poll | None = None
    application: Application | None = None
    language: str | None = None
    pinned: bool = False


class StatusParams(MastodonEntity):
    """The parameters a ScheduledStatus will be posted with."""

    text: str
    in_reply_to_id: str | None = None
    media_ids: list[str] = pydantic.Field(default_factory=list)
    sensitive: bool = False
    spoiler_text: str | None = None
    visibility: _Visibility | None = None
    scheduled_at: str | None = None
    application_id: Text | None = None


class ScheduledStatus(MastodonEntity):
    """A status that will be published at a future scheduled date."""

    id: str
    scheduled_at: str
    params: StatusParams
    media_attachments: list[Attachment] = pydantic.Field(default_factory=list)


class Context(MastodonEntity):
    """The ancestors and descendants of a status in its thread."""

    ancestors: list[Status]
    descendants: list[Status]


class Conversation(MastodonEntity):
    """A direct message conversation."""

    id: str
    accounts: list[Account]
    last_status: Status | None = None
    unread: bool = False


##
# Notifications, filters, lists
##


class Notification(MastodonEntity):
    """A notification.

    ``status`` is set for mentions, reblogs and favourites, and None for follows.
    """

    id: str
    type: _NotificationType
    created_at: str
    account: Account
    status: Status | None = None


class Filter(MastodonEntity):
    """A keyword filter."""

    id: str
    phrase: str
    context: list[_FilterContext]
    expires_at: str | None = None
    irreversible: bool
    whole_word: bool


class ListEntity(MastodonEntity):
    """A list of accounts the user has set up."""

    id: str
    title: str


class PushSubscription(MastodonEntity):
    """A Web Push API subscription."""

    id: Text
    endpoint: str
    server_key: str
    alerts: dict[str, bool] = pydantic.Field(default_factory=dict)


class Relationship(MastodonEntity):
    """The relationship between the authenticated user and another account."""

    id: str
    following: bool
    followed_by: bool
    blocking: bool
    muting: bool
    muting_notifications: bool
    requested: bool
    domain_blocking: bool
    showing_reblogs: bool = False
    endorsed: bool = False


class Results(MastodonEntity):
    """Search results."""

    accounts: list[Account]
    statuses: list[Status]
    hashtags: list[Tag]


##
# Instance
##


class URLs(MastodonEntity):
    """URLs of interest for client apps."""

    streaming_api: str


class Stats(MastodonEntity):
    """Usage counts of an instance."""

    user_count: NonNegativeInt
    status_count: NonNegativeInt
    domain_count: NonNegativeInt


class Instance(MastodonEntity):
    """Information about the server.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/V1_Instance/
    """

    uri: str
    title: str
    description: str
    email: str
    version: str
    thumbnail: str | None = None
    urls: URLs
    stats: Stats
    languages: list[str] = pydantic.Field(default_factory=list)
    contact_account: Account | None = None


##
# OAuth
##


class Token(MastodonEntity):
    """An OAuth token, as returned by the /oauth/token endpoint."""

    access_token: str
    token_type: str
    scope: str
    created_at: int


class App(MastodonEntity):
    """A registered OAuth application, as returned by POST /api/v1/apps."""

    client_id: str
    client_secret: str
    redirect_uri: str
    id: Text | None = None
    name: str | None = None
    website: str | None = None
    vapid_key: str | None = None


class Authorization(MastodonEntity):
    """The credentials a client keeps after logging in to a server."""

    client_id: str
    client_secret: str
    token: str
    server: str


class Error(MastodonEntity):
    """An error body returned by the API.

    ``http_status`` is not part of the JSON; it is supplied by whoever made
    the HTTP request, through the ``http_status`` key of the validation
    context.
    """

    http_status: str = pydantic.Field(exclude=True)
    error: str

    @classmethod
    def _prepare(cls, data: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        if "http_status" in context:
            return {**data, "http_status": context["http_status"]}
        return data


##
# List responses
##


class AccountList(MastodonEntity):
    """A JSON array of accounts."""

    accounts: list[Account] = pydantic.Field(default_factory=list)

    @model_serializer
    def _as_array(self, info: SerializationInfo) -> list[Any]:
        return [account.model_dump(mode=info.mode) for account in self.accounts]


class RelationshipList(MastodonEntity):
    """A JSON array of relationships."""

    relationships: list[Relationship] = pydantic.Field(default_factory=list)

    @model_serializer
    def _as_array(self, info: SerializationInfo) -> list[Any]:
        return [r.model_dump(mode=info.mode) for r in self.relationships]


Entity = (
    Account
    | AccountList
    | App
    | Application
    | Attachment
    | Card
    | Context
    | Conversation
    | Emoji
    | Error
    | Field
    | Filter
    | Instance
    | ListEntity
    | Mention
    | Notification
    | Poll
    | PushSubscription
    | Relationship
    | RelationshipList
    | Results
    | ScheduledStatus
    | Source
    | Status
    | Tag
    | Token
)
"""Any entity a response may decode to."""
