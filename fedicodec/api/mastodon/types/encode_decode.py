"""JSON encoders and decoders for the Mastodon entities.

Every entity has an ``<entity>_decoder`` turning a JSON value into the
entity; ``encode_entity`` turns any entity back into a JSON-ready value.
Decoders raise DecodeError; ``decode_value`` and ``decode_string`` wrap them
and return the error instead.

Encoding never writes the ``raw`` payload, and ``decode(encode(x)) == x``
holds for every entity (``raw`` does not take part in equality).
"""
from __future__ import annotations

import json
from typing import Any, TypeVar

from fedicodec.api.mastodon.api_mastodon_errors import DecodeError, TypeMismatch
from fedicodec.api.mastodon.types.api_mastodon_types import (
    Account,
    AccountList,
    App,
    Application,
    Attachment,
    Authorization,
    Card,
    Context,
    Conversation,
    Emoji,
    Entity,
    Error,
    Field,
    Filter,
    Instance,
    ListEntity,
    MastodonEntity,
    Mention,
    Notification,
    Poll,
    PushSubscription,
    Relationship,
    RelationshipList,
    Results,
    ScheduledStatus,
    Source,
    Status,
    Tag,
    Token,
)
from fedicodec.api.mastodon.types.decoders import Decoder, decoder_for, one_of

T = TypeVar("T")

Json = Any

account_decoder = decoder_for(Account)
app_decoder = decoder_for(App)
application_decoder = decoder_for(Application)
attachment_decoder = decoder_for(Attachment)
authorization_decoder = decoder_for(Authorization)
card_decoder = decoder_for(Card)
context_decoder = decoder_for(Context)
conversation_decoder = decoder_for(Conversation)
emoji_decoder = decoder_for(Emoji)
field_decoder = decoder_for(Field)
filter_decoder = decoder_for(Filter)
instance_decoder = decoder_for(Instance)
list_entity_decoder = decoder_for(ListEntity)
mention_decoder = decoder_for(Mention)
notification_decoder = decoder_for(Notification)
poll_decoder = decoder_for(Poll)
push_subscription_decoder = decoder_for(PushSubscription)
relationship_decoder = decoder_for(Relationship)
results_decoder = decoder_for(Results)
scheduled_status_decoder = decoder_for(ScheduledStatus)
source_decoder = decoder_for(Source)
status_decoder = decoder_for(Status)
tag_decoder = decoder_for(Tag)
token_decoder = decoder_for(Token)

conversation_list_decoder = decoder_for(list[Conversation], "Conversation list")
emoji_list_decoder = decoder_for(list[Emoji], "Emoji list")
filter_list_decoder = decoder_for(list[Filter], "Filter list")
notification_list_decoder = decoder_for(list[Notification], "Notification list")
status_list_decoder = decoder_for(list[Status], "Status list")


def error_decoder(http_status: str) -> Decoder[Error]:
    """Decode an error body returned with ``http_status``."""
    return decoder_for(Error, http_status=http_status)


_accounts = decoder_for(list[Account], "AccountList")
_relationships = decoder_for(list[Relationship], "RelationshipList")


def account_list_decoder(value: Json) -> AccountList:
    return AccountList(accounts=_accounts(value), raw=value)


def relationship_list_decoder(value: Json) -> RelationshipList:
    return RelationshipList(relationships=_relationships(value), raw=value)


def encode_entity(entity: Entity) -> Json:
    """Encode any entity as a JSON-ready value."""
    if not isinstance(entity, MastodonEntity):
        msg = f"Not an entity: {type(entity).__name__}"
        raise TypeError(msg)
    return entity.model_dump(mode="json")


##
# Entity
##

_ARRAY_SHAPES: tuple[tuple[str, Decoder[Entity]], ...] = (
    ("AccountList", account_list_decoder),
    ("RelationshipList", relationship_list_decoder),
)

# Shapes with more required fields come first, so that a payload resolves
# to the most specific entity it satisfies.
_OBJECT_SHAPES: tuple[tuple[str, Decoder[Entity]], ...] = (
    ("Status", status_decoder),
    ("Notification", notification_decoder),
    ("Account", account_decoder),
    ("Conversation", conversation_decoder),
    ("ScheduledStatus", scheduled_status_decoder),
    ("Instance", instance_decoder),
    ("Results", results_decoder),
    ("Context", context_decoder),
    ("Relationship", relationship_decoder),
    ("Filter", filter_decoder),
    ("Poll", poll_decoder),
    ("Attachment", attachment_decoder),
    ("Card", card_decoder),
    ("PushSubscription", push_subscription_decoder),
    ("Token", token_decoder),
    ("App", app_decoder),
    ("Mention", mention_decoder),
    ("Tag", tag_decoder),
    ("Emoji", emoji_decoder),
    ("Field", field_decoder),
    ("ListEntity", list_entity_decoder),
    ("Source", source_decoder),
    ("Error", error_decoder("")),
    ("Application", application_decoder),
)

ENTITY_TRIAL_ORDER: tuple[str, ...] = tuple(
    name for name, _ in _ARRAY_SHAPES + _OBJECT_SHAPES)
"""The order in which entity_decoder tries the known shapes."""

_decode_array = one_of(*_ARRAY_SHAPES)
_decode_object = one_of(*_OBJECT_SHAPES)


def entity_decoder(value: Json) -> Entity:
    """Decode a value whose entity type is not known in advance.

    Arrays are tried as AccountList, then RelationshipList. Objects are tried
    against each shape in ENTITY_TRIAL_ORDER and the first one that decodes
    wins. An Error found this way has an empty ``http_status``.
    """
    if isinstance(value, list):
        return _decode_array(value)
    if isinstance(value, dict):
        return _decode_object(value)
    msg = f"expected object or array, got {type(value).__name__}"
    raise TypeMismatch(msg, entity="Entity")


##
# Entry points
##


def decode_value(decoder: Decoder[T], value: Json) -> T | DecodeError:
    """Decode a JSON value, returning the DecodeError instead of raising it."""
    try:
        return decoder(value)
    except DecodeError as e:
        return e
    except RecursionError:
        return TypeMismatch("nesting too deep")


def decode_string(decoder: Decoder[T], json_text: str | bytes) -> T | DecodeError:
    """Parse JSON text and decode it, returning any DecodeError."""
    try:
        value = json.loads(json_text)
    except ValueError as e:
        return TypeMismatch(f"invalid JSON: {e}")
    except RecursionError:
        return TypeMismatch("invalid JSON: nesting too deep")
    return decode_value(decoder, value)


def encode_string(entity: Entity, indent: int | None = None) -> str:
    """Encode any entity as JSON text."""
    return json.dumps(encode_entity(entity), indent=indent, ensure_ascii=False)


__all__ = [
    "ENTITY_TRIAL_ORDER",
    "account_decoder",
    "account_list_decoder",
    "app_decoder",
    "application_decoder",
    "attachment_decoder",
    "authorization_decoder",
    "card_decoder",
    "context_decoder",
    "conversation_decoder",
    "conversation_list_decoder",
    "decode_string",
    "decode_value",
    "emoji_decoder",
    "emoji_list_decoder",
    "encode_entity",
    "encode_string",
    "entity_decoder",
    "error_decoder",
    "field_decoder",
    "filter_decoder",
    "filter_list_decoder",
    "instance_decoder",
    "list_entity_decoder",
    "mention_decoder",
    "notification_decoder",
    "notification_list_decoder",
    "poll_decoder",
    "push_subscription_decoder",
    "relationship_decoder",
    "relationship_list_decoder",
    "results_decoder",
    "scheduled_status_decoder",
    "source_decoder",
    "status_decoder",
    "status_list_decoder",
    "tag_decoder",
    "token_decoder",
]
