"""Decoders: pydantic validation with DecodeErrors.

A decoder is any callable that takes a JSON value (as produced by
``json.loads``) and returns a Python value, raising a DecodeError when the
value does not have the expected shape. ``decoder_for`` builds one from a
type, validating with a pydantic TypeAdapter and translating the first
validation error into a DecodeError with a path and an entity name:

    status_decoder = decoder_for(Status)
    statuses_decoder = decoder_for(list[Status], "Status list")
"""
from __future__ import annotations

from collections.abc import Callable
from types import NoneType, UnionType
from typing import Annotated, Any, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, TypeAdapter, ValidationError

from fedicodec.api.mastodon.api_mastodon_errors import (
    DecodeError,
    MissingField,
    NoMatchingShape,
    TypeMismatch,
    UnknownEnumValue,
)
from fedicodec.api.mastodon.types.api_mastodon_types import KEEP_RAW

T = TypeVar("T")

Decoder = Callable[[Any], T]

_JSON_TYPE_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "number",
    float: "number",
    NoneType: "null",
}


def json_type(value: Any) -> str:
    """Name the JSON type of a decoded value."""
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def _is_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def _unwrap(annotation: Any) -> Any:
    """Strip Annotated metadata and Optional from a type."""
    while True:
        origin = get_origin(annotation)
        if origin is Annotated:
            annotation = get_args(annotation)[0]
        elif origin in (Union, UnionType):
            members = [a for a in get_args(annotation) if a is not NoneType]
            if len(members) != 1:
                return annotation
            annotation = members[0]
        else:
            return annotation


def locate(
    annotation: Any, loc: tuple[str | int, ...],
) -> tuple[tuple[str | int, ...], str | None]:
    """Follow a pydantic error location through ``annotation``.

    Returns the path of object keys and list indices, without the union tags
    pydantic adds, and the name of the innermost model on the way.
    """
    current = _unwrap(annotation)
    entity = current.__name__ if _is_model(current) else None
    path: list[str | int] = []
    for step in loc:
        origin = get_origin(current)
        if origin in (Union, UnionType):
            members = {m.__name__: m for m in map(_unwrap, get_args(current))
                       if _is_model(m)}
            if step in members:
                current = members[step]
                entity = current.__name__
                continue
        path.append(step)
        if _is_model(current) and step in current.model_fields:
            current = _unwrap(current.model_fields[step].annotation)
        elif origin is list and isinstance(step, int):
            current = _unwrap(get_args(current)[0])
        elif origin is dict:
            current = _unwrap(get_args(current)[1])
        else:
            current = None
        if _is_model(current):
            entity = current.__name__
    return tuple(path), entity


def translate(
    error: ValidationError, annotation: Any, entity: str | None = None,
) -> DecodeError:
    """Turn the first error of a pydantic ValidationError into a DecodeError."""
    first = error.errors(include_url=False)[0]
    path, located = locate(annotation, first["loc"])
    entity = located or entity
    kind = first["type"]
    value = first.get("input")
    if kind == "missing":
        return MissingField(path=path, entity=entity)
    if kind == "enum" and isinstance(value, str):
        return UnknownEnumValue(f"{value!r}: {first['msg']}", path, entity)
    return TypeMismatch(f"{first['msg']}, got {json_type(value)}", path, entity)


def decoder_for(
    annotation: Any, entity: str | None = None, **context: Any,
) -> Decoder[Any]:
    """Build a decoder that validates JSON values as ``annotation``.

    ``entity`` names the root in errors when ``annotation`` is not a model.
    ``context`` is passed on to the entity validators.
    """
    adapter = TypeAdapter(annotation)
    context = {KEEP_RAW: True, **context}

    def decode(value: Any) -> Any:
        try:
            return adapter.validate_python(value, context=context)
        except ValidationError as e:
            raise translate(e, annotation, entity) from None

    return decode


def anything(value: Any) -> Any:
    """Accept any JSON value unchanged."""
    return value


def one_of(*decoders: tuple[str, Decoder[Any]]) -> Decoder[Any]:
    """Try named decoders in order and return the first success."""

    def decode(value: Any) -> Any:
        for _name, decoder in decoders:
            try:
                return decoder(value)
            except DecodeError:
                continue
        tried = ", ".join(name for name, _ in decoders)
        msg = f"tried {tried}"
        raise NoMatchingShape(msg)

    return decode
