"""Binds decoded player state documents to their declared schema.

Parsing and the shape check are shared by every mode; the modes differ only
in what happens to keys the schema does not declare:

    PERMISSIVE  undeclared keys are dropped and the document binds. The
                permissive schema itself declares the optional `isAdmin` and
                `gold` gadget fields, so those bind and reach the handler.
    STRICT      closed-world: any undeclared key, at any depth, fails the
                bind before the application sees the state.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError

from player_state_service.dto.player_state import PlayerState, VulnerablePlayerState
from player_state_service.processor.errors import MalformedPayload, SchemaMismatch, UnexpectedFields

# same nesting limit serde_json applies by default
MAX_NESTING_DEPTH = 128


class Mode(str, Enum):
    PERMISSIVE = "permissive"
    STRICT = "strict"


SCHEMAS: dict[Mode, type[BaseModel]] = {
    Mode.PERMISSIVE: VulnerablePlayerState,
    Mode.STRICT: PlayerState,
}


class _JsonObject(dict):
    """A parsed JSON object that remembers which keys appeared more than once."""

    def __init__(self) -> None:
        super().__init__()
        self.repeated: list[str] = []


def _object_from_pairs(pairs: list[tuple[str, Any]]) -> _JsonObject:
    obj = _JsonObject()
    for key, value in pairs:
        if key in obj and key not in obj.repeated:
            obj.repeated.append(key)
        obj[key] = value
    return obj


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid number `{name}`")


def parse_document(raw: bytes) -> Any:
    """ Parses raw bytes as a generic UTF-8 JSON document.

    Args:
        raw (bytes): decoded payload bytes.

    Raises:
        MalformedPayload: invalid UTF-8, invalid JSON syntax or a non-standard
            constant such as NaN, or nesting deeper than MAX_NESTING_DEPTH.

    Returns:
        Any: the parsed document, objects are returned as dicts.
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedPayload(f"payload is not valid UTF-8 at position {exc.start}") from None

    try:
        document = json.loads(text, object_pairs_hook=_object_from_pairs, parse_constant=_reject_constant)
    except RecursionError:
        raise MalformedPayload("recursion limit exceeded") from None
    except ValueError as exc:
        raise MalformedPayload(str(exc)) from None

    if _nesting_exceeds(document, MAX_NESTING_DEPTH):
        raise MalformedPayload("recursion limit exceeded")

    return document


def _nesting_exceeds(document: Any, limit: int) -> bool:
    """True when arrays and objects are nested deeper than `limit` levels."""
    stack = [(document, 1)]
    while stack:
        value, depth = stack.pop()
        if not isinstance(value, (dict, list)):
            continue
        if depth > limit:
            return True
        children = value.values() if isinstance(value, dict) else value
        stack.extend((child, depth + 1) for child in children)
    return False


def _declared_fields(schema: type[BaseModel]) -> dict[str, type[BaseModel] | None]:
    """Map each key the schema accepts to its nested model class, if it has one."""
    declared: dict[str, type[BaseModel] | None] = {}
    for name, field in schema.model_fields.items():
        nested = field.annotation
        is_model = isinstance(nested, type) and issubclass(nested, BaseModel)
        declared[field.alias or name] = nested if is_model else None
    return declared


def _walk(document: dict, schema: type[BaseModel], prefix: str = "") -> Iterator[tuple[str, bool]]:
    """Yield (path, is_declared) for every key, descending into declared nested objects."""
    declared = _declared_fields(schema)
    for key, value in document.items():
        path = f"{prefix}{key}"
        if key not in declared:
            yield path, False
            continue
        yield path, True
        nested = declared[key]
        if nested is not None and isinstance(value, dict):
            yield from _walk(value, nested, f"{path}.")


def repeated_fields(document: Any, schema: type[BaseModel]) -> list[str]:
    """Return the paths of declared keys that occur more than once in one object."""
    if not isinstance(document, dict):
        return []

    declared = _declared_fields(schema)
    found = [key for key in getattr(document, "repeated", ()) if key in declared]
    for key, nested in declared.items():
        value = document.get(key)
        if nested is not None and isinstance(value, dict):
            found.extend(f"{key}.{path}" for path in repeated_fields(value, nested))
    return found


def undeclared_fields(document: Any, schema: type[BaseModel]) -> list[str]:
    """Return the dotted paths of keys the schema does not declare, in document order."""
    if not isinstance(document, dict):
        return []
    return [path for path, is_declared in _walk(document, schema) if not is_declared]


def _location(loc: tuple) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "<root>"


def _describe_errors(errors: list[dict[str, Any]]) -> str:
    # input values are left out on purpose, only locations and rule messages
    return "; ".join(f"{_location(error['loc'])}: {error['msg']}" for error in errors)


def bind(raw: bytes, mode: Mode) -> BaseModel:
    """ Binds decoded bytes to the schema declared for the given mode.

    Args:
        raw (bytes): decoded player state bytes.
        mode (Mode): PERMISSIVE binds to VulnerablePlayerState and drops
            undeclared keys, STRICT binds to PlayerState and rejects them.

    Raises:
        MalformedPayload: the bytes are not a JSON document.
        SchemaMismatch: a declared field is missing, repeated or mis-shaped.
        UnexpectedFields: STRICT only, the document holds undeclared keys.

    Returns:
        BaseModel: a PlayerState (STRICT) or VulnerablePlayerState (PERMISSIVE).
    """
    mode = Mode(mode)
    schema = SCHEMAS[mode]
    document = parse_document(raw)

    repeated = repeated_fields(document, schema)
    if repeated:
        raise SchemaMismatch("; ".join(f"{path}: duplicate field" for path in repeated))

    try:
        state = schema.model_validate(document)
    except ValidationError as exc:
        mismatches = [
            error for error in exc.errors(include_url=False, include_input=False)
            if error["type"] != "extra_forbidden"
        ]
        # shape errors win over unknown keys
        if mismatches:
            raise SchemaMismatch(_describe_errors(mismatches)) from None
        # only top-level keys the closed schema forbids are left
        raise UnexpectedFields(undeclared_fields(document, schema), expected=list(_declared_fields(schema))) from None

    if mode is Mode.STRICT:
        undeclared = undeclared_fields(document, schema)
        if undeclared:
            raise UnexpectedFields(undeclared, expected=list(_declared_fields(schema)))

    return state
