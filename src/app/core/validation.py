"""
Parse-and-normalize functions for untrusted input.

Every function returns a tagged result instead of raising: ``Valid`` carries the
typed, normalized value and ``Invalid`` carries a summary message plus
per-field messages. ``unwrap`` converts an ``Invalid`` into ``InvalidInput`` for
callers that prefer exceptions.
"""
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union
from uuid import UUID

from pydantic import BaseModel, TypeAdapter, ValidationError

from src.client.schemas import (
    CanonicalUUID,
    CreateAssetRequest,
    CreateClientRequest,
    UpdateClientRequest,
)
from src.shared.exceptions import InvalidInput

T = TypeVar("T")
TSchema = TypeVar("TSchema", bound=BaseModel)

INVALID_DATA_MESSAGE = "Invalid input data."
INVALID_UPDATE_MESSAGE = "Invalid update data."
EMPTY_UPDATE_MESSAGE = "No fields supplied for update."
INVALID_ID_MESSAGE = "Invalid identifier."

# Key used for errors that do not belong to a single field, e.g. a non-object body
BODY_FIELD = "body"

_uuid_adapter = TypeAdapter(CanonicalUUID)


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    message: str
    details: dict[str, list[str]] = field(default_factory=dict)


ValidationResult = Union[Valid[T], Invalid]


def field_errors(error: ValidationError) -> dict[str, list[str]]:
    """Group pydantic error messages by top-level field name."""
    details: dict[str, list[str]] = {}
    for item in error.errors():
        location = item.get("loc") or ()
        key = str(location[0]) if location else BODY_FIELD
        details.setdefault(key, []).append(item["msg"])
    return details


def _parse(schema: type[TSchema], payload: Any, message: str) -> ValidationResult[TSchema]:
    if not isinstance(payload, dict):
        return Invalid(message, {BODY_FIELD: ["Request body must be a JSON object."]})
    try:
        return Valid(schema.model_validate(payload))
    except ValidationError as e:
        return Invalid(message, field_errors(e))


def validate_client_create(payload: Any) -> ValidationResult[CreateClientRequest]:
    """Validate a client creation payload: name, email and active are all required."""
    return _parse(CreateClientRequest, payload, INVALID_DATA_MESSAGE)


def validate_client_update(payload: Any) -> ValidationResult[UpdateClientRequest]:
    """
    Validate a partial client update.

    Any subset of name, email and active is accepted, unknown fields are
    rejected and an empty payload is an error on its own.
    """
    result = _parse(UpdateClientRequest, payload, INVALID_UPDATE_MESSAGE)
    if isinstance(result, Valid) and not result.value.supplied_fields():
        return Invalid(EMPTY_UPDATE_MESSAGE)
    return result


def validate_asset_create(payload: Any) -> ValidationResult[CreateAssetRequest]:
    """Validate an asset creation payload: catalog name, positive value and owner ID."""
    return _parse(CreateAssetRequest, payload, INVALID_DATA_MESSAGE)


def validate_identifier(raw: Any, field_name: str = "id") -> ValidationResult[UUID]:
    """Validate a path parameter as a UUID in its hyphenated 8-4-4-4-12 form."""
    try:
        return Valid(_uuid_adapter.validate_python(raw))
    except ValidationError:
        return Invalid(INVALID_ID_MESSAGE, {field_name: [INVALID_ID_MESSAGE]})


def unwrap(result: ValidationResult[T]) -> T:
    """Return the validated value or raise InvalidInput."""
    if isinstance(result, Invalid):
        raise InvalidInput(result.message, result.details)
    return result.value
