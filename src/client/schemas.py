"""API schemas for client and asset requests and responses."""
import re
from datetime import datetime
from typing import Annotated, Any
from uuid import UUID

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    StrictBool,
    StrictStr,
    field_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from src.app.core.domain.models import AssetCategory, AssetName

NAME_MIN_LENGTH = 3

# Hyphenated 8-4-4-4-12 form, the only textual UUID accepted from callers
CANONICAL_UUID_PATTERN = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE)


def capitalize_name(name: str) -> str:
    """
    Normalize a person or company name.

    Surrounding whitespace is trimmed, runs of whitespace collapse to a single
    space and every word is lowercased with its first letter capitalized.

    Example:
        "  ana   SILVA " -> "Ana Silva"
    """
    return " ".join(word[0].upper() + word[1:] for word in name.strip().lower().split())


def normalize_email(email: str) -> str:
    """Trim and lowercase an email address."""
    return email.strip().lower()


def _normalize_name(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    normalized = capitalize_name(value)
    if len(normalized) < NAME_MIN_LENGTH:
        raise PydanticCustomError(
            "name_too_short",
            "Name must have at least {min_length} characters.",
            {"min_length": NAME_MIN_LENGTH},
        )
    return normalized


def _normalize_email(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    return normalize_email(value)


def _check_canonical_uuid(value: Any) -> Any:
    if isinstance(value, str) and not CANONICAL_UUID_PATTERN.fullmatch(value):
        raise PydanticCustomError(
            "uuid_format",
            "Input should be a UUID in the form xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx.",
        )
    return value


def _check_asset_name(value: Any) -> Any:
    if not isinstance(value, str) or value not in {member.value for member in AssetName}:
        raise PydanticCustomError("invalid_asset_name", "Invalid asset name.")
    return value


ClientName = Annotated[StrictStr, BeforeValidator(_normalize_name)]
ClientEmail = Annotated[EmailStr, BeforeValidator(_normalize_email)]
CatalogAssetName = Annotated[AssetName, BeforeValidator(_check_asset_name)]
PositiveAmount = Annotated[float, Field(strict=True, gt=0, allow_inf_nan=False)]
CanonicalUUID = Annotated[UUID, BeforeValidator(_check_canonical_uuid)]


class ApiSchema(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class CreateClientRequest(ApiSchema):
    """Request schema for creating a new client."""
    name: ClientName = Field(..., description="Client name, stored title-cased")
    email: ClientEmail = Field(
        ...,
        description=(
            "Email address, stored trimmed and lowercase. Special-use and reserved "
            "domains such as .test, .local or .localhost are rejected"
        ),
    )
    active: StrictBool = Field(..., description="Whether assets may be added to the client")


class UpdateClientRequest(ApiSchema):
    """Request schema for a partial client update. Only supplied fields are applied."""
    name: ClientName | None = None
    email: ClientEmail | None = None
    active: StrictBool | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("name", "email", "active", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        """Omitting a field leaves it unchanged, sending null is an error."""
        if v is None:
            raise PydanticCustomError("null_not_allowed", "Field cannot be null.")
        return v

    def supplied_fields(self) -> dict[str, Any]:
        """Fields explicitly present in the request."""
        return self.model_dump(exclude_unset=True)


class CreateAssetRequest(ApiSchema):
    """Request schema for creating a new asset."""
    name: CatalogAssetName = Field(..., description="Catalog instrument name")
    value: PositiveAmount = Field(..., description="Positive monetary amount")
    client_id: CanonicalUUID = Field(..., description="ID of the owning client")


class ClientResponse(ApiSchema):
    """Response schema for client data returned by the API."""
    id: UUID
    name: str
    email: EmailStr
    active: bool
    created_at: datetime


class AssetResponse(ApiSchema):
    """Response schema for asset data returned by the API."""
    id: UUID
    name: AssetName
    value: float
    client_id: UUID
    created_at: datetime


class AssetWithClientResponse(AssetResponse):
    """Asset response including the owning client."""
    client: ClientResponse


class CatalogEntryResponse(ApiSchema):
    """Response schema for a catalog entry."""
    name: AssetName
    category: AssetCategory
    value: float


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""
    error: str
    details: dict[str, list[str]] | None = None
