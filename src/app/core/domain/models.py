"""Domain models used in business logic."""
import uuid
from datetime import datetime, UTC
from enum import StrEnum
from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, BaseModel, EmailStr, Field


def as_utc(value: datetime) -> datetime:
    """Express a timestamp in UTC. Naive values, as SQLite returns them, are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def utc_now() -> datetime:
    return datetime.now(UTC)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class Client(BaseModel):
    """Domain model for Client used in business logic."""
    id: UUID = Field(default_factory=uuid.uuid4, description="Unique client ID")
    name: str = Field(..., min_length=3, description="Title-cased client name")
    email: EmailStr = Field(..., description="Lowercase email address, unique across clients")
    active: bool = Field(default=True, description="Inactive clients cannot receive new assets")
    created_at: UtcDatetime = Field(default_factory=utc_now, description="Creation timestamp (UTC)")

    model_config = {"from_attributes": True}


class AssetName(StrEnum):
    """Instruments an asset can be registered under."""
    PETR4 = "PETR4"
    VALE3 = "VALE3"
    ITUB4 = "ITUB4"
    TESOURO_IPCA_2035 = "Tesouro IPCA+ 2035"
    TESOURO_SELIC_2027 = "Tesouro Selic 2027"
    CDB_BANCO_INTER_1Y = "CDB Banco Inter (1 ano)"
    LCI_CAIXA_2Y = "LCI Caixa (2 anos)"
    USD_BRL = "USD/BRL"
    EUR_BRL = "EUR/BRL"
    BITCOIN = "Bitcoin"
    ETHEREUM = "Ethereum"
    GOLD_GRAM = "Ouro (g)"
    SOYBEAN_60KG = "Soja (saca 60kg)"
    CORN_60KG = "Milho (saca 60kg)"
    ARABICA_COFFEE_60KG = "Café Arábica (saca 60kg)"


class AssetCategory(StrEnum):
    """Instrument category tag used by the catalog."""
    STOCK = "stock"
    GOVERNMENT_BOND = "government_bond"
    PRIVATE_BOND = "private_bond"
    CURRENCY = "currency"
    CRYPTO = "crypto"
    COMMODITY = "commodity"


class Asset(BaseModel):
    """Domain model for Asset used in business logic."""
    id: UUID = Field(default_factory=uuid.uuid4, description="Unique asset ID")
    name: AssetName = Field(..., description="Catalog instrument name")
    value: float = Field(..., gt=0, allow_inf_nan=False, description="Monetary amount held")
    client_id: UUID = Field(..., description="ID of the client who owns this asset")
    created_at: UtcDatetime = Field(default_factory=utc_now, description="Creation timestamp (UTC)")

    model_config = {"from_attributes": True}


class AssetWithClient(Asset):
    """Asset joined with its owning client."""
    client: Client


class CatalogEntry(BaseModel):
    """Reference data for an investable instrument."""
    name: AssetName
    category: AssetCategory
    value: float = Field(..., gt=0, description="Reference unit value")

    model_config = {"frozen": True}
