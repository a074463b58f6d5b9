from typing import cast
from uuid import uuid4

import pytest
import pytest_asyncio
from dependency_injector import providers
from httpx import ASGITransport, AsyncClient, HTTPStatusError

from src.app.core.domain.models import AssetName
from src.client import CreateAssetRequest, CreateClientRequest
from src.shared.exceptions import StoreError


@pytest_asyncio.fixture
async def active_client(portfolio_client):
    return await portfolio_client.create_client(
        CreateClientRequest(name="Ana Silva", email="ana@example.com", active=True)
    )


@pytest.mark.asyncio
async def test_create_asset(http_client, active_client):
    response = await http_client.post(
        "/assets", json={"name": "Tesouro Selic 2027", "value": 11800, "clientId": str(active_client.id)}
    )

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Tesouro Selic 2027"
    assert body["value"] == 11800
    assert body["clientId"] == str(active_client.id)


@pytest.mark.asyncio
async def test_create_asset_negative_value(http_client, active_client):
    response = await http_client.post(
        "/assets/", json={"name": "PETR4", "value": -5, "clientId": str(active_client.id)}
    )

    assert response.status_code == 400
    assert set(response.json()["details"]) == {"value"}


@pytest.mark.asyncio
async def test_create_asset_for_inactive_client(portfolio_client):
    inactive = await portfolio_client.create_client(
        CreateClientRequest(name="Bruno Costa", email="bruno@example.com", active=False)
    )

    with pytest.raises(HTTPStatusError) as exc_info:
        await portfolio_client.create_asset(
            CreateAssetRequest(name=AssetName.PETR4, value=10.0, client_id=inactive.id)
        )

    error = cast(HTTPStatusError, exc_info.value)
    assert error.response.status_code == 403
    assert "inactive" in error.response.json()["error"]


@pytest.mark.asyncio
async def test_create_asset_for_missing_client(portfolio_client):
    with pytest.raises(HTTPStatusError) as exc_info:
        await portfolio_client.create_asset(
            CreateAssetRequest(name=AssetName.PETR4, value=10.0, client_id=uuid4())
        )

    assert cast(HTTPStatusError, exc_info.value).response.status_code == 404


@pytest.mark.asyncio
async def test_list_assets_joined_with_client(portfolio_client, http_client, active_client):
    await portfolio_client.create_asset(
        CreateAssetRequest(name=AssetName.BITCOIN, value=0.1, client_id=active_client.id)
    )

    assets = await portfolio_client.list_assets()
    raw = (await http_client.get("/assets/")).json()

    assert len(assets) == 1
    assert assets[0].client.email == "ana@example.com"
    assert raw[0]["client"]["name"] == "Ana Silva"


@pytest.mark.asyncio
async def test_list_client_assets(portfolio_client, active_client):
    assert await portfolio_client.list_client_assets(active_client.id) == []

    created = await portfolio_client.create_asset(
        CreateAssetRequest(name=AssetName.USD_BRL, value=1000.0, client_id=active_client.id)
    )

    assets = await portfolio_client.list_client_assets(active_client.id)
    assert [a.id for a in assets] == [created.id]


@pytest.mark.asyncio
async def test_list_client_assets_errors(http_client):
    missing = await http_client.get(f"/assets/cliente/{uuid4()}")
    invalid = await http_client.get("/assets/cliente/abc")

    assert missing.status_code == 404
    assert invalid.status_code == 400
    assert invalid.json()["error"] == "Invalid client ID."


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path_id",
    [
        lambda value: value.hex,
        lambda value: "{" + str(value) + "}",
        lambda value: f"urn:uuid:{value}",
    ],
)
async def test_non_hyphenated_identifiers_are_rejected(http_client, active_client, path_id):
    client_id = path_id(active_client.id)

    listing = await http_client.get(f"/assets/cliente/{client_id}")
    creation = await http_client.post("/assets", json={"name": "PETR4", "value": 10, "clientId": client_id})
    deletion = await http_client.delete(f"/assets/delete/{path_id(uuid4())}")

    assert listing.status_code == 400
    assert listing.json()["error"] == "Invalid client ID."
    assert creation.status_code == 400
    assert set(creation.json()["details"]) == {"clientId"}
    assert deletion.status_code == 400
    assert deletion.json()["error"] == "Invalid asset ID."


@pytest.mark.asyncio
async def test_delete_asset(http_client, portfolio_client, active_client):
    created = await portfolio_client.create_asset(
        CreateAssetRequest(name=AssetName.ETHEREUM, value=3.0, client_id=active_client.id)
    )

    response = await http_client.delete(f"/assets/delete/{created.id}")
    again = await http_client.delete(f"/assets/delete/{created.id}")

    assert response.status_code == 204
    assert again.status_code == 404
    assert again.json() == {"error": "Asset not found."}


@pytest.mark.asyncio
async def test_client_can_be_deleted_after_its_assets(http_client, portfolio_client, active_client):
    created = await portfolio_client.create_asset(
        CreateAssetRequest(name=AssetName.CORN_60KG, value=65.0, client_id=active_client.id)
    )
    assert (await http_client.delete(f"/clients/delete/{active_client.id}")).status_code == 409

    await portfolio_client.delete_asset(created.id)

    assert (await http_client.delete(f"/clients/delete/{active_client.id}")).status_code == 204


@pytest.mark.asyncio
async def test_catalog(portfolio_client):
    catalog = await portfolio_client.list_catalog()

    assert len(catalog) == 15
    assert catalog[0].name is AssetName.PETR4
    assert catalog[-1].name is AssetName.ARABICA_COFFEE_60KG
    assert catalog[-1].value == 950.0


class FailingAssetService:
    async def list_assets(self):
        raise StoreError("connection lost")


@pytest.mark.asyncio
async def test_store_failure_is_reported_as_internal_error(http_client, test_container):
    test_container.asset_service.override(providers.Object(FailingAssetService()))
    try:
        response = await http_client.get("/assets")
    finally:
        test_container.asset_service.reset_override()

    assert response.status_code == 500
    assert response.json() == {"error": "Internal error while listing assets."}


class BrokenAssetService:
    async def list_assets(self):
        raise RuntimeError("unexpected failure")


@pytest.mark.asyncio
async def test_unexpected_error_is_reported_as_generic_internal_error(test_app, test_container):
    test_container.asset_service.override(providers.Object(BrokenAssetService()))
    transport = ASGITransport(app=test_app, raise_app_exceptions=False)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/assets")
    finally:
        test_container.asset_service.reset_override()

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error."}
