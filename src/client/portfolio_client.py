"""Portfolio HTTP Client for consuming the Portfolio API."""
from uuid import UUID
from typing import Optional
from httpx import AsyncClient, Response

from src.client.schemas import (
    AssetResponse,
    AssetWithClientResponse,
    CatalogEntryResponse,
    ClientResponse,
    CreateAssetRequest,
    CreateClientRequest,
    UpdateClientRequest,
)


class PortfolioClient:
    """HTTP client for interacting with the Portfolio API."""

    def __init__(self, base_url: str, client: Optional[AsyncClient] = None):
        """
        Initialize the Portfolio client.

        Args:
            base_url: Base URL of the Portfolio API (e.g., "http://localhost:3000")
            client: Optional httpx.AsyncClient instance. If not provided, a new one will be created.
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self._owns_client:
            self._client = AsyncClient(base_url=self.base_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self._owns_client and self._client:
            await self._client.aclose()

    @property
    def client(self) -> AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("Client not initialized. Use async context manager.")
        return self._client

    async def create_client(self, request: CreateClientRequest) -> ClientResponse:
        """
        Create a new client.

        Args:
            request: Client creation request

        Returns:
            Created client response

        Raises:
            httpx.HTTPStatusError: If the request fails (e.g., 409 if the email is taken)
        """
        response: Response = await self.client.post(
            "/clients",
            json=request.model_dump(mode="json", by_alias=True)
        )
        response.raise_for_status()
        return ClientResponse.model_validate(response.json())

    async def list_clients(self) -> list[ClientResponse]:
        """List all clients."""
        response: Response = await self.client.get("/clients/list")
        response.raise_for_status()
        return [ClientResponse.model_validate(item) for item in response.json()]

    async def update_client(self, client_id: UUID, request: UpdateClientRequest) -> ClientResponse:
        """
        Partially update a client. Only the fields set on the request are sent.

        Raises:
            httpx.HTTPStatusError: If the request fails (404, 409 or 400)
        """
        response: Response = await self.client.put(
            f"/clients/edit/{client_id}",
            json=request.model_dump(mode="json", by_alias=True, exclude_unset=True)
        )
        response.raise_for_status()
        return ClientResponse.model_validate(response.json())

    async def delete_client(self, client_id: UUID) -> None:
        """
        Delete a client.

        Raises:
            httpx.HTTPStatusError: 404 if not found, 409 if the client still owns assets
        """
        response: Response = await self.client.delete(f"/clients/delete/{client_id}")
        response.raise_for_status()

    async def create_asset(self, request: CreateAssetRequest) -> AssetResponse:
        """
        Create an asset for a client.

        Raises:
            httpx.HTTPStatusError: 403 if the client is inactive, 404 if it does not exist
        """
        response: Response = await self.client.post(
            "/assets",
            json=request.model_dump(mode="json", by_alias=True)
        )
        response.raise_for_status()
        return AssetResponse.model_validate(response.json())

    async def list_assets(self) -> list[AssetWithClientResponse]:
        """List all assets with their owning client."""
        response: Response = await self.client.get("/assets")
        response.raise_for_status()
        return [AssetWithClientResponse.model_validate(item) for item in response.json()]

    async def list_client_assets(self, client_id: UUID) -> list[AssetResponse]:
        """List the assets of one client."""
        response: Response = await self.client.get(f"/assets/cliente/{client_id}")
        response.raise_for_status()
        return [AssetResponse.model_validate(item) for item in response.json()]

    async def delete_asset(self, asset_id: UUID) -> None:
        """Delete an asset."""
        response: Response = await self.client.delete(f"/assets/delete/{asset_id}")
        response.raise_for_status()

    async def list_catalog(self) -> list[CatalogEntryResponse]:
        """Get the static instrument catalog."""
        response: Response = await self.client.get("/assets/catalog")
        response.raise_for_status()
        return [CatalogEntryResponse.model_validate(item) for item in response.json()]
