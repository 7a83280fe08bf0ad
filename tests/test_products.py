"""Tests for the products API endpoints."""

import pytest
from fastapi import status
from httpx import AsyncClient

PRODUCT_PAYLOAD = {
    "name": "Mug",
    "vendorCode": "MUG-001",
    "weight": "300g",
    "price": "9.99",
    "photo": "https://cdn.example.com/mug.png",
    "description": "Ceramic mug",
    "size": "M",
}


async def _create_product(client: AsyncClient, **overrides: str) -> dict[str, str]:
    response = await client.post("/api/v1/products", json={**PRODUCT_PAYLOAD, **overrides})
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


class TestProductsCrud:
    @pytest.mark.asyncio
    async def test_create_product(self, client: AsyncClient) -> None:
        product = await _create_product(client)

        assert product["id"]
        assert product["vendorCode"] == "MUG-001"
        assert product["size"] == "M"

    @pytest.mark.asyncio
    async def test_list_products(self, client: AsyncClient) -> None:
        await _create_product(client)
        await _create_product(client, name="Plate", vendorCode="PLT-001")

        response = await client.get("/api/v1/products")

        assert response.status_code == status.HTTP_200_OK
        assert {product["name"] for product in response.json()} == {"Mug", "Plate"}

    @pytest.mark.asyncio
    async def test_update_product(self, client: AsyncClient) -> None:
        product = await _create_product(client)

        response = await client.put(
            f"/api/v1/products/{product['id']}", json={**PRODUCT_PAYLOAD, "price": "12.50"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["id"] == product["id"]
        assert response.json()["price"] == "12.50"

    @pytest.mark.asyncio
    async def test_update_missing_product(self, client: AsyncClient) -> None:
        response = await client.put("/api/v1/products/nope", json=PRODUCT_PAYLOAD)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "There is no product under id nope"

    @pytest.mark.asyncio
    async def test_delete_product(self, client: AsyncClient) -> None:
        product = await _create_product(client)

        response = await client.delete(f"/api/v1/products/{product['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["id"] == product["id"]
        missing = await client.get(f"/api/v1/products/{product['id']}")
        assert missing.status_code == status.HTTP_404_NOT_FOUND
