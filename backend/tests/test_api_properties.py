import pytest
from realty.models import UserCreate


def _listing(owner_id, **overrides):
    payload = {
        "owner_id": owner_id,
        "title": "Garden Cottage",
        "description": "Two bedroom cottage with a large garden",
        "price": 250000,
        "location": "Roma, Lusaka",
        "city": "Lusaka",
        "state": "Lusaka Province",
        "bedrooms": 2,
        "bathrooms": 1,
        "square_feet": 900,
        "property_type": "Cottage",
        "image_url": "https://example.com/cottage.jpg",
    }
    payload.update(overrides)
    return payload


class TestPropertiesAPI:
    """Test cases for properties API endpoints"""

    def test_get_properties(self, client):
        """Every seeded listing is returned"""
        response = client.get("/api/v1/properties/")

        assert response.status_code == 200
        result = response.json()
        assert len(result) == 6

        required_fields = ["id", "title", "price", "property_type", "status", "location", "updated_at"]
        for field in required_fields:
            assert field in result[0]

    def test_get_property(self, client):
        response = client.get("/api/v1/properties/1")

        assert response.status_code == 200
        assert response.json()["title"] == "Luxury Penthouse"

    def test_get_missing_property(self, client):
        response = client.get("/api/v1/properties/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "Property not found"

    def test_get_featured(self, client):
        response = client.get("/api/v1/properties/featured/list")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [1, 2, 3]

    def test_get_by_owner(self, client):
        assert len(client.get("/api/v1/properties/owner/1").json()) == 6
        assert client.get("/api/v1/properties/owner/999").json() == []


class TestPropertySearchAPI:
    """Test cases for the property search endpoint"""

    def test_placeholders_are_ignored(self, client):
        params = {"location": "Any Location", "property_type": "Any Type"}
        response = client.get("/api/v1/properties/search", params=params)

        assert response.status_code == 200
        assert len(response.json()) == 6

    def test_location_search(self, client):
        response = client.get("/api/v1/properties/search", params={"location": "livingstone"})

        assert response.status_code == 200
        assert [p["title"] for p in response.json()] == ["Zambezi Riverfront Estate"]

    def test_combined_filters(self, client):
        params = {"status": "active", "listing_type": "rent", "max_price": 45000}
        response = client.get("/api/v1/properties/search", params=params)

        assert response.status_code == 200
        assert [p["title"] for p in response.json()] == ["Luxury City Apartment"]

    def test_price_range(self, client):
        params = {"min_price": 25000000, "max_price": 35000000}
        response = client.get("/api/v1/properties/search", params=params)

        assert response.status_code == 200
        for property_item in response.json():
            assert 25000000 <= property_item["price"] <= 35000000
        assert len(response.json()) == 3

    def test_inverted_price_range(self, client):
        params = {"min_price": 50000, "max_price": 10}
        response = client.get("/api/v1/properties/search", params=params)

        assert response.status_code == 400

    def test_negative_price(self, client):
        response = client.get("/api/v1/properties/search", params={"min_price": -100})

        assert response.status_code == 422


class TestPropertyWriteAPI:
    """Test cases for creating and updating listings"""

    def test_create_property(self, client):
        response = client.post("/api/v1/properties/", json=_listing(1, is_featured=True))

        assert response.status_code == 201
        created = response.json()
        assert created["id"] == 7
        assert created["status"] == "active"
        assert created["listing_type"] == "sell"
        assert created["additional_images"] == []

    def test_create_property_unknown_owner(self, client):
        response = client.post("/api/v1/properties/", json=_listing(999))

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_create_property_requires_landlord(self, client, api_storage):
        renter = await api_storage.create_user(UserCreate(
            username="renter", password="pw", email="renter@example.com", full_name="Rita Renter"
        ))

        response = client.post("/api/v1/properties/", json=_listing(renter.id))

        assert response.status_code == 403

    def test_create_property_validation(self, client):
        response = client.post("/api/v1/properties/", json=_listing(1, bedrooms=-1))

        assert response.status_code == 422

    def test_update_property(self, client):
        before = client.get("/api/v1/properties/2").json()

        response = client.patch("/api/v1/properties/2", json={"owner_id": 1, "price": 26000000})

        assert response.status_code == 200
        updated = response.json()
        assert updated["price"] == 26000000
        assert updated["title"] == before["title"]
        assert updated["created_at"] == before["created_at"]
        assert updated["updated_at"] > before["updated_at"]

    def test_update_property_requires_matching_owner(self, client):
        assert client.patch("/api/v1/properties/2", json={"price": 1}).status_code == 403
        assert client.patch("/api/v1/properties/2", json={"owner_id": 5, "price": 1}).status_code == 403
        assert client.get("/api/v1/properties/2").json()["price"] == 25000000

    def test_update_missing_property(self, client):
        response = client.patch("/api/v1/properties/999", json={"owner_id": 1, "price": 1})

        assert response.status_code == 404

    def test_update_status(self, client):
        response = client.patch("/api/v1/properties/1/status", json={"status": "sold"})

        assert response.status_code == 200
        assert response.json()["status"] == "sold"

        featured = client.get("/api/v1/properties/featured/list").json()
        assert [p["id"] for p in featured] == [2, 3]

    def test_update_status_rejects_unknown_value(self, client):
        response = client.patch("/api/v1/properties/1/status", json={"status": "demolished"})

        assert response.status_code == 422

    def test_update_status_missing_property(self, client):
        response = client.patch("/api/v1/properties/999/status", json={"status": "sold"})

        assert response.status_code == 404
