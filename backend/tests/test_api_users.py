import pytest
import pytest_asyncio
from realty.core.config import settings
from realty.models import UserCreate


@pytest_asyncio.fixture
async def renter(api_storage):
    return await api_storage.create_user(UserCreate(
        username="renter",
        password="secret",
        email="renter@example.com",
        full_name="Rita Renter",
    ))


class TestUserRegistrationAPI:
    """Test cases for account registration"""

    @pytest.fixture
    def registration(self):
        return {
            "username": "newcomer",
            "password": "s3cret",
            "email": "newcomer@example.com",
            "full_name": "Nina Newcomer",
            "user_type": "Landlord & Sell",
        }

    def test_register_user(self, client, registration):
        response = client.post("/api/v1/users/register", json=registration)

        assert response.status_code == 201
        created = response.json()
        assert created["id"] == 2
        assert created["username"] == "newcomer"
        assert created["user_type"] == "Landlord & Sell"
        assert "password" not in created

        profile = client.get(f"/api/v1/users/{created['id']}").json()
        assert profile["email"] == "newcomer@example.com"

    def test_register_defaults_to_renter(self, client, registration):
        del registration["user_type"]
        response = client.post("/api/v1/users/register", json=registration)

        assert response.status_code == 201
        assert response.json()["user_type"] == "Rent & Buy"

    def test_register_duplicate_email(self, client, registration):
        response = client.post(
            "/api/v1/users/register",
            json={**registration, "email": settings.SEED_ADMIN_EMAIL}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Email is already in use"

    def test_register_duplicate_username(self, client, registration):
        response = client.post(
            "/api/v1/users/register",
            json={**registration, "username": settings.SEED_ADMIN_USERNAME}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Username is already taken"

    def test_register_twice(self, client, registration):
        assert client.post("/api/v1/users/register", json=registration).status_code == 201
        assert client.post("/api/v1/users/register", json=registration).status_code == 400

    def test_register_invalid_email(self, client, registration):
        response = client.post("/api/v1/users/register", json={**registration, "email": "nope"})

        assert response.status_code == 422

    def test_registered_landlord_can_list_property(self, client, registration):
        owner = client.post("/api/v1/users/register", json=registration).json()
        listing = {
            "owner_id": owner["id"],
            "title": "Studio Flat",
            "description": "Compact studio near the CBD",
            "price": 3500,
            "location": "Cairo Road, Lusaka",
            "city": "Lusaka",
            "state": "Lusaka Province",
            "bedrooms": 0,
            "bathrooms": 1,
            "square_feet": 400,
            "property_type": "Apartment",
            "listing_type": "rent",
            "image_url": "https://example.com/studio.jpg",
        }

        assert client.post("/api/v1/properties/", json=listing).status_code == 201


class TestUsersAPI:
    """Test cases for user profile endpoints"""

    def test_get_user_hides_password(self, client):
        response = client.get("/api/v1/users/1")

        assert response.status_code == 200
        profile = response.json()
        assert profile["user_type"] == "Landlord & Sell"
        assert "password" not in profile

    def test_get_missing_user(self, client):
        assert client.get("/api/v1/users/999").status_code == 404

    def test_update_profile(self, client):
        response = client.patch("/api/v1/users/1", json={"bio": "Principal agent", "phone_number": None})

        assert response.status_code == 200
        assert response.json()["bio"] == "Principal agent"
        assert response.json()["phone_number"] is None

    def test_update_missing_user(self, client):
        assert client.patch("/api/v1/users/999", json={"bio": "x"}).status_code == 404

    def test_update_invalid_email(self, client):
        assert client.patch("/api/v1/users/1", json={"email": "not-an-email"}).status_code == 422

    @pytest.mark.asyncio
    async def test_update_rejects_taken_email_and_username(self, client, renter):
        response = client.patch("/api/v1/users/1", json={"email": "renter@example.com"})
        assert response.status_code == 400

        response = client.patch("/api/v1/users/1", json={"username": "renter"})
        assert response.status_code == 400

        # Keeping your own username is not a conflict
        response = client.patch(f"/api/v1/users/{renter.id}", json={"username": "renter"})
        assert response.status_code == 200


class TestMessagesAPI:
    """Test cases for messaging endpoints"""

    @pytest.mark.asyncio
    async def test_send_and_read_messages(self, client, renter):
        payload = {"sender_id": renter.id, "recipient_id": 1, "property_id": 5, "content": "Is it available?"}
        response = client.post("/api/v1/messages/", json=payload)

        assert response.status_code == 201
        message = response.json()
        assert message["is_read"] is False

        reply = client.post("/api/v1/messages/", json={
            "sender_id": 1, "recipient_id": renter.id, "content": "Yes it is"
        }).json()

        conversation = client.get(f"/api/v1/messages/between/1/{renter.id}").json()
        assert [m["id"] for m in conversation] == [message["id"], reply["id"]]
        assert len(client.get(f"/api/v1/messages/user/{renter.id}").json()) == 2
        assert [m["id"] for m in client.get("/api/v1/messages/property/5").json()] == [message["id"]]

        read = client.patch(f"/api/v1/messages/{message['id']}/read")
        assert read.status_code == 200
        assert read.json()["is_read"] is True

    @pytest.mark.asyncio
    async def test_send_message_validates_references(self, client, renter):
        base = {"sender_id": renter.id, "recipient_id": 1, "content": "Hello"}

        assert client.post("/api/v1/messages/", json={**base, "sender_id": 999}).status_code == 400
        assert client.post("/api/v1/messages/", json={**base, "recipient_id": 999}).status_code == 400
        assert client.post("/api/v1/messages/", json={**base, "property_id": 999}).status_code == 400

    def test_mark_missing_message(self, client):
        assert client.patch("/api/v1/messages/999/read").status_code == 404


class TestSavedPropertiesAPI:
    """Test cases for saved property endpoints"""

    def test_save_and_remove(self, client):
        response = client.post("/api/v1/saved-properties/", json={"user_id": 1, "property_id": 2})
        assert response.status_code == 201

        duplicate = client.post("/api/v1/saved-properties/", json={"user_id": 1, "property_id": 2})
        assert duplicate.status_code == 409

        saved = client.get("/api/v1/saved-properties/user/1").json()
        assert [s["property_id"] for s in saved] == [2]

        params = {"user_id": 1, "property_id": 2}
        removed = client.delete("/api/v1/saved-properties/", params=params)
        assert removed.status_code == 200
        assert removed.json() == {"success": True}

        assert client.delete("/api/v1/saved-properties/", params=params).status_code == 404
        assert client.get("/api/v1/saved-properties/user/1").json() == []
