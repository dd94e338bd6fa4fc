class TestDirectoryAPI:
    """Test cases for agents, testimonials and the waitlist"""

    def test_root_and_health(self, client):
        assert client.get("/").json() == {"message": "Real Estate Marketplace API"}

        health = client.get("/health").json()
        assert health["status"] == "healthy"
        assert health["storage"] == "MemoryStorage"

    def test_agents(self, client):
        agents = client.get("/api/v1/agents/").json()
        assert len(agents) == 4
        assert agents[0]["email"] == "david@realtyestate.com"

        assert client.get("/api/v1/agents/2").status_code == 200
        assert client.get("/api/v1/agents/99").status_code == 404

        payload = {
            "name": "Kondwani Zulu",
            "title": "Rental Specialist",
            "bio": "Helps families find rentals in Lusaka.",
            "image_url": "https://example.com/kondwani.jpg",
            "email": "kondwani@realtyestate.com",
        }
        response = client.post("/api/v1/agents/", json=payload)
        assert response.status_code == 201
        assert response.json()["id"] == 5
        assert response.json()["instagram"] is None

    def test_testimonials(self, client):
        assert len(client.get("/api/v1/testimonials/").json()) == 3
        assert client.get("/api/v1/testimonials/99").status_code == 404

        payload = {
            "quote": "Smooth process from start to finish.",
            "name": "Chanda Mwale",
            "location": "Ndola, Zambia",
            "rating": 4,
            "image_url": "https://example.com/chanda.jpg",
        }
        response = client.post("/api/v1/testimonials/", json=payload)
        assert response.status_code == 201
        assert client.get(f"/api/v1/testimonials/{response.json()['id']}").json()["rating"] == 4

        assert client.post("/api/v1/testimonials/", json={**payload, "rating": 6}).status_code == 422

    def test_waitlist(self, client):
        payload = {
            "full_name": "Wendy Banda",
            "email": "wendy@example.com",
            "property_interest": "Luxury apartments",
            "agreed_to_terms": False,
        }
        assert client.post("/api/v1/waitlist/", json=payload).status_code == 400
        assert client.get("/api/v1/waitlist/").json() == []

        response = client.post("/api/v1/waitlist/", json={**payload, "agreed_to_terms": True})
        assert response.status_code == 201
        entry = response.json()

        assert client.get("/api/v1/waitlist/").json() == [entry]
        assert client.get(f"/api/v1/waitlist/{entry['id']}").json() == entry
        assert client.get("/api/v1/waitlist/99").status_code == 404

    def test_waitlist_rejects_bad_email(self, client):
        payload = {
            "full_name": "Wendy Banda",
            "email": "wendy",
            "property_interest": "Villas",
            "agreed_to_terms": True,
        }
        assert client.post("/api/v1/waitlist/", json=payload).status_code == 422
