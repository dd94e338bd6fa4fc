import pytest
from realty.core.config import settings
from realty.models import PropertyFilters
from realty.modules.seed import seed_sample_data, seed_if_empty
from realty.modules.seed import sample_data


class TestSampleData:
    """Test suite for loading the demo data set"""

    @pytest.mark.asyncio
    async def test_summary_counts(self, storage):
        summary = await seed_sample_data(storage)

        assert summary == {
            "users": 1,
            "properties": 6,
            "agents": 4,
            "testimonials": 3,
            "amenity_categories": 5,
            "neighborhoods": 4,
            "amenities": 7,
            "property_neighborhoods": 6,
            "neighborhood_amenities": 10,
        }
        assert len(await storage.get_all_properties()) == len(sample_data.SAMPLE_PROPERTIES)
        assert len(await storage.get_all_agents()) == 4

    @pytest.mark.asyncio
    async def test_admin_owns_every_listing(self, seeded_storage):
        admin = await seeded_storage.get_user_by_username(settings.SEED_ADMIN_USERNAME)

        assert admin.user_type == "Landlord & Sell"
        owned = await seeded_storage.get_properties_by_owner(admin.id)
        assert len(owned) == 6

    @pytest.mark.asyncio
    async def test_featured_listings(self, seeded_storage):
        featured = await seeded_storage.get_featured_properties()

        assert [p.title for p in featured] == [
            "Luxury Penthouse", "Modern Villa", "Zambezi Riverfront Estate"
        ]

    @pytest.mark.asyncio
    async def test_relations_are_linked(self, seeded_storage):
        mansion = (await seeded_storage.get_properties_by_filters(PropertyFilters(location="Leopards Hill")))[0]
        neighborhoods = await seeded_storage.get_neighborhoods_by_property(mansion.id)
        assert [n.name for n in neighborhoods] == ["Kabulonga", "Ibex Hill"]

        kabulonga = neighborhoods[0]
        amenities = await seeded_storage.get_amenities_by_neighborhood(kabulonga.id)
        assert [(a.name, a.distance) for a in amenities] == [
            ("International School of Lusaka", 1.2),
            ("Arcades Shopping Mall", 1.5),
            ("University Teaching Hospital", 3.0),
        ]

    @pytest.mark.asyncio
    async def test_seed_if_empty_only_seeds_once(self, storage):
        assert await seed_if_empty(storage) is True
        assert await seed_if_empty(storage) is False
        assert len(await storage.get_all_properties()) == 6
