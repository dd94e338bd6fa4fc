from typing import Dict, Sequence, TypeVar
from realty.core.config import settings
from realty.models import (
    UserCreate, UserType, PropertyCreate, AmenityCreate,
    PropertyNeighborhoodCreate, NeighborhoodAmenityCreate
)
from realty.modules.storage.base import Storage
from . import sample_data
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SeedError(Exception):
    """Raised when the sample data refers to an entity that was not created"""


def _pick(items: Sequence[T], index: int, kind: str) -> T:
    if not 0 <= index < len(items):
        raise SeedError(f"Sample {kind} index {index} out of range (have {len(items)})")
    return items[index]


async def seed_sample_data(storage: Storage) -> Dict[str, int]:
    """Insert the demo data set into ``storage``.

    Not idempotent: calling it twice inserts everything twice. Use
    ``seed_if_empty`` where the store may already be populated.
    Returns the number of rows created per entity type.
    """
    admin = await storage.create_user(UserCreate(
        username=settings.SEED_ADMIN_USERNAME,
        password=settings.SEED_ADMIN_PASSWORD,
        email=settings.SEED_ADMIN_EMAIL,
        full_name=sample_data.ADMIN_FULL_NAME,
        user_type=UserType.LANDLORD_AND_SELL,
        phone_number=sample_data.ADMIN_PHONE,
    ))

    properties = []
    for fields in sample_data.SAMPLE_PROPERTIES:
        properties.append(await storage.create_property(PropertyCreate(owner_id=admin.id, **fields)))

    for agent in sample_data.SAMPLE_AGENTS:
        await storage.create_agent(agent)

    for testimonial in sample_data.SAMPLE_TESTIMONIALS:
        await storage.create_testimonial(testimonial)

    categories = []
    for category in sample_data.SAMPLE_AMENITY_CATEGORIES:
        categories.append(await storage.create_amenity_category(category))

    neighborhoods = []
    for neighborhood in sample_data.SAMPLE_NEIGHBORHOODS:
        neighborhoods.append(await storage.create_neighborhood(neighborhood))

    amenities = []
    for category_index, fields in sample_data.SAMPLE_AMENITIES:
        category = _pick(categories, category_index, "amenity category")
        amenities.append(await storage.create_amenity(AmenityCreate(category_id=category.id, **fields)))

    property_links = []
    for property_index, neighborhood_index in sample_data.PROPERTY_NEIGHBORHOOD_LINKS:
        property_links.append(await storage.add_property_to_neighborhood(PropertyNeighborhoodCreate(
            property_id=_pick(properties, property_index, "property").id,
            neighborhood_id=_pick(neighborhoods, neighborhood_index, "neighborhood").id,
        )))

    amenity_links = []
    for neighborhood_index, amenity_index, distance in sample_data.NEIGHBORHOOD_AMENITY_LINKS:
        amenity_links.append(await storage.add_amenity_to_neighborhood(NeighborhoodAmenityCreate(
            neighborhood_id=_pick(neighborhoods, neighborhood_index, "neighborhood").id,
            amenity_id=_pick(amenities, amenity_index, "amenity").id,
            distance=distance,
        )))

    summary = {
        "users": 1,
        "properties": len(properties),
        "agents": len(sample_data.SAMPLE_AGENTS),
        "testimonials": len(sample_data.SAMPLE_TESTIMONIALS),
        "amenity_categories": len(categories),
        "neighborhoods": len(neighborhoods),
        "amenities": len(amenities),
        "property_neighborhoods": len(property_links),
        "neighborhood_amenities": len(amenity_links),
    }
    logger.info(f"Seeded sample data: {summary}")
    return summary


async def seed_if_empty(storage: Storage) -> bool:
    """Seed only when the store holds no properties. Returns True if it seeded."""
    if await storage.get_all_properties():
        logger.info("Store already populated, skipping sample data")
        return False

    await seed_sample_data(storage)
    return True
