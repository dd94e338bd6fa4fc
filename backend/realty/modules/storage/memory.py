"""
In-memory storage backend.

Each entity type lives in its own ``EntityCollection`` with an id counter
scoped to the storage instance. None of the coroutines below await
anything, so on a single event loop every read-modify-write runs to
completion without interleaving.
"""
from typing import Callable, Dict, Generic, Iterator, List, Optional, Type, TypeVar
from pydantic import BaseModel
from realty.models import (
    User, UserCreate, UserUpdate,
    Property, PropertyCreate, PropertyUpdate, PropertyFilters, PropertyStatus,
    Agent, AgentCreate, Testimonial, TestimonialCreate, WaitlistEntry, WaitlistEntryCreate,
    Message, MessageCreate, SavedProperty, SavedPropertyCreate,
    Neighborhood, NeighborhoodCreate, NeighborhoodUpdate,
    AmenityCategory, AmenityCategoryCreate,
    Amenity, AmenityCreate, AmenityUpdate, AmenityWithDistance,
    NeighborhoodAmenity, NeighborhoodAmenityCreate,
    PropertyNeighborhood, PropertyNeighborhoodCreate
)
from .base import Storage, utcnow, next_timestamp, partial_changes
from . import filters as query
import logging

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class EntityCollection(Generic[M]):
    """Id-keyed collection of one entity type with an auto-incrementing id"""

    def __init__(self, model: Type[M]):
        self.model = model
        self._items: Dict[int, M] = {}
        self._next_id = 1

    def __iter__(self) -> Iterator[M]:
        # Insertion order is id order because ids only grow
        for item in self._items.values():
            yield item.model_copy(deep=True)

    def get(self, item_id: int) -> Optional[M]:
        item = self._items.get(item_id)
        return item.model_copy(deep=True) if item is not None else None

    def find(self, predicate: Callable[[M], bool]) -> List[M]:
        return [item for item in self if predicate(item)]

    def first(self, predicate: Callable[[M], bool]) -> Optional[M]:
        for item in self:
            if predicate(item):
                return item
        return None

    def insert(self, **fields) -> M:
        item_id = self._next_id
        self._next_id += 1
        item = self.model(id=item_id, **fields)
        self._items[item_id] = item
        return item.model_copy(deep=True)

    def replace(self, item_id: int, **changes) -> Optional[M]:
        current = self._items.get(item_id)
        if current is None:
            return None
        merged = self.model(**{**current.model_dump(), **changes})
        self._items[item_id] = merged
        return merged.model_copy(deep=True)

    def delete_where(self, predicate: Callable[[M], bool]) -> int:
        doomed = [item_id for item_id, item in self._items.items() if predicate(item)]
        for item_id in doomed:
            del self._items[item_id]
        return len(doomed)


class MemoryStorage(Storage):
    """Storage backend keeping every collection in process memory"""

    def __init__(self):
        self.users = EntityCollection(User)
        self.properties = EntityCollection(Property)
        self.agents = EntityCollection(Agent)
        self.testimonials = EntityCollection(Testimonial)
        self.waitlist_entries = EntityCollection(WaitlistEntry)
        self.messages = EntityCollection(Message)
        self.saved_properties = EntityCollection(SavedProperty)
        self.neighborhoods = EntityCollection(Neighborhood)
        self.amenity_categories = EntityCollection(AmenityCategory)
        self.amenities = EntityCollection(Amenity)
        self.neighborhood_amenities = EntityCollection(NeighborhoodAmenity)
        self.property_neighborhoods = EntityCollection(PropertyNeighborhood)

    # User methods
    async def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.first(lambda u: u.username == username)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return self.users.first(lambda u: u.email == email)

    async def create_user(self, user: UserCreate) -> User:
        return self.users.insert(**user.model_dump(), created_at=utcnow())

    async def update_user(self, user_id: int, data: UserUpdate) -> Optional[User]:
        # created_at is not part of UserUpdate, so it can never change here
        return self.users.replace(user_id, **partial_changes(data, User))

    # Property methods
    async def get_all_properties(self) -> List[Property]:
        return list(self.properties)

    async def get_property(self, property_id: int) -> Optional[Property]:
        return self.properties.get(property_id)

    async def get_properties_by_owner(self, owner_id: int) -> List[Property]:
        return self.properties.find(lambda p: p.owner_id == owner_id)

    async def get_featured_properties(self) -> List[Property]:
        return self.properties.find(
            lambda p: p.is_featured and p.status == PropertyStatus.ACTIVE.value
        )

    async def get_properties_by_filters(self, filters: PropertyFilters) -> List[Property]:
        return query.filter_properties(self.properties, filters)

    async def create_property(self, property_data: PropertyCreate) -> Property:
        now = utcnow()
        return self.properties.insert(**property_data.model_dump(), created_at=now, updated_at=now)

    async def update_property(self, property_id: int, data: PropertyUpdate) -> Optional[Property]:
        current = self.properties.get(property_id)
        if current is None:
            return None
        changes = partial_changes(data, Property)
        return self.properties.replace(
            property_id, **changes, updated_at=next_timestamp(current.updated_at)
        )

    async def update_property_status(self, property_id: int, status: str) -> Optional[Property]:
        current = self.properties.get(property_id)
        if current is None:
            return None
        return self.properties.replace(
            property_id, status=status, updated_at=next_timestamp(current.updated_at)
        )

    # Agent methods
    async def get_all_agents(self) -> List[Agent]:
        return list(self.agents)

    async def get_agent(self, agent_id: int) -> Optional[Agent]:
        return self.agents.get(agent_id)

    async def create_agent(self, agent: AgentCreate) -> Agent:
        return self.agents.insert(**agent.model_dump())

    # Testimonial methods
    async def get_all_testimonials(self) -> List[Testimonial]:
        return list(self.testimonials)

    async def get_testimonial(self, testimonial_id: int) -> Optional[Testimonial]:
        return self.testimonials.get(testimonial_id)

    async def create_testimonial(self, testimonial: TestimonialCreate) -> Testimonial:
        return self.testimonials.insert(**testimonial.model_dump())

    # Waitlist methods
    async def get_all_waitlist_entries(self) -> List[WaitlistEntry]:
        return list(self.waitlist_entries)

    async def get_waitlist_entry(self, entry_id: int) -> Optional[WaitlistEntry]:
        return self.waitlist_entries.get(entry_id)

    async def create_waitlist_entry(self, entry: WaitlistEntryCreate) -> WaitlistEntry:
        return self.waitlist_entries.insert(**entry.model_dump())

    # Message methods
    async def get_messages_by_user(self, user_id: int) -> List[Message]:
        return self.messages.find(lambda m: m.sender_id == user_id or m.recipient_id == user_id)

    async def get_messages_between_users(self, user1_id: int, user2_id: int) -> List[Message]:
        return self.messages.find(
            lambda m: (m.sender_id, m.recipient_id) in ((user1_id, user2_id), (user2_id, user1_id))
        )

    async def get_messages_by_property(self, property_id: int) -> List[Message]:
        return self.messages.find(lambda m: m.property_id == property_id)

    async def create_message(self, message: MessageCreate) -> Message:
        return self.messages.insert(**message.model_dump(), is_read=False, created_at=utcnow())

    async def mark_message_as_read(self, message_id: int) -> Optional[Message]:
        return self.messages.replace(message_id, is_read=True)

    # Saved property methods
    async def get_saved_properties_by_user(self, user_id: int) -> List[SavedProperty]:
        return self.saved_properties.find(lambda s: s.user_id == user_id)

    async def save_property(self, saved_property: SavedPropertyCreate) -> SavedProperty:
        return self.saved_properties.insert(**saved_property.model_dump(), created_at=utcnow())

    async def remove_saved_property(self, user_id: int, property_id: int) -> bool:
        removed = self.saved_properties.delete_where(
            lambda s: s.user_id == user_id and s.property_id == property_id
        )
        return removed > 0

    # Neighborhood methods
    async def get_all_neighborhoods(self) -> List[Neighborhood]:
        return list(self.neighborhoods)

    async def get_neighborhood(self, neighborhood_id: int) -> Optional[Neighborhood]:
        return self.neighborhoods.get(neighborhood_id)

    async def get_neighborhoods_by_city(self, city: str) -> List[Neighborhood]:
        needle = city.lower()
        return self.neighborhoods.find(lambda n: needle in n.city.lower())

    async def create_neighborhood(self, neighborhood: NeighborhoodCreate) -> Neighborhood:
        return self.neighborhoods.insert(**neighborhood.model_dump())

    async def update_neighborhood(self, neighborhood_id: int, data: NeighborhoodUpdate) -> Optional[Neighborhood]:
        return self.neighborhoods.replace(neighborhood_id, **partial_changes(data, Neighborhood))

    # Property neighborhood methods
    async def get_neighborhoods_by_property(self, property_id: int) -> List[Neighborhood]:
        edges = self.property_neighborhoods.find(lambda e: e.property_id == property_id)
        return query.resolve_edges((e.neighborhood_id for e in edges), self.neighborhoods.get)

    async def add_property_to_neighborhood(self, edge: PropertyNeighborhoodCreate) -> PropertyNeighborhood:
        return self.property_neighborhoods.insert(**edge.model_dump())

    async def remove_property_from_neighborhood(self, property_id: int, neighborhood_id: int) -> bool:
        removed = self.property_neighborhoods.delete_where(
            lambda e: e.property_id == property_id and e.neighborhood_id == neighborhood_id
        )
        return removed > 0

    # Amenity category methods
    async def get_all_amenity_categories(self) -> List[AmenityCategory]:
        return list(self.amenity_categories)

    async def get_amenity_category(self, category_id: int) -> Optional[AmenityCategory]:
        return self.amenity_categories.get(category_id)

    async def create_amenity_category(self, category: AmenityCategoryCreate) -> AmenityCategory:
        return self.amenity_categories.insert(**category.model_dump())

    # Amenity methods
    async def get_all_amenities(self) -> List[Amenity]:
        return list(self.amenities)

    async def get_amenity(self, amenity_id: int) -> Optional[Amenity]:
        return self.amenities.get(amenity_id)

    async def get_amenities_by_category(self, category_id: int) -> List[Amenity]:
        return self.amenities.find(lambda a: a.category_id == category_id)

    async def create_amenity(self, amenity: AmenityCreate) -> Amenity:
        return self.amenities.insert(**amenity.model_dump())

    async def update_amenity(self, amenity_id: int, data: AmenityUpdate) -> Optional[Amenity]:
        return self.amenities.replace(amenity_id, **partial_changes(data, Amenity))

    # Neighborhood amenity methods
    async def get_amenities_by_neighborhood(self, neighborhood_id: int) -> List[AmenityWithDistance]:
        if self.neighborhoods.get(neighborhood_id) is None:
            return []

        edges = self.neighborhood_amenities.find(lambda e: e.neighborhood_id == neighborhood_id)
        amenities_by_id = {
            amenity.id: amenity
            for amenity in query.resolve_edges((e.amenity_id for e in edges), self.amenities.get)
        }
        return query.annotate_with_edge_distance(edges, amenities_by_id)

    async def get_nearby_amenities(self, latitude: float, longitude: float, radius: float) -> List[Amenity]:
        return query.within_radius(self.amenities, latitude, longitude, radius)

    async def add_amenity_to_neighborhood(self, edge: NeighborhoodAmenityCreate) -> NeighborhoodAmenity:
        return self.neighborhood_amenities.insert(**edge.model_dump())

    async def remove_amenity_from_neighborhood(self, neighborhood_id: int, amenity_id: int) -> bool:
        removed = self.neighborhood_amenities.delete_where(
            lambda e: e.neighborhood_id == neighborhood_id and e.amenity_id == amenity_id
        )
        return removed > 0
