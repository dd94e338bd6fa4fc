"""
Storage contract for the marketplace.

Every backend implements the same coroutine methods. Lookups that find
nothing return ``None`` instead of raising. Foreign ids and
username/email uniqueness are validated by the caller, never here.
"""
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Type
from pydantic import BaseModel
from realty.models import (
    User, UserCreate, UserUpdate,
    Property, PropertyCreate, PropertyUpdate, PropertyFilters,
    Agent, AgentCreate, Testimonial, TestimonialCreate, WaitlistEntry, WaitlistEntryCreate,
    Message, MessageCreate, SavedProperty, SavedPropertyCreate,
    Neighborhood, NeighborhoodCreate, NeighborhoodUpdate,
    AmenityCategory, AmenityCategoryCreate,
    Amenity, AmenityCreate, AmenityUpdate, AmenityWithDistance,
    NeighborhoodAmenity, NeighborhoodAmenityCreate,
    PropertyNeighborhood, PropertyNeighborhoodCreate
)


def utcnow() -> datetime:
    """Naive UTC timestamp, the form both backends store"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def next_timestamp(previous: datetime) -> datetime:
    """Current time, bumped past ``previous`` so update stamps strictly increase"""
    now = utcnow()
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now


def partial_changes(data: BaseModel, target: Type[BaseModel]) -> Dict[str, Any]:
    """Fields explicitly set on an update payload.

    An explicit ``None`` is kept only for fields that are nullable on
    ``target``; for required fields it means "leave unchanged".
    """
    changes = {}
    for name, value in data.model_dump(exclude_unset=True).items():
        field = target.model_fields.get(name)
        if field is None:
            continue
        if value is None and (field.is_required() or field.default is not None):
            continue
        changes[name] = value
    return changes


class Storage(ABC):
    """Storage operations the HTTP layer depends on"""

    # User methods
    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]:
        ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    async def get_user_by_email(self, email: str) -> Optional[User]:
        ...

    @abstractmethod
    async def create_user(self, user: UserCreate) -> User:
        ...

    @abstractmethod
    async def update_user(self, user_id: int, data: UserUpdate) -> Optional[User]:
        """Apply the fields set on ``data``; None when the user does not exist"""

    # Property methods
    @abstractmethod
    async def get_all_properties(self) -> List[Property]:
        ...

    @abstractmethod
    async def get_property(self, property_id: int) -> Optional[Property]:
        ...

    @abstractmethod
    async def get_properties_by_owner(self, owner_id: int) -> List[Property]:
        ...

    @abstractmethod
    async def get_featured_properties(self) -> List[Property]:
        """Featured properties that are still active"""

    @abstractmethod
    async def get_properties_by_filters(self, filters: PropertyFilters) -> List[Property]:
        """Properties matching every predicate set on ``filters``"""

    @abstractmethod
    async def create_property(self, property_data: PropertyCreate) -> Property:
        ...

    @abstractmethod
    async def update_property(self, property_id: int, data: PropertyUpdate) -> Optional[Property]:
        """Merge the fields set on ``data``; bumps ``updated_at``"""

    @abstractmethod
    async def update_property_status(self, property_id: int, status: str) -> Optional[Property]:
        ...

    # Agent methods
    @abstractmethod
    async def get_all_agents(self) -> List[Agent]:
        ...

    @abstractmethod
    async def get_agent(self, agent_id: int) -> Optional[Agent]:
        ...

    @abstractmethod
    async def create_agent(self, agent: AgentCreate) -> Agent:
        ...

    # Testimonial methods
    @abstractmethod
    async def get_all_testimonials(self) -> List[Testimonial]:
        ...

    @abstractmethod
    async def get_testimonial(self, testimonial_id: int) -> Optional[Testimonial]:
        ...

    @abstractmethod
    async def create_testimonial(self, testimonial: TestimonialCreate) -> Testimonial:
        ...

    # Waitlist methods
    @abstractmethod
    async def get_all_waitlist_entries(self) -> List[WaitlistEntry]:
        ...

    @abstractmethod
    async def get_waitlist_entry(self, entry_id: int) -> Optional[WaitlistEntry]:
        ...

    @abstractmethod
    async def create_waitlist_entry(self, entry: WaitlistEntryCreate) -> WaitlistEntry:
        ...

    # Message methods
    @abstractmethod
    async def get_messages_by_user(self, user_id: int) -> List[Message]:
        """Messages the user sent or received"""

    @abstractmethod
    async def get_messages_between_users(self, user1_id: int, user2_id: int) -> List[Message]:
        """Messages exchanged between two users, in either direction"""

    @abstractmethod
    async def get_messages_by_property(self, property_id: int) -> List[Message]:
        ...

    @abstractmethod
    async def create_message(self, message: MessageCreate) -> Message:
        ...

    @abstractmethod
    async def mark_message_as_read(self, message_id: int) -> Optional[Message]:
        """Set ``is_read``; calling it again on a read message is a no-op"""

    # Saved property methods
    @abstractmethod
    async def get_saved_properties_by_user(self, user_id: int) -> List[SavedProperty]:
        ...

    @abstractmethod
    async def save_property(self, saved_property: SavedPropertyCreate) -> SavedProperty:
        ...

    @abstractmethod
    async def remove_saved_property(self, user_id: int, property_id: int) -> bool:
        """Delete the (user, property) pair; False when nothing matched"""

    # Neighborhood methods
    @abstractmethod
    async def get_all_neighborhoods(self) -> List[Neighborhood]:
        ...

    @abstractmethod
    async def get_neighborhood(self, neighborhood_id: int) -> Optional[Neighborhood]:
        ...

    @abstractmethod
    async def get_neighborhoods_by_city(self, city: str) -> List[Neighborhood]:
        """Case-insensitive substring match on the neighborhood's city"""

    @abstractmethod
    async def create_neighborhood(self, neighborhood: NeighborhoodCreate) -> Neighborhood:
        ...

    @abstractmethod
    async def update_neighborhood(self, neighborhood_id: int, data: NeighborhoodUpdate) -> Optional[Neighborhood]:
        ...

    # Property neighborhood methods
    @abstractmethod
    async def get_neighborhoods_by_property(self, property_id: int) -> List[Neighborhood]:
        """Neighborhoods linked to the property; dangling edges are skipped"""

    @abstractmethod
    async def add_property_to_neighborhood(self, edge: PropertyNeighborhoodCreate) -> PropertyNeighborhood:
        ...

    @abstractmethod
    async def remove_property_from_neighborhood(self, property_id: int, neighborhood_id: int) -> bool:
        ...

    # Amenity category methods
    @abstractmethod
    async def get_all_amenity_categories(self) -> List[AmenityCategory]:
        ...

    @abstractmethod
    async def get_amenity_category(self, category_id: int) -> Optional[AmenityCategory]:
        ...

    @abstractmethod
    async def create_amenity_category(self, category: AmenityCategoryCreate) -> AmenityCategory:
        ...

    # Amenity methods
    @abstractmethod
    async def get_all_amenities(self) -> List[Amenity]:
        ...

    @abstractmethod
    async def get_amenity(self, amenity_id: int) -> Optional[Amenity]:
        ...

    @abstractmethod
    async def get_amenities_by_category(self, category_id: int) -> List[Amenity]:
        ...

    @abstractmethod
    async def create_amenity(self, amenity: AmenityCreate) -> Amenity:
        ...

    @abstractmethod
    async def update_amenity(self, amenity_id: int, data: AmenityUpdate) -> Optional[Amenity]:
        ...

    # Neighborhood amenity methods
    @abstractmethod
    async def get_amenities_by_neighborhood(self, neighborhood_id: int) -> List[AmenityWithDistance]:
        """Linked amenities, each carrying the distance stored on its edge"""

    @abstractmethod
    async def get_nearby_amenities(self, latitude: float, longitude: float, radius: float) -> List[Amenity]:
        """Amenities within ``radius`` km of the point (Haversine, inclusive)"""

    @abstractmethod
    async def add_amenity_to_neighborhood(self, edge: NeighborhoodAmenityCreate) -> NeighborhoodAmenity:
        ...

    @abstractmethod
    async def remove_amenity_from_neighborhood(self, neighborhood_id: int, amenity_id: int) -> bool:
        ...
