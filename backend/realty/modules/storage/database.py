"""
Relational storage backend built on the SQLAlchemy ORM.

One session is opened per operation. Mutations commit on success; on any
failure the session is rolled back, the error is logged and re-raised to
the caller unchanged.
"""
from contextlib import contextmanager
from typing import Iterator, List, Optional, Type
from pydantic import BaseModel
from sqlalchemy import and_, or_
from sqlalchemy.orm import Session, sessionmaker
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
from realty.db import models as db
from .base import Storage, utcnow, next_timestamp, partial_changes
from . import filters as query
import logging

logger = logging.getLogger(__name__)


class DatabaseStorage(Storage):
    """Storage backend persisting every collection through SQLAlchemy"""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    @contextmanager
    def _transaction(self, action: str) -> Iterator[Session]:
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise
        finally:
            session.close()

    def _get(self, table, model: Type[BaseModel], row_id: int):
        with self.session_factory() as session:
            row = session.get(table, row_id)
            return model.model_validate(row) if row is not None else None

    def _list(self, table, model: Type[BaseModel], *criteria) -> list:
        with self.session_factory() as session:
            rows = session.query(table).filter(*criteria).order_by(table.id).all()
            return [model.model_validate(row) for row in rows]

    def _insert(self, table, model: Type[BaseModel], action: str, **fields):
        with self._transaction(action) as session:
            row = table(**fields)
            session.add(row)
            session.flush()
            session.refresh(row)
            return model.model_validate(row)

    def _update(self, table, model: Type[BaseModel], row_id: int, action: str, changes: dict, touch: bool = False):
        with self._transaction(action) as session:
            row = session.get(table, row_id)
            if row is None:
                return None

            for field, value in changes.items():
                setattr(row, field, value)
            if touch:
                row.updated_at = next_timestamp(row.updated_at)

            session.flush()
            session.refresh(row)
            return model.model_validate(row)

    def _delete(self, table, action: str, *criteria) -> bool:
        with self._transaction(action) as session:
            deleted = session.query(table).filter(*criteria).delete(synchronize_session=False)
            return deleted > 0

    # User methods
    async def get_user(self, user_id: int) -> Optional[User]:
        return self._get(db.User, User, user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        users = self._list(db.User, User, db.User.username == username)
        return users[0] if users else None

    async def get_user_by_email(self, email: str) -> Optional[User]:
        users = self._list(db.User, User, db.User.email == email)
        return users[0] if users else None

    async def create_user(self, user: UserCreate) -> User:
        return self._insert(db.User, User, "create user", **user.model_dump(), created_at=utcnow())

    async def update_user(self, user_id: int, data: UserUpdate) -> Optional[User]:
        return self._update(db.User, User, user_id, f"update user {user_id}", partial_changes(data, User))

    # Property methods
    async def get_all_properties(self) -> List[Property]:
        return self._list(db.Property, Property)

    async def get_property(self, property_id: int) -> Optional[Property]:
        return self._get(db.Property, Property, property_id)

    async def get_properties_by_owner(self, owner_id: int) -> List[Property]:
        return self._list(db.Property, Property, db.Property.owner_id == owner_id)

    async def get_featured_properties(self) -> List[Property]:
        return self._list(
            db.Property, Property,
            db.Property.is_featured.is_(True),
            db.Property.status == PropertyStatus.ACTIVE.value
        )

    async def get_properties_by_filters(self, filters: PropertyFilters) -> List[Property]:
        conditions = []

        if filters.location:
            conditions.append(or_(
                db.Property.location.icontains(filters.location, autoescape=True),
                db.Property.city.icontains(filters.location, autoescape=True),
                db.Property.state.icontains(filters.location, autoescape=True),
            ))

        if filters.property_type:
            conditions.append(db.Property.property_type == filters.property_type)

        if filters.listing_type:
            conditions.append(db.Property.listing_type == filters.listing_type)

        if filters.status:
            conditions.append(db.Property.status == filters.status)

        if filters.owner_id is not None:
            conditions.append(db.Property.owner_id == filters.owner_id)

        if filters.min_price is not None:
            conditions.append(db.Property.price >= filters.min_price)

        if filters.max_price is not None:
            conditions.append(db.Property.price <= filters.max_price)

        logger.debug(f"Property filter produced {len(conditions)} SQL conditions")
        return self._list(db.Property, Property, *conditions)

    async def create_property(self, property_data: PropertyCreate) -> Property:
        now = utcnow()
        return self._insert(
            db.Property, Property, "create property",
            **property_data.model_dump(), created_at=now, updated_at=now
        )

    async def update_property(self, property_id: int, data: PropertyUpdate) -> Optional[Property]:
        return self._update(
            db.Property, Property, property_id, f"update property {property_id}",
            partial_changes(data, Property), touch=True
        )

    async def update_property_status(self, property_id: int, status: str) -> Optional[Property]:
        return self._update(
            db.Property, Property, property_id, f"update status of property {property_id}",
            {"status": status}, touch=True
        )

    # Agent methods
    async def get_all_agents(self) -> List[Agent]:
        return self._list(db.Agent, Agent)

    async def get_agent(self, agent_id: int) -> Optional[Agent]:
        return self._get(db.Agent, Agent, agent_id)

    async def create_agent(self, agent: AgentCreate) -> Agent:
        return self._insert(db.Agent, Agent, "create agent", **agent.model_dump())

    # Testimonial methods
    async def get_all_testimonials(self) -> List[Testimonial]:
        return self._list(db.Testimonial, Testimonial)

    async def get_testimonial(self, testimonial_id: int) -> Optional[Testimonial]:
        return self._get(db.Testimonial, Testimonial, testimonial_id)

    async def create_testimonial(self, testimonial: TestimonialCreate) -> Testimonial:
        return self._insert(db.Testimonial, Testimonial, "create testimonial", **testimonial.model_dump())

    # Waitlist methods
    async def get_all_waitlist_entries(self) -> List[WaitlistEntry]:
        return self._list(db.WaitlistEntry, WaitlistEntry)

    async def get_waitlist_entry(self, entry_id: int) -> Optional[WaitlistEntry]:
        return self._get(db.WaitlistEntry, WaitlistEntry, entry_id)

    async def create_waitlist_entry(self, entry: WaitlistEntryCreate) -> WaitlistEntry:
        return self._insert(db.WaitlistEntry, WaitlistEntry, "create waitlist entry", **entry.model_dump())

    # Message methods
    async def get_messages_by_user(self, user_id: int) -> List[Message]:
        return self._list(
            db.Message, Message,
            or_(db.Message.sender_id == user_id, db.Message.recipient_id == user_id)
        )

    async def get_messages_between_users(self, user1_id: int, user2_id: int) -> List[Message]:
        return self._list(
            db.Message, Message,
            or_(
                and_(db.Message.sender_id == user1_id, db.Message.recipient_id == user2_id),
                and_(db.Message.sender_id == user2_id, db.Message.recipient_id == user1_id),
            )
        )

    async def get_messages_by_property(self, property_id: int) -> List[Message]:
        return self._list(db.Message, Message, db.Message.property_id == property_id)

    async def create_message(self, message: MessageCreate) -> Message:
        return self._insert(
            db.Message, Message, "create message",
            **message.model_dump(), is_read=False, created_at=utcnow()
        )

    async def mark_message_as_read(self, message_id: int) -> Optional[Message]:
        return self._update(db.Message, Message, message_id, f"mark message {message_id} as read", {"is_read": True})

    # Saved property methods
    async def get_saved_properties_by_user(self, user_id: int) -> List[SavedProperty]:
        return self._list(db.SavedProperty, SavedProperty, db.SavedProperty.user_id == user_id)

    async def save_property(self, saved_property: SavedPropertyCreate) -> SavedProperty:
        return self._insert(
            db.SavedProperty, SavedProperty, "save property",
            **saved_property.model_dump(), created_at=utcnow()
        )

    async def remove_saved_property(self, user_id: int, property_id: int) -> bool:
        return self._delete(
            db.SavedProperty, "remove saved property",
            db.SavedProperty.user_id == user_id,
            db.SavedProperty.property_id == property_id
        )

    # Neighborhood methods
    async def get_all_neighborhoods(self) -> List[Neighborhood]:
        return self._list(db.Neighborhood, Neighborhood)

    async def get_neighborhood(self, neighborhood_id: int) -> Optional[Neighborhood]:
        return self._get(db.Neighborhood, Neighborhood, neighborhood_id)

    async def get_neighborhoods_by_city(self, city: str) -> List[Neighborhood]:
        return self._list(db.Neighborhood, Neighborhood, db.Neighborhood.city.icontains(city, autoescape=True))

    async def create_neighborhood(self, neighborhood: NeighborhoodCreate) -> Neighborhood:
        return self._insert(db.Neighborhood, Neighborhood, "create neighborhood", **neighborhood.model_dump())

    async def update_neighborhood(self, neighborhood_id: int, data: NeighborhoodUpdate) -> Optional[Neighborhood]:
        return self._update(
            db.Neighborhood, Neighborhood, neighborhood_id, f"update neighborhood {neighborhood_id}",
            partial_changes(data, Neighborhood)
        )

    # Property neighborhood methods
    async def get_neighborhoods_by_property(self, property_id: int) -> List[Neighborhood]:
        edges = self._list(
            db.PropertyNeighborhood, PropertyNeighborhood,
            db.PropertyNeighborhood.property_id == property_id
        )
        if not edges:
            return []

        neighborhood_ids = [edge.neighborhood_id for edge in edges]
        found = {
            n.id: n for n in self._list(db.Neighborhood, Neighborhood, db.Neighborhood.id.in_(neighborhood_ids))
        }
        return query.resolve_edges(neighborhood_ids, found.get)

    async def add_property_to_neighborhood(self, edge: PropertyNeighborhoodCreate) -> PropertyNeighborhood:
        return self._insert(
            db.PropertyNeighborhood, PropertyNeighborhood, "add property to neighborhood", **edge.model_dump()
        )

    async def remove_property_from_neighborhood(self, property_id: int, neighborhood_id: int) -> bool:
        return self._delete(
            db.PropertyNeighborhood, "remove property from neighborhood",
            db.PropertyNeighborhood.property_id == property_id,
            db.PropertyNeighborhood.neighborhood_id == neighborhood_id
        )

    # Amenity category methods
    async def get_all_amenity_categories(self) -> List[AmenityCategory]:
        return self._list(db.AmenityCategory, AmenityCategory)

    async def get_amenity_category(self, category_id: int) -> Optional[AmenityCategory]:
        return self._get(db.AmenityCategory, AmenityCategory, category_id)

    async def create_amenity_category(self, category: AmenityCategoryCreate) -> AmenityCategory:
        return self._insert(db.AmenityCategory, AmenityCategory, "create amenity category", **category.model_dump())

    # Amenity methods
    async def get_all_amenities(self) -> List[Amenity]:
        return self._list(db.Amenity, Amenity)

    async def get_amenity(self, amenity_id: int) -> Optional[Amenity]:
        return self._get(db.Amenity, Amenity, amenity_id)

    async def get_amenities_by_category(self, category_id: int) -> List[Amenity]:
        return self._list(db.Amenity, Amenity, db.Amenity.category_id == category_id)

    async def create_amenity(self, amenity: AmenityCreate) -> Amenity:
        return self._insert(db.Amenity, Amenity, "create amenity", **amenity.model_dump())

    async def update_amenity(self, amenity_id: int, data: AmenityUpdate) -> Optional[Amenity]:
        return self._update(
            db.Amenity, Amenity, amenity_id, f"update amenity {amenity_id}",
            partial_changes(data, Amenity)
        )

    # Neighborhood amenity methods
    async def get_amenities_by_neighborhood(self, neighborhood_id: int) -> List[AmenityWithDistance]:
        if self._get(db.Neighborhood, Neighborhood, neighborhood_id) is None:
            return []

        edges = self._list(
            db.NeighborhoodAmenity, NeighborhoodAmenity,
            db.NeighborhoodAmenity.neighborhood_id == neighborhood_id
        )
        if not edges:
            return []

        amenity_ids = [edge.amenity_id for edge in edges]
        amenities_by_id = {
            a.id: a for a in self._list(db.Amenity, Amenity, db.Amenity.id.in_(amenity_ids))
        }
        return query.annotate_with_edge_distance(edges, amenities_by_id)

    async def get_nearby_amenities(self, latitude: float, longitude: float, radius: float) -> List[Amenity]:
        return query.within_radius(self._list(db.Amenity, Amenity), latitude, longitude, radius)

    async def add_amenity_to_neighborhood(self, edge: NeighborhoodAmenityCreate) -> NeighborhoodAmenity:
        return self._insert(
            db.NeighborhoodAmenity, NeighborhoodAmenity, "add amenity to neighborhood", **edge.model_dump()
        )

    async def remove_amenity_from_neighborhood(self, neighborhood_id: int, amenity_id: int) -> bool:
        return self._delete(
            db.NeighborhoodAmenity, "remove amenity from neighborhood",
            db.NeighborhoodAmenity.neighborhood_id == neighborhood_id,
            db.NeighborhoodAmenity.amenity_id == amenity_id
        )
