# Pydantic models shared by the storage backends and the API

from .user import User, UserCreate, UserUpdate, UserPublic, UserType
from .property import Property, PropertyCreate, PropertyUpdate, PropertyStatus, ListingType
from .search import PropertyFilters
from .directory import (
    Agent, AgentCreate,
    Testimonial, TestimonialCreate,
    WaitlistEntry, WaitlistEntryCreate
)
from .messaging import Message, MessageCreate, SavedProperty, SavedPropertyCreate
from .geospatial import (
    Neighborhood, NeighborhoodCreate, NeighborhoodUpdate,
    AmenityCategory, AmenityCategoryCreate,
    Amenity, AmenityCreate, AmenityUpdate, AmenityWithDistance,
    NeighborhoodAmenity, NeighborhoodAmenityCreate,
    PropertyNeighborhood, PropertyNeighborhoodCreate
)

__all__ = [
    # User models
    "User", "UserCreate", "UserUpdate", "UserPublic", "UserType",

    # Property models
    "Property", "PropertyCreate", "PropertyUpdate", "PropertyStatus", "ListingType",
    "PropertyFilters",

    # Directory models
    "Agent", "AgentCreate", "Testimonial", "TestimonialCreate",
    "WaitlistEntry", "WaitlistEntryCreate",

    # Messaging models
    "Message", "MessageCreate", "SavedProperty", "SavedPropertyCreate",

    # Neighborhood and amenity models
    "Neighborhood", "NeighborhoodCreate", "NeighborhoodUpdate",
    "AmenityCategory", "AmenityCategoryCreate",
    "Amenity", "AmenityCreate", "AmenityUpdate", "AmenityWithDistance",
    "NeighborhoodAmenity", "NeighborhoodAmenityCreate",
    "PropertyNeighborhood", "PropertyNeighborhoodCreate"
]
