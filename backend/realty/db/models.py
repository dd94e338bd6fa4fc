from sqlalchemy import Column, Integer, String, Float, DateTime, Boolean, Text, JSON, Index
from realty.core.database import Base


# Foreign ids are plain integer columns: referential integrity is checked by
# the callers of the storage layer, and relation lookups tolerate dangling ids.


class User(Base):
    """Marketplace account (renter/buyer or landlord/seller)"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)

    username = Column(String(100), nullable=False)
    password = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    full_name = Column(String(200), nullable=False)
    user_type = Column(String(50), nullable=False)

    # Profile
    phone_number = Column(String(50))
    bio = Column(Text)
    profile_image = Column(String(1000))

    created_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index('idx_users_username', 'username'),
        Index('idx_users_email', 'email'),
    )


class Property(Base):
    """Property listing owned by a landlord/seller"""
    __tablename__ = "properties"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(Integer, nullable=False)

    # Basic property information
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Integer, nullable=False)
    bedrooms = Column(Integer, nullable=False)
    bathrooms = Column(Integer, nullable=False)
    square_feet = Column(Integer, nullable=False)
    property_type = Column(String(100), nullable=False)

    # Address and location
    location = Column(String(500), nullable=False)
    city = Column(String(100), nullable=False)
    state = Column(String(100), nullable=False)
    latitude = Column(Float)
    longitude = Column(Float)

    # Listing information
    listing_type = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False, default="active")
    is_featured = Column(Boolean, nullable=False, default=False)
    is_new = Column(Boolean, nullable=False, default=False)
    image_url = Column(String(1000), nullable=False)
    additional_images = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index('idx_properties_owner_id', 'owner_id'),
        Index('idx_properties_city', 'city'),
        Index('idx_properties_property_type', 'property_type'),
        Index('idx_properties_listing_type', 'listing_type'),
        Index('idx_properties_status', 'status'),
        Index('idx_properties_price', 'price'),
    )


class Agent(Base):
    __tablename__ = "agents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    title = Column(String(200), nullable=False)
    bio = Column(Text, nullable=False)
    image_url = Column(String(1000), nullable=False)
    instagram = Column(String(200))
    linkedin = Column(String(200))
    email = Column(String(255), nullable=False)


class Testimonial(Base):
    __tablename__ = "testimonials"

    id = Column(Integer, primary_key=True, autoincrement=True)
    quote = Column(Text, nullable=False)
    name = Column(String(200), nullable=False)
    location = Column(String(200), nullable=False)
    rating = Column(Integer, nullable=False)
    image_url = Column(String(1000), nullable=False)


class WaitlistEntry(Base):
    __tablename__ = "waitlist_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False)
    property_interest = Column(String(200), nullable=False)
    agreed_to_terms = Column(Boolean, nullable=False)


class Message(Base):
    """Message between two users, optionally about a property"""
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sender_id = Column(Integer, nullable=False)
    recipient_id = Column(Integer, nullable=False)
    property_id = Column(Integer)
    content = Column(Text, nullable=False)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index('idx_messages_sender_id', 'sender_id'),
        Index('idx_messages_recipient_id', 'recipient_id'),
        Index('idx_messages_property_id', 'property_id'),
    )


class SavedProperty(Base):
    """User's saved/favorite properties"""
    __tablename__ = "saved_properties"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False)
    property_id = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index('idx_saved_properties_user_id', 'user_id'),
        Index('idx_saved_properties_property_id', 'property_id'),
    )


class Neighborhood(Base):
    __tablename__ = "neighborhoods"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    city = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    safety_rating = Column(Integer, nullable=False)
    walkability_score = Column(Integer, nullable=False)
    school_rating = Column(Integer, nullable=False)
    image_url = Column(String(1000), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    __table_args__ = (
        Index('idx_neighborhoods_city', 'city'),
    )


class AmenityCategory(Base):
    __tablename__ = "amenity_categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    icon = Column(String(100), nullable=False)


class Amenity(Base):
    """Amenity model for nearby facilities"""
    __tablename__ = "amenities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    category_id = Column(Integer, nullable=False)

    address = Column(String(500), nullable=False)
    description = Column(Text, nullable=False, default="")
    image_url = Column(String(1000), nullable=False, default="")
    website = Column(String(500), nullable=False, default="")
    phone_number = Column(String(50), nullable=False, default="")

    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)

    __table_args__ = (
        Index('idx_amenities_category_id', 'category_id'),
    )


class NeighborhoodAmenity(Base):
    """Edge between a neighborhood and an amenity, with a cached distance (km)"""
    __tablename__ = "neighborhood_amenities"

    id = Column(Integer, primary_key=True, autoincrement=True)
    neighborhood_id = Column(Integer, nullable=False)
    amenity_id = Column(Integer, nullable=False)
    distance = Column(Float, nullable=False, default=0)

    __table_args__ = (
        Index('idx_neighborhood_amenities_neighborhood_id', 'neighborhood_id'),
        Index('idx_neighborhood_amenities_amenity_id', 'amenity_id'),
    )


class PropertyNeighborhood(Base):
    __tablename__ = "property_neighborhoods"

    id = Column(Integer, primary_key=True, autoincrement=True)
    property_id = Column(Integer, nullable=False)
    neighborhood_id = Column(Integer, nullable=False)

    __table_args__ = (
        Index('idx_property_neighborhoods_property_id', 'property_id'),
        Index('idx_property_neighborhoods_neighborhood_id', 'neighborhood_id'),
    )
