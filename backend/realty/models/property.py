from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from enum import Enum


class ListingType(str, Enum):
    RENT = "rent"
    SELL = "sell"


class PropertyStatus(str, Enum):
    ACTIVE = "active"
    SOLD = "sold"
    RENTED = "rented"
    INACTIVE = "inactive"


class PropertyCreate(BaseModel):
    owner_id: int
    title: str
    description: str
    price: int
    location: str
    city: str
    state: str
    bedrooms: int = Field(..., ge=0)
    bathrooms: int = Field(..., ge=0)
    square_feet: int = Field(..., ge=0)
    property_type: str  # free text: "Villa", "Apartment", ...
    listing_type: ListingType = ListingType.SELL
    status: PropertyStatus = PropertyStatus.ACTIVE
    is_featured: bool = False
    is_new: bool = False
    image_url: str
    additional_images: List[str] = []
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    class Config:
        use_enum_values = True


class PropertyUpdate(BaseModel):
    """Partial property update; unset fields keep their stored values"""
    owner_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[int] = None
    location: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[int] = Field(None, ge=0)
    square_feet: Optional[int] = Field(None, ge=0)
    property_type: Optional[str] = None
    listing_type: Optional[ListingType] = None
    status: Optional[PropertyStatus] = None
    is_featured: Optional[bool] = None
    is_new: Optional[bool] = None
    image_url: Optional[str] = None
    additional_images: Optional[List[str]] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    class Config:
        use_enum_values = True


class Property(BaseModel):
    id: int
    owner_id: int
    title: str
    description: str
    price: int
    location: str
    city: str
    state: str
    bedrooms: int
    bathrooms: int
    square_feet: int
    property_type: str
    listing_type: str
    status: str = PropertyStatus.ACTIVE.value
    is_featured: bool = False
    is_new: bool = False
    image_url: str
    additional_images: List[str] = []
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
