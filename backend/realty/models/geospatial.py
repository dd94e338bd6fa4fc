from pydantic import BaseModel, Field
from typing import Optional


class NeighborhoodCreate(BaseModel):
    name: str
    city: str
    description: str
    safety_rating: int = Field(..., ge=0, le=10)
    walkability_score: int = Field(..., ge=0, le=100)
    school_rating: int = Field(..., ge=0, le=10)
    image_url: str
    latitude: float
    longitude: float


class NeighborhoodUpdate(BaseModel):
    name: Optional[str] = None
    city: Optional[str] = None
    description: Optional[str] = None
    safety_rating: Optional[int] = Field(None, ge=0, le=10)
    walkability_score: Optional[int] = Field(None, ge=0, le=100)
    school_rating: Optional[int] = Field(None, ge=0, le=10)
    image_url: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class Neighborhood(BaseModel):
    id: int
    name: str
    city: str
    description: str
    safety_rating: int
    walkability_score: int
    school_rating: int
    image_url: str
    latitude: float
    longitude: float

    class Config:
        from_attributes = True


class AmenityCategoryCreate(BaseModel):
    name: str
    icon: str  # icon identifier used by the client, e.g. "school"


class AmenityCategory(BaseModel):
    id: int
    name: str
    icon: str

    class Config:
        from_attributes = True


class AmenityCreate(BaseModel):
    name: str
    category_id: int
    address: str
    description: str = ""
    image_url: str = ""
    website: str = ""
    phone_number: str = ""
    latitude: float
    longitude: float


class AmenityUpdate(BaseModel):
    name: Optional[str] = None
    category_id: Optional[int] = None
    address: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    website: Optional[str] = None
    phone_number: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class Amenity(BaseModel):
    id: int
    name: str
    category_id: int
    address: str
    description: str = ""
    image_url: str = ""
    website: str = ""
    phone_number: str = ""
    latitude: float
    longitude: float

    class Config:
        from_attributes = True


class AmenityWithDistance(Amenity):
    """Amenity annotated with the distance (km) stored on its neighborhood edge"""
    distance: float


class NeighborhoodAmenityCreate(BaseModel):
    neighborhood_id: int
    amenity_id: int
    distance: float = Field(0, ge=0)  # km


class NeighborhoodAmenity(BaseModel):
    id: int
    neighborhood_id: int
    amenity_id: int
    distance: float = 0

    class Config:
        from_attributes = True


class PropertyNeighborhoodCreate(BaseModel):
    property_id: int
    neighborhood_id: int


class PropertyNeighborhood(BaseModel):
    id: int
    property_id: int
    neighborhood_id: int

    class Config:
        from_attributes = True
