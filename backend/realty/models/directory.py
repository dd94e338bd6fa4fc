from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class AgentCreate(BaseModel):
    name: str
    title: str
    bio: str
    image_url: str
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    email: EmailStr


class Agent(BaseModel):
    id: int
    name: str
    title: str
    bio: str
    image_url: str
    instagram: Optional[str] = None
    linkedin: Optional[str] = None
    email: str

    class Config:
        from_attributes = True


class TestimonialCreate(BaseModel):
    quote: str
    name: str
    location: str
    rating: int = Field(..., ge=1, le=5)
    image_url: str


class Testimonial(BaseModel):
    id: int
    quote: str
    name: str
    location: str
    rating: int
    image_url: str

    class Config:
        from_attributes = True


class WaitlistEntryCreate(BaseModel):
    full_name: str
    email: EmailStr
    property_interest: str
    agreed_to_terms: bool


class WaitlistEntry(BaseModel):
    id: int
    full_name: str
    email: str
    property_interest: str
    agreed_to_terms: bool

    class Config:
        from_attributes = True
