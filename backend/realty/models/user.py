from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime
from enum import Enum


class UserType(str, Enum):
    RENT_AND_BUY = "Rent & Buy"
    LANDLORD_AND_SELL = "Landlord & Sell"


class UserCreate(BaseModel):
    username: str
    password: str  # opaque; credential handling lives outside storage
    email: EmailStr
    full_name: str
    user_type: UserType = UserType.RENT_AND_BUY
    phone_number: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None

    class Config:
        use_enum_values = True


class UserUpdate(BaseModel):
    """Partial profile update; only fields that were set are applied"""
    username: Optional[str] = None
    password: Optional[str] = None
    email: Optional[EmailStr] = None
    full_name: Optional[str] = None
    user_type: Optional[UserType] = None
    phone_number: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None

    class Config:
        use_enum_values = True


class User(BaseModel):
    id: int
    username: str
    password: str
    email: str
    full_name: str
    user_type: str
    phone_number: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class UserPublic(BaseModel):
    """User as returned over the API, without the password"""
    id: int
    username: str
    email: str
    full_name: str
    user_type: str
    phone_number: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
