from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class MessageCreate(BaseModel):
    sender_id: int
    recipient_id: int
    property_id: Optional[int] = None  # None for a general (non-listing) message
    content: str


class Message(BaseModel):
    id: int
    sender_id: int
    recipient_id: int
    property_id: Optional[int] = None
    content: str
    is_read: bool = False
    created_at: datetime

    class Config:
        from_attributes = True


class SavedPropertyCreate(BaseModel):
    user_id: int
    property_id: int


class SavedProperty(BaseModel):
    id: int
    user_id: int
    property_id: int
    created_at: datetime

    class Config:
        from_attributes = True
