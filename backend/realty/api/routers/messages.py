from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from realty.models import Message, MessageCreate
from realty.modules.storage import Storage
from realty.core.storage_provider import get_storage
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/user/{user_id}", response_model=List[Message])
async def get_messages_for_user(user_id: int, storage: Storage = Depends(get_storage)):
    """Messages the user sent or received"""
    try:
        return await storage.get_messages_by_user(user_id)
    except Exception as e:
        logger.error(f"Failed to get messages for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve messages"
        )


@router.get("/between/{user1_id}/{user2_id}", response_model=List[Message])
async def get_conversation(user1_id: int, user2_id: int, storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_messages_between_users(user1_id, user2_id)
    except Exception as e:
        logger.error(f"Failed to get messages between {user1_id} and {user2_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve messages"
        )


@router.get("/property/{property_id}", response_model=List[Message])
async def get_messages_for_property(property_id: int, storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_messages_by_property(property_id)
    except Exception as e:
        logger.error(f"Failed to get messages for property {property_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve messages"
        )


@router.post("/", response_model=Message, status_code=status.HTTP_201_CREATED)
async def send_message(message: MessageCreate, storage: Storage = Depends(get_storage)):
    """Send a message; sender, recipient and (if given) property must exist"""
    try:
        if not await storage.get_user(message.sender_id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid sender ID")
        if not await storage.get_user(message.recipient_id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid recipient ID")
        if message.property_id is not None and not await storage.get_property(message.property_id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid property ID")

        return await storage.create_message(message)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to create message: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send message"
        )


@router.patch("/{message_id}/read", response_model=Message)
async def mark_message_read(message_id: int, storage: Storage = Depends(get_storage)):
    try:
        message = await storage.mark_message_as_read(message_id)
    except Exception as e:
        logger.error(f"Failed to mark message {message_id} as read: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to mark message as read"
        )

    if not message:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return message
