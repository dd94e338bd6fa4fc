from fastapi import APIRouter, Depends, HTTPException, status
from realty.models import UserPublic, UserCreate, UserUpdate
from realty.modules.storage import Storage
from realty.core.storage_provider import get_storage
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
async def register_user(user_data: UserCreate, storage: Storage = Depends(get_storage)):
    """
    Create an account. Email and username must not belong to an existing
    user; the password is stored but never returned.
    """
    try:
        if await storage.get_user_by_email(user_data.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Email is already in use"
            )

        if await storage.get_user_by_username(user_data.username):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Username is already taken"
            )

        user = await storage.create_user(user_data)
        logger.info(f"Registered user {user.id}")
        return user

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to register user: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to register user"
        )


@router.get("/{user_id}", response_model=UserPublic)
async def get_user_profile(user_id: int, storage: Storage = Depends(get_storage)):
    """Get a user's public profile (never includes the password)"""
    try:
        user = await storage.get_user(user_id)
    except Exception as e:
        logger.error(f"Failed to get user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve user"
        )

    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.patch("/{user_id}", response_model=UserPublic)
async def update_user_profile(
    user_id: int,
    user_data: UserUpdate,
    storage: Storage = Depends(get_storage)
):
    """
    Partially update a profile.

    A new username or email must not belong to any other user.
    """
    try:
        if user_data.email:
            existing = await storage.get_user_by_email(user_data.email)
            if existing and existing.id != user_id:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Email is already in use"
                )

        if user_data.username:
            existing = await storage.get_user_by_username(user_data.username)
            if existing and existing.id != user_id:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Username is already taken"
                )

        updated = await storage.update_user(user_id, user_data)
        if not updated:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return updated

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update user"
        )
