from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from realty.models import SavedProperty, SavedPropertyCreate
from realty.modules.storage import Storage
from realty.core.storage_provider import get_storage
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/user/{user_id}", response_model=List[SavedProperty])
async def get_saved_properties(user_id: int, storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_saved_properties_by_user(user_id)
    except Exception as e:
        logger.error(f"Failed to get saved properties for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve saved properties"
        )


@router.post("/", response_model=SavedProperty, status_code=status.HTTP_201_CREATED)
async def save_property(request: SavedPropertyCreate, storage: Storage = Depends(get_storage)):
    """
    Save a property for a user. Storage does not reject duplicate pairs,
    so an existing save is reported as a conflict here.
    """
    try:
        saved = await storage.get_saved_properties_by_user(request.user_id)
        if any(s.property_id == request.property_id for s in saved):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Property already saved")

        return await storage.save_property(request)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to save property: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save property"
        )


@router.delete("/")
async def remove_saved_property(
    user_id: int,
    property_id: int,
    storage: Storage = Depends(get_storage)
):
    try:
        removed = await storage.remove_saved_property(user_id, property_id)
    except Exception as e:
        logger.error(f"Failed to remove saved property: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to remove saved property"
        )

    if not removed:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Saved property not found")
    return {"success": True}
