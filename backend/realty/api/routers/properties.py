from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional
from pydantic import BaseModel
from realty.models import (
    Property, PropertyCreate, PropertyUpdate, PropertyFilters, PropertyStatus, UserType
)
from realty.modules.storage import Storage
from realty.core.storage_provider import get_storage
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

# Placeholder values the search form sends for "no preference"
ANY_LOCATION = "Any Location"
ANY_TYPE = "Any Type"


class StatusUpdateRequest(BaseModel):
    status: PropertyStatus


async def _require_landlord(storage: Storage, owner_id: int, missing_status: int) -> None:
    owner = await storage.get_user(owner_id)
    if not owner:
        raise HTTPException(status_code=missing_status, detail="Invalid owner ID")
    if owner.user_type != UserType.LANDLORD_AND_SELL.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only users with 'Landlord & Sell' role can manage properties"
        )


@router.get("/", response_model=List[Property])
async def get_properties(storage: Storage = Depends(get_storage)):
    """Get every property listing"""
    try:
        return await storage.get_all_properties()
    except Exception as e:
        logger.error(f"Failed to get properties: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve properties"
        )


@router.get("/featured/list", response_model=List[Property])
async def get_featured_properties(storage: Storage = Depends(get_storage)):
    """Get featured properties that are still active"""
    try:
        return await storage.get_featured_properties()
    except Exception as e:
        logger.error(f"Failed to get featured properties: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve featured properties"
        )


@router.get("/search", response_model=List[Property])
async def search_properties(
    location: Optional[str] = Query(None, description="Substring of location, city or state"),
    property_type: Optional[str] = Query(None, description="Exact property type, e.g. Villa"),
    listing_type: Optional[str] = Query(None, description="rent or sell"),
    property_status: Optional[str] = Query(None, alias="status", description="Listing status"),
    owner_id: Optional[int] = Query(None, description="Owner user id"),
    min_price: Optional[int] = Query(None, ge=0, description="Minimum price (inclusive)"),
    max_price: Optional[int] = Query(None, ge=0, description="Maximum price (inclusive)"),
    storage: Storage = Depends(get_storage)
):
    """
    Search properties. Every supplied filter must match; omitted filters
    (and the form placeholders "Any Location" / "Any Type") are ignored.
    """
    try:
        filters = PropertyFilters(
            location=None if location == ANY_LOCATION else location,
            property_type=None if property_type == ANY_TYPE else property_type,
            listing_type=listing_type,
            status=property_status,
            owner_id=owner_id,
            min_price=min_price,
            max_price=max_price
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    try:
        return await storage.get_properties_by_filters(filters)
    except Exception as e:
        logger.error(f"Property search failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to search properties"
        )


@router.get("/owner/{owner_id}", response_model=List[Property])
async def get_properties_by_owner(owner_id: int, storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_properties_by_owner(owner_id)
    except Exception as e:
        logger.error(f"Failed to get properties for owner {owner_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve properties"
        )


@router.get("/{property_id}", response_model=Property)
async def get_property(property_id: int, storage: Storage = Depends(get_storage)):
    try:
        property_obj = await storage.get_property(property_id)
    except Exception as e:
        logger.error(f"Failed to get property {property_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve property"
        )

    if not property_obj:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
    return property_obj


@router.post("/", response_model=Property, status_code=status.HTTP_201_CREATED)
async def create_property(property_data: PropertyCreate, storage: Storage = Depends(get_storage)):
    """
    Create a listing. The owner must exist and have the
    'Landlord & Sell' user type.
    """
    try:
        await _require_landlord(storage, property_data.owner_id, status.HTTP_400_BAD_REQUEST)
        return await storage.create_property(property_data)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to create property: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create property"
        )


@router.patch("/{property_id}", response_model=Property)
async def update_property(
    property_id: int,
    property_data: PropertyUpdate,
    storage: Storage = Depends(get_storage)
):
    """
    Update listing fields. ``owner_id`` must be supplied and match the
    current owner, who must still be a 'Landlord & Sell' user.
    """
    try:
        existing = await storage.get_property(property_id)
        if not existing:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")

        if property_data.owner_id != existing.owner_id:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Only the property owner can update this property"
            )
        await _require_landlord(storage, existing.owner_id, status.HTTP_403_FORBIDDEN)

        updated = await storage.update_property(property_id, property_data)
        if not updated:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
        return updated

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update property {property_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update property"
        )


@router.patch("/{property_id}/status", response_model=Property)
async def update_property_status(
    property_id: int,
    request: StatusUpdateRequest,
    storage: Storage = Depends(get_storage)
):
    try:
        updated = await storage.update_property_status(property_id, request.status.value)
    except Exception as e:
        logger.error(f"Failed to update status of property {property_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update property status"
        )

    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found")
    return updated
