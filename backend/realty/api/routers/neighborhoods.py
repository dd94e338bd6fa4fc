from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from realty.models import (
    Neighborhood, NeighborhoodCreate, NeighborhoodUpdate,
    PropertyNeighborhood, PropertyNeighborhoodCreate
)
from realty.modules.storage import Storage
from realty.core.storage_provider import get_storage
import logging

logger = logging.getLogger(__name__)

router = APIRouter()
property_links_router = APIRouter()


@router.get("/", response_model=List[Neighborhood])
async def get_neighborhoods(storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_all_neighborhoods()
    except Exception as e:
        logger.error(f"Failed to get neighborhoods: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve neighborhoods"
        )


@router.get("/city/{city}", response_model=List[Neighborhood])
async def get_neighborhoods_by_city(city: str, storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_neighborhoods_by_city(city)
    except Exception as e:
        logger.error(f"Failed to get neighborhoods for city {city}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve neighborhoods"
        )


@router.get("/property/{property_id}", response_model=List[Neighborhood])
async def get_neighborhoods_by_property(property_id: int, storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_neighborhoods_by_property(property_id)
    except Exception as e:
        logger.error(f"Failed to get neighborhoods for property {property_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve neighborhoods"
        )


@router.get("/{neighborhood_id}", response_model=Neighborhood)
async def get_neighborhood(neighborhood_id: int, storage: Storage = Depends(get_storage)):
    try:
        neighborhood = await storage.get_neighborhood(neighborhood_id)
    except Exception as e:
        logger.error(f"Failed to get neighborhood {neighborhood_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve neighborhood"
        )

    if not neighborhood:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Neighborhood not found")
    return neighborhood


@router.post("/", response_model=Neighborhood, status_code=status.HTTP_201_CREATED)
async def create_neighborhood(neighborhood: NeighborhoodCreate, storage: Storage = Depends(get_storage)):
    try:
        return await storage.create_neighborhood(neighborhood)
    except Exception as e:
        logger.error(f"Failed to create neighborhood: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create neighborhood"
        )


@router.patch("/{neighborhood_id}", response_model=Neighborhood)
async def update_neighborhood(
    neighborhood_id: int,
    data: NeighborhoodUpdate,
    storage: Storage = Depends(get_storage)
):
    try:
        neighborhood = await storage.update_neighborhood(neighborhood_id, data)
    except Exception as e:
        logger.error(f"Failed to update neighborhood {neighborhood_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update neighborhood"
        )

    if not neighborhood:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Neighborhood not found")
    return neighborhood


@property_links_router.post("/", response_model=PropertyNeighborhood, status_code=status.HTTP_201_CREATED)
async def add_property_to_neighborhood(
    link: PropertyNeighborhoodCreate,
    storage: Storage = Depends(get_storage)
):
    """Link a property to a neighborhood; both must exist"""
    try:
        if not await storage.get_property(link.property_id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid property ID")
        if not await storage.get_neighborhood(link.neighborhood_id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid neighborhood ID")

        return await storage.add_property_to_neighborhood(link)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to link property {link.property_id} to neighborhood {link.neighborhood_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create property-neighborhood relationship"
        )


@property_links_router.delete("/")
async def remove_property_from_neighborhood(
    property_id: int,
    neighborhood_id: int,
    storage: Storage = Depends(get_storage)
):
    try:
        removed = await storage.remove_property_from_neighborhood(property_id, neighborhood_id)
    except Exception as e:
        logger.error(f"Failed to unlink property {property_id} from neighborhood {neighborhood_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to remove property-neighborhood relationship"
        )

    if not removed:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Relationship not found")
    return {"success": True}
