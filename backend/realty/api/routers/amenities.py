from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List
from realty.models import (
    Amenity, AmenityCreate, AmenityUpdate, AmenityWithDistance,
    AmenityCategory, AmenityCategoryCreate,
    NeighborhoodAmenity, NeighborhoodAmenityCreate
)
from realty.modules.storage import Storage
from realty.core.storage_provider import get_storage
import logging

logger = logging.getLogger(__name__)

router = APIRouter()
categories_router = APIRouter()
neighborhood_links_router = APIRouter()


# Amenity categories
@categories_router.get("/", response_model=List[AmenityCategory])
async def get_amenity_categories(storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_all_amenity_categories()
    except Exception as e:
        logger.error(f"Failed to get amenity categories: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve amenity categories"
        )


@categories_router.get("/{category_id}", response_model=AmenityCategory)
async def get_amenity_category(category_id: int, storage: Storage = Depends(get_storage)):
    try:
        category = await storage.get_amenity_category(category_id)
    except Exception as e:
        logger.error(f"Failed to get amenity category {category_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve amenity category"
        )

    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Amenity category not found")
    return category


@categories_router.post("/", response_model=AmenityCategory, status_code=status.HTTP_201_CREATED)
async def create_amenity_category(category: AmenityCategoryCreate, storage: Storage = Depends(get_storage)):
    try:
        return await storage.create_amenity_category(category)
    except Exception as e:
        logger.error(f"Failed to create amenity category: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create amenity category"
        )


# Amenities
@router.get("/", response_model=List[Amenity])
async def get_amenities(storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_all_amenities()
    except Exception as e:
        logger.error(f"Failed to get amenities: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve amenities"
        )


@router.get("/nearby", response_model=List[Amenity])
async def get_nearby_amenities(
    lat: float = Query(..., ge=-90, le=90, description="Latitude of the search point"),
    lng: float = Query(..., ge=-180, le=180, description="Longitude of the search point"),
    radius: float = Query(..., ge=0, description="Search radius in kilometers"),
    storage: Storage = Depends(get_storage)
):
    """
    Find amenities within a radius of a point.

    Distances are great-circle distances from the point to each amenity's
    coordinates; an amenity exactly on the radius is included.
    """
    try:
        return await storage.get_nearby_amenities(lat, lng, radius)
    except Exception as e:
        logger.error(f"Failed to find nearby amenities: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve nearby amenities"
        )


@router.get("/category/{category_id}", response_model=List[Amenity])
async def get_amenities_by_category(category_id: int, storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_amenities_by_category(category_id)
    except Exception as e:
        logger.error(f"Failed to get amenities for category {category_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve amenities"
        )


@router.get("/neighborhood/{neighborhood_id}", response_model=List[AmenityWithDistance])
async def get_amenities_by_neighborhood(neighborhood_id: int, storage: Storage = Depends(get_storage)):
    """Amenities linked to a neighborhood, with the distance recorded on each link"""
    try:
        return await storage.get_amenities_by_neighborhood(neighborhood_id)
    except Exception as e:
        logger.error(f"Failed to get amenities for neighborhood {neighborhood_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve amenities"
        )


@router.get("/{amenity_id}", response_model=Amenity)
async def get_amenity(amenity_id: int, storage: Storage = Depends(get_storage)):
    try:
        amenity = await storage.get_amenity(amenity_id)
    except Exception as e:
        logger.error(f"Failed to get amenity {amenity_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve amenity"
        )

    if not amenity:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Amenity not found")
    return amenity


@router.post("/", response_model=Amenity, status_code=status.HTTP_201_CREATED)
async def create_amenity(amenity: AmenityCreate, storage: Storage = Depends(get_storage)):
    try:
        if not await storage.get_amenity_category(amenity.category_id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid category ID")

        return await storage.create_amenity(amenity)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to create amenity: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create amenity"
        )


@router.patch("/{amenity_id}", response_model=Amenity)
async def update_amenity(amenity_id: int, data: AmenityUpdate, storage: Storage = Depends(get_storage)):
    try:
        if data.category_id is not None and not await storage.get_amenity_category(data.category_id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid category ID")

        amenity = await storage.update_amenity(amenity_id, data)
        if not amenity:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Amenity not found")
        return amenity

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to update amenity {amenity_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update amenity"
        )


# Neighborhood <-> amenity links
@neighborhood_links_router.post("/", response_model=NeighborhoodAmenity, status_code=status.HTTP_201_CREATED)
async def add_amenity_to_neighborhood(
    link: NeighborhoodAmenityCreate,
    storage: Storage = Depends(get_storage)
):
    """Link an amenity to a neighborhood with a distance in km; both must exist"""
    try:
        if not await storage.get_neighborhood(link.neighborhood_id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid neighborhood ID")
        if not await storage.get_amenity(link.amenity_id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid amenity ID")

        return await storage.add_amenity_to_neighborhood(link)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to link amenity {link.amenity_id} to neighborhood {link.neighborhood_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create neighborhood-amenity relationship"
        )


@neighborhood_links_router.delete("/")
async def remove_amenity_from_neighborhood(
    neighborhood_id: int,
    amenity_id: int,
    storage: Storage = Depends(get_storage)
):
    try:
        removed = await storage.remove_amenity_from_neighborhood(neighborhood_id, amenity_id)
    except Exception as e:
        logger.error(f"Failed to unlink amenity {amenity_id} from neighborhood {neighborhood_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to remove neighborhood-amenity relationship"
        )

    if not removed:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Relationship not found")
    return {"success": True}
