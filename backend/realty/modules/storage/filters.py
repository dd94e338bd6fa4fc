"""Predicate evaluation shared by the storage backends.

The in-memory backend evaluates these functions directly over its
collections; the database backend pushes the same predicates into SQL and
only falls back to these helpers for the geographic parts.
"""
from typing import Callable, Dict, Iterable, List, Optional, TypeVar
from realty.models.property import Property
from realty.models.search import PropertyFilters
from realty.models.geospatial import Amenity, AmenityWithDistance, NeighborhoodAmenity
from realty.modules.geospatial.distance import haversine_distance
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")


def location_matches(property_obj: Property, location: str) -> bool:
    """Case-insensitive substring match against location, city and state"""
    needle = location.lower()
    return any(
        needle in (value or "").lower()
        for value in (property_obj.location, property_obj.city, property_obj.state)
    )


def matches_filters(property_obj: Property, filters: PropertyFilters) -> bool:
    """True when the property satisfies every predicate present in ``filters``"""
    if filters.location and not location_matches(property_obj, filters.location):
        return False

    if filters.property_type and property_obj.property_type != filters.property_type:
        return False

    if filters.listing_type and property_obj.listing_type != filters.listing_type:
        return False

    if filters.status and property_obj.status != filters.status:
        return False

    if filters.owner_id is not None and property_obj.owner_id != filters.owner_id:
        return False

    if filters.min_price is not None and property_obj.price < filters.min_price:
        return False

    if filters.max_price is not None and property_obj.price > filters.max_price:
        return False

    return True


def filter_properties(properties: Iterable[Property], filters: PropertyFilters) -> List[Property]:
    """Single pass over ``properties`` keeping those matching every predicate"""
    if filters.is_empty():
        return list(properties)

    logger.debug(f"Filtering properties with {filters.model_dump(exclude_none=True)}")
    return [p for p in properties if matches_filters(p, filters)]


def resolve_edges(target_ids: Iterable[int], lookup: Callable[[int], Optional[T]]) -> List[T]:
    """Resolve foreign ids in edge order, dropping ids that no longer resolve"""
    resolved = []
    for target_id in target_ids:
        target = lookup(target_id)
        if target is None:
            logger.debug(f"Skipping dangling relation to id {target_id}")
            continue
        resolved.append(target)
    return resolved


def annotate_with_edge_distance(
    edges: Iterable[NeighborhoodAmenity],
    amenities_by_id: Dict[int, Amenity]
) -> List[AmenityWithDistance]:
    """Attach each edge's stored distance to its amenity.

    The distance comes from the edge itself; it is not recomputed from
    coordinates.
    """
    annotated = []
    for edge in edges:
        amenity = amenities_by_id.get(edge.amenity_id)
        if amenity is None:
            continue
        annotated.append(AmenityWithDistance(**amenity.model_dump(), distance=edge.distance))
    return annotated


def within_radius(
    amenities: Iterable[Amenity],
    latitude: float,
    longitude: float,
    radius_km: float
) -> List[Amenity]:
    """Amenities whose coordinates lie within ``radius_km`` (inclusive) of the point"""
    nearby = []
    for amenity in amenities:
        if amenity.latitude is None or amenity.longitude is None:
            continue
        distance = haversine_distance(latitude, longitude, amenity.latitude, amenity.longitude)
        if distance <= radius_km:
            nearby.append(amenity)
    return nearby
