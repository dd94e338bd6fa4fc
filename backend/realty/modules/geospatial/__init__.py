# Geospatial helpers for location-based queries

from .distance import EARTH_RADIUS_KM, haversine_distance

__all__ = ["EARTH_RADIUS_KM", "haversine_distance"]
