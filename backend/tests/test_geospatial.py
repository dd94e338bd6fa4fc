import math
import pytest
from geopy.distance import great_circle
from realty.models import Amenity
from realty.modules.geospatial import EARTH_RADIUS_KM, haversine_distance
from realty.modules.storage.filters import within_radius


class TestHaversineDistance:
    """Test suite for great-circle distance calculations"""

    @pytest.fixture
    def london(self):
        return (51.5074, -0.1278)

    @pytest.fixture
    def paris(self):
        return (48.8566, 2.3522)

    def test_same_point_is_zero(self, london):
        """Distance from a point to itself is zero"""
        assert haversine_distance(*london, *london) == pytest.approx(0.0, abs=1e-9)

    def test_london_to_paris(self, london, paris):
        """Known city pair is roughly 343 km apart"""
        distance = haversine_distance(*london, *paris)
        assert 340 < distance < 347

    def test_symmetric(self, london, paris):
        """Distance does not depend on argument order"""
        assert haversine_distance(*london, *paris) == pytest.approx(haversine_distance(*paris, *london))

    def test_one_degree_of_longitude_at_equator(self):
        """One degree along the equator is R * pi / 180"""
        expected = EARTH_RADIUS_KM * math.pi / 180
        assert haversine_distance(0, 0, 0, 1) == pytest.approx(expected, rel=1e-9)

    def test_antipodal_points(self):
        """Opposite points on the globe are half the circumference apart"""
        assert haversine_distance(0, 0, 0, 180) == pytest.approx(math.pi * EARTH_RADIUS_KM, rel=1e-9)

    @pytest.mark.parametrize("start,end", [
        ((-15.4167, 28.2833), (-17.8519, 25.8544)),  # Lusaka to Livingstone
        ((51.5074, -0.1278), (40.7128, -74.0060)),   # London to New York
        ((-33.8688, 151.2093), (35.6762, 139.6503)), # Sydney to Tokyo
    ])
    def test_matches_geopy_great_circle(self, start, end):
        """Agrees with geopy's great-circle distance on the same sphere"""
        expected = great_circle(start, end, radius=EARTH_RADIUS_KM).km
        assert haversine_distance(*start, *end) == pytest.approx(expected, rel=1e-6)


class TestWithinRadius:
    """Test suite for radius filtering of amenities"""

    def _amenity(self, amenity_id, latitude, longitude):
        return Amenity(
            id=amenity_id,
            name=f"Amenity {amenity_id}",
            category_id=1,
            address="Somewhere",
            latitude=latitude,
            longitude=longitude,
        )

    def test_keeps_amenities_inside_radius(self):
        """Only amenities within the radius are returned, in input order"""
        amenities = [
            self._amenity(1, 0.0, 0.5),   # ~55.6 km
            self._amenity(2, 0.0, 2.0),   # ~222 km
            self._amenity(3, 0.0, -0.1),  # ~11.1 km
        ]
        nearby = within_radius(amenities, 0.0, 0.0, 100)
        assert [a.id for a in nearby] == [1, 3]

    def test_radius_boundary_is_inclusive(self):
        """An amenity exactly on the radius is included; a slightly smaller radius excludes it"""
        amenity = self._amenity(1, 0.0, 1.0)
        exact = haversine_distance(0.0, 0.0, 0.0, 1.0)
        assert within_radius([amenity], 0.0, 0.0, exact) == [amenity]
        assert within_radius([amenity], 0.0, 0.0, exact - 1e-9) == []

    def test_zero_radius_matches_only_same_point(self):
        amenities = [self._amenity(1, 10.0, 10.0), self._amenity(2, 10.0, 10.001)]
        nearby = within_radius(amenities, 10.0, 10.0, 0)
        assert [a.id for a in nearby] == [1]
