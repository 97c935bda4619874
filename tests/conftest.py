from datetime import datetime

import pytest

from fare_engine.catalog import PricingCatalog
from fare_engine.geo import Area, Location
from fare_engine.pricing import AreaPrice, DistanceTier, SurgeRule, VehicleType

# Wednesday
WEEKDAY_NOON = datetime(2025, 1, 15, 12, 0)


@pytest.fixture
def square_area() -> Area:
    return Area(
        id="area-square",
        name="Square",
        type="polygon",
        polygon=[(0, 0), (0, 10), (10, 10), (10, 0)],
    )


@pytest.fixture
def airport_area() -> Area:
    """Rough box around an airport terminal."""
    return Area(
        id="area-airport",
        name="Airport",
        type="polygon",
        polygon=[
            {"lat": 40.630, "lng": -73.800},
            {"lat": 40.630, "lng": -73.760},
            {"lat": 40.660, "lng": -73.760},
            {"lat": 40.660, "lng": -73.800},
        ],
    )


@pytest.fixture
def downtown_zip_area() -> Area:
    return Area(id="area-10001", name="Downtown", type="zipcode", value="10001")


@pytest.fixture
def brooklyn_city_area() -> Area:
    return Area(id="area-brooklyn", name="Brooklyn", type="city", value="Brooklyn")


@pytest.fixture
def tiered_tiers() -> tuple[DistanceTier, ...]:
    return (
        DistanceTier(from_miles=0, to_miles=13, price_per_mile=4.0),
        DistanceTier(from_miles=13, to_miles=25, price_per_mile=3.5),
        DistanceTier(from_miles=25, to_miles=0, price_per_mile=2.5),
    )


@pytest.fixture
def sedan(tiered_tiers) -> VehicleType:
    return VehicleType(
        id="vt-sedan",
        name="Sedan",
        base_price=55.0,
        base_distance_threshold=12.0,
        distance_tiers=tiered_tiers,
        stop_charge=5.0,
        child_seat_charge=5.0,
        round_trip_discount_percent=10.0,
    )


@pytest.fixture
def suv_with_areas(downtown_zip_area, brooklyn_city_area) -> VehicleType:
    return VehicleType(
        id="vt-suv",
        name="SUV",
        base_price=75.0,
        area_prices=[
            AreaPrice(area=downtown_zip_area, fixed_price=40.0),
            AreaPrice(area=brooklyn_city_area, fixed_price=60.0),
        ],
        surge_pricing=[SurgeRule(name="Always", multiplier=2.0)],
    )


@pytest.fixture
def no_coordinates() -> Location:
    return Location(address="Somewhere without geocoding")


@pytest.fixture
def catalog(sedan, suv_with_areas, airport_area, downtown_zip_area, brooklyn_city_area):
    retired = VehicleType(id="vt-retired", name="Limo", is_active=False)
    return PricingCatalog(
        vehicle_types=[sedan, suv_with_areas, retired],
        areas=[airport_area, downtown_zip_area, brooklyn_city_area],
    )
