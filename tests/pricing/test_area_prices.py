import pytest

from fare_engine.geo import Area, Location
from fare_engine.pricing import AreaPrice, find_priced_area, resolve_fixed_price
from fare_engine.pricing.area_prices import format_price

OUTSIDE = Location(lat=40.75, lng=-73.99, zipcode="10018", city="Manhattan")


@pytest.fixture
def overlapping_prices(square_area):
    cheap = Area(id="a-cheap", name="Cheap", type="polygon", polygon=square_area.polygon)
    pricey = Area(id="a-pricey", name="Pricey", type="polygon", polygon=square_area.polygon)
    return [
        AreaPrice(area=cheap, fixed_price=40.0),
        AreaPrice(area=pricey, fixed_price=60.0),
    ]


@pytest.mark.unit
class TestResolveFixedPrice:
    def test_no_area_prices(self):
        assert resolve_fixed_price(OUTSIDE, OUTSIDE, []) is None

    def test_no_match_returns_none(self, overlapping_prices):
        assert resolve_fixed_price(OUTSIDE, OUTSIDE, overlapping_prices) is None

    def test_single_match_uses_area_name(self, downtown_zip_area):
        prices = [AreaPrice(area=downtown_zip_area, fixed_price=45.0)]

        match = resolve_fixed_price(Location(zipcode="10001"), OUTSIDE, prices)

        assert match.price == 45.0
        assert match.area_name == "Downtown"
        assert match.matched_area_names == ("Downtown",)

    def test_dropoff_match_counts(self, brooklyn_city_area):
        prices = [AreaPrice(area=brooklyn_city_area, fixed_price=70.0)]

        match = resolve_fixed_price(OUTSIDE, Location(city="brooklyn"), prices)

        assert match is not None
        assert match.price == 70.0

    def test_highest_price_wins(self, overlapping_prices):
        match = resolve_fixed_price(Location(lat=5, lng=5), OUTSIDE, overlapping_prices)

        assert match.price == 60.0
        assert set(match.matched_area_names) == {"Cheap", "Pricey"}
        assert match.area_name == "Multiple areas: Pricey, Cheap (using highest: $60)"

    def test_highest_price_wins_regardless_of_order(self, overlapping_prices):
        match = resolve_fixed_price(
            Location(lat=5, lng=5), OUTSIDE, list(reversed(overlapping_prices))
        )
        assert match.price == 60.0

    def test_priority_does_not_override_price(self, downtown_zip_area, brooklyn_city_area):
        prices = [
            AreaPrice(area=downtown_zip_area, fixed_price=40.0, priority=10),
            AreaPrice(area=brooklyn_city_area, fixed_price=60.0, priority=1),
        ]

        match = resolve_fixed_price(
            Location(zipcode="10001"), Location(city="Brooklyn"), prices
        )

        assert match.price == 60.0

    def test_pickup_and_dropoff_in_different_areas(self, downtown_zip_area, brooklyn_city_area):
        prices = [
            AreaPrice(area=downtown_zip_area, fixed_price=40.0),
            AreaPrice(area=brooklyn_city_area, fixed_price=60.0),
        ]

        match = resolve_fixed_price(
            Location(zipcode="10001"), Location(city="Brooklyn"), prices
        )

        assert match.matched_area_names == ("Brooklyn", "Downtown")

    def test_fractional_price_in_name(self, overlapping_prices):
        bumped = overlapping_prices[1].model_copy(update={"fixed_price": 62.5})
        prices = [overlapping_prices[0], bumped]

        match = resolve_fixed_price(Location(lat=5, lng=5), OUTSIDE, prices)

        assert match.area_name.endswith("(using highest: $62.5)")


@pytest.mark.unit
class TestFindPricedArea:
    def test_returns_highest_priced_area(self, overlapping_prices):
        area_price = find_priced_area(Location(lat=5, lng=5), overlapping_prices)
        assert area_price.area.name == "Pricey"

    def test_none_when_outside(self, overlapping_prices):
        assert find_priced_area(OUTSIDE, overlapping_prices) is None


@pytest.mark.unit
class TestFormatPrice:
    @pytest.mark.parametrize(
        ("price", "expected"), [(60, "60"), (60.0, "60"), (62.5, "62.5"), (0.15, "0.15")]
    )
    def test_format(self, price, expected):
        assert format_price(price) == expected
