"""
Unit Tests for Rate and Quote Models.

Tests model validation, immutability, labels, and API output shape.
"""

import pydantic
import pytest

from fair_repair.models.quote import PriceRange
from fair_repair.models.rate_resolution import (
    CityRecord,
    Coordinate,
    RateResolution,
    RateSource,
    ZipRange,
)
from fair_repair.services.labor_rate_service import resolve_labor_rate


class TestZipRange:
    """Tests for ZipRange validation."""

    def test_contains_is_inclusive(self):
        zip_range = ZipRange(low=59000, high=59999, state="MT")
        assert zip_range.contains(59000)
        assert zip_range.contains(59999)
        assert not zip_range.contains(60000)

    def test_low_above_high_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            ZipRange(low=200, high=100, state="XX")

    def test_state_must_be_two_letters(self):
        with pytest.raises(pydantic.ValidationError):
            ZipRange(low=1, high=2, state="Virginia")


class TestCoordinateAndCity:
    """Tests for Coordinate and CityRecord."""

    def test_latitude_bounds(self):
        with pytest.raises(pydantic.ValidationError):
            Coordinate(latitude=91.0, longitude=0.0)

    def test_metro_rate_must_be_positive(self):
        with pytest.raises(pydantic.ValidationError):
            CityRecord(
                name="nowhere",
                coordinate=Coordinate(latitude=0.0, longitude=0.0),
                metro_rate=0.0,
            )

    def test_coordinates_are_hashable(self):
        """Frozen models can key dictionaries."""
        coord = Coordinate(latitude=1.0, longitude=2.0)
        assert {coord: "x"}[Coordinate(latitude=1.0, longitude=2.0)] == "x"


class TestRateResolution:
    """Tests for RateResolution labels and output."""

    def test_source_labels(self):
        assert resolve_labor_rate("10001").source_label == "new york metro area"
        assert resolve_labor_rate("59999").source_label == "MT state average"
        assert resolve_labor_rate("").source_label == "National Average"

    def test_source_enum_values(self):
        assert RateSource.METRO_AREA.value == "metro_area"
        assert RateSource("state_average") is RateSource.STATE_AVERAGE

    def test_rate_must_be_positive(self):
        with pytest.raises(pydantic.ValidationError):
            RateResolution(rate=0.0, source=RateSource.NATIONAL_AVERAGE, base_rate=144.06)

    def test_api_output_shape(self):
        output = resolve_labor_rate("10001").to_api_output()
        assert output["rate"] == 140.0
        assert output["source"] == "new york metro area"
        assert output["sourceType"] == "metro_area"
        assert output["breakdown"]["baseRate"] == 135.63
        assert output["breakdown"]["nearestCity"] == "new york"
        assert output["breakdown"]["distanceToCity"] == 0.9
        assert "dataSource" not in output

    def test_api_output_national(self):
        output = resolve_labor_rate("00000").to_api_output(data_source="fair_repair_rates_2025")
        assert output["breakdown"] == {
            "baseRate": 144.06,
            "cityPremium": 0.0,
            "nearestCity": None,
            "distanceToCity": None,
        }
        assert output["dataSource"] == "fair_repair_rates_2025"

    def test_json_round_trip(self):
        resolution = resolve_labor_rate("60601")
        assert RateResolution.model_validate_json(resolution.model_dump_json()) == resolution


class TestPriceRange:
    """Tests for PriceRange validation."""

    def test_inverted_range_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            PriceRange(low=10.0, high=5.0)

    def test_negative_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            PriceRange(low=-5.0, high=5.0)

    def test_equal_bounds_allowed(self):
        assert PriceRange(low=5.0, high=5.0).low == 5.0
