"""Tests for the exception hierarchy."""

import pytest

from fare_engine.core.exceptions import (
    FareEngineError,
    InvalidConfigurationError,
    MissingParameterError,
    NotFoundError,
)


@pytest.mark.unit
class TestExceptionHierarchy:
    def test_all_errors_inherit_from_fare_engine_error(self):
        assert issubclass(MissingParameterError, FareEngineError)
        assert issubclass(NotFoundError, FareEngineError)
        assert issubclass(InvalidConfigurationError, FareEngineError)

    def test_errors_are_distinct(self):
        assert not issubclass(NotFoundError, MissingParameterError)
        assert not issubclass(InvalidConfigurationError, NotFoundError)


@pytest.mark.unit
class TestExceptionAttributes:
    def test_stores_message(self):
        err = FareEngineError("test message")
        assert err.message == "test message"
        assert str(err) == "test message"

    def test_default_details_is_empty_dict(self):
        assert FareEngineError("test").details == {}

    def test_details_kept(self):
        err = NotFoundError("missing", details={"area_id": "a1"})
        assert err.details == {"area_id": "a1"}

    def test_missing_parameter_lists_names(self):
        err = MissingParameterError.for_parameters(["miles", "stops_count"])

        assert err.details == {"missing": ["miles", "stops_count"]}
        assert "miles" in err.message
        assert "stops_count" in err.message

    def test_can_be_caught_as_base(self):
        with pytest.raises(FareEngineError):
            raise InvalidConfigurationError("tiers overlap")
