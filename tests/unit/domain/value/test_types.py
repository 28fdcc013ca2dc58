"""Unit tests for value objects."""

import pytest

from curbside.domain.value import Latitude, Longitude, Username


class TestUsername:
    """Tests for Username."""

    @pytest.mark.parametrize("value", ["bob", "jane.doe", "curb_finder-42"])
    def test_valid_usernames(self, value):
        """Letters, digits, dots, underscores and hyphens are accepted."""
        assert Username(value).root == value

    @pytest.mark.parametrize("value", ["ab", "has space", "x" * 51, "emoji🙂"])
    def test_invalid_usernames(self, value):
        """Too short, too long or odd characters are rejected."""
        with pytest.raises(ValueError):
            Username(value)


class TestCoordinates:
    """Tests for Latitude and Longitude."""

    def test_latitude_keeps_text_exactly(self):
        """The decimal text is stored as given, without rounding."""
        lat = Latitude(" 40.712812345678 ")

        assert lat.root == "40.712812345678"

    @pytest.mark.parametrize("value", ["90", "-90", "0"])
    def test_latitude_bounds_are_inclusive(self, value):
        """Both poles are valid latitudes."""
        assert Latitude(value).root == value

    @pytest.mark.parametrize("value", ["90.0001", "-91", "north", "NaN", ""])
    def test_invalid_latitudes(self, value):
        """Out of range or non-numeric latitudes are rejected."""
        with pytest.raises(ValueError):
            Latitude(value)

    @pytest.mark.parametrize("value", ["180.5", "-181", "Infinity"])
    def test_invalid_longitudes(self, value):
        """Out of range or non-finite longitudes are rejected."""
        with pytest.raises(ValueError):
            Longitude(value)

    def test_longitude_accepts_antimeridian(self):
        """Longitude 180 is valid."""
        assert Longitude("-180").root == "-180"
