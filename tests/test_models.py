"""Tests for record types."""

import dataclasses

import pytest

from norge_data.models import County, Municipality, LANGUAGE_FORMS


OSLO_ROW = (
    "0301",
    "Oslo",
    "Oslo",
    "Oslo",
    717710,
    454.12,
    "Nøytral",
    "https://www.oslo.kommune.no",
)


class TestCounty:
    """Tests for County."""

    def test_from_row(self):
        """Test building a county from a loader row."""
        county = County.from_row(("03", "Oslo", "https://www.oslo.kommune.no"))
        assert county.id == "03"
        assert county.name == "Oslo"
        assert county.url == "https://www.oslo.kommune.no"

    def test_to_dict_uses_file_keys(self):
        """Test that to_dict uses the data file keys."""
        county = County("46", "Vestland", "https://www.vestlandfylke.no")
        assert county.to_dict() == {
            "f_id": "46",
            "f_name": "Vestland",
            "f_url": "https://www.vestlandfylke.no",
        }
        assert tuple(county.to_dict()) == County.FIELDS

    def test_frozen(self):
        """Test that counties cannot be modified."""
        county = County("03", "Oslo", "https://www.oslo.kommune.no")
        with pytest.raises(dataclasses.FrozenInstanceError):
            county.id = "04"

    def test_fields_not_dataclass_fields(self):
        """Test that the FIELDS constant is not a record field."""
        names = [f.name for f in dataclasses.fields(County)]
        assert names == ["id", "name", "url"]


class TestMunicipality:
    """Tests for Municipality."""

    def test_from_row(self):
        """Test building a municipality from a loader row."""
        oslo = Municipality.from_row(OSLO_ROW)
        assert oslo.id == "0301"
        assert oslo.population == 717710
        assert oslo.area == pytest.approx(454.12)
        assert oslo.language == "Nøytral"

    def test_from_row_casts_numbers(self):
        """Test that population and area are cast to int and float."""
        row = OSLO_ROW[:4] + ("717710", "454") + OSLO_ROW[6:]
        oslo = Municipality.from_row(row)
        assert oslo.population == 717710
        assert isinstance(oslo.area, float)

    def test_county_id(self):
        """Test that the county id is the first two digits."""
        assert Municipality.from_row(OSLO_ROW).county_id == "03"

    def test_to_dict(self):
        """Test that to_dict returns the data file form."""
        data = Municipality.from_row(OSLO_ROW).to_dict()
        assert tuple(data) == Municipality.FIELDS
        assert tuple(data.values()) == OSLO_ROW

    def test_equality(self):
        """Test that records with the same values are equal and hashable."""
        a = Municipality.from_row(OSLO_ROW)
        b = Municipality.from_row(OSLO_ROW)
        assert a == b
        assert hash(a) == hash(b)


class TestLanguageForms:
    """Tests for the language form constants."""

    def test_values(self):
        """Test the fixed set of language forms."""
        assert LANGUAGE_FORMS == ("Bokmål", "Nynorsk", "Nøytral")
