"""Tests for BirthDate, SALCodes and ClientRecord models."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from sal_forecaster.models.client import ClientRecord
from sal_forecaster.models.codes import BirthDate, SALCodes


class TestBirthDate:
    def test_iso(self):
        assert BirthDate(year=1990, month=5, day=3).iso == "1990-05-03"

    def test_to_date(self):
        assert BirthDate(year=1990, month=5, day=3).to_date() == date(1990, 5, 3)

    def test_digits(self):
        assert BirthDate(year=1990, month=5, day=15).digits() == [1, 5, 5, 1, 9, 9, 0]

    def test_not_calendar_date(self):
        bd = BirthDate(year=2023, month=2, day=29)
        assert not bd.is_calendar_date
        with pytest.raises(ValueError):
            bd.to_date()

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"year": 0, "month": 1, "day": 1},
            {"year": 1990, "month": 13, "day": 1},
            {"year": 1990, "month": 1, "day": 32},
        ],
    )
    def test_out_of_range(self, kwargs):
        with pytest.raises(ValidationError):
            BirthDate(**kwargs)


class TestSALCodes:
    def _codes(self, **overrides) -> SALCodes:
        values = dict(personality=6, connector=3, realization=9, generator=3, mission=9)
        values.update(overrides)
        return SALCodes(**values)

    def test_valid(self):
        codes = self._codes()
        assert codes.rotating == (6, 3, 9)
        assert not codes.has_master_mission

    @pytest.mark.parametrize("field", ["personality", "connector", "realization", "generator"])
    @pytest.mark.parametrize("value", [0, 10, 11])
    def test_single_digit_fields(self, field, value):
        with pytest.raises(ValidationError, match=r"\[1, 9\]"):
            self._codes(**{field: value})

    @pytest.mark.parametrize("value", [11, 22])
    def test_master_mission_allowed(self, value):
        codes = self._codes(mission=value)
        assert codes.has_master_mission

    @pytest.mark.parametrize("value", [0, 10, 12, 33])
    def test_invalid_mission(self, value):
        with pytest.raises(ValidationError, match="mission"):
            self._codes(mission=value)

    def test_frozen(self):
        codes = self._codes()
        with pytest.raises(ValidationError):
            codes.personality = 1


class TestClientRecord:
    def test_blank_strings_become_none(self):
        client = ClientRecord(id="  ", name="", birth_date=" ")
        assert client.id is None
        assert client.name is None
        assert client.birth_date is None

    def test_strips(self):
        client = ClientRecord(name=" Anna ", birth_date=" 1990-05-15 ")
        assert client.name == "Anna"
        assert client.birth_date == "1990-05-15"

    def test_integer_id(self):
        assert ClientRecord(id=7).id == "7"

    def test_from_external_payload(self):
        payload = {"id": 12, "name": "Anna", "birth_date": "1990-05-15", "extra": 1}
        client = ClientRecord.model_validate(payload)
        assert client.id == "12"
        assert client.birth_date == "1990-05-15"
