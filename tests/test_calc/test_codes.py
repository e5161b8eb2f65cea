"""
Tests for sal_forecaster/calc/codes.py.

What we test
------------
compute_codes():
  - Worked example 1990-05-15 → (6, 3, 9, 3, 9).
  - personality + connector == 11 keeps mission 11.
  - Day/month digit sums (not reduced values) feed the generator.
  - Years ending in 00 report realization 9.
  - DD.MM.YYYY and YYYY-MM-DD give identical codes.
  - Every valid date of a leap and a non-leap year stays in range.
  - Errors propagate from parsing; lenient mode computes from raw components.
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from sal_forecaster.calc.codes import codes_for_birth_date, compute_codes
from sal_forecaster.calc.errors import (
    InvalidCalendarDate,
    InvalidDateFormat,
    MissingBirthDate,
)
from sal_forecaster.models.codes import BirthDate, SALCodes


class TestWorkedExamples:
    def test_1990_05_15(self):
        codes = compute_codes("1990-05-15")
        assert codes == SALCodes(
            personality=6, connector=3, realization=9, generator=3, mission=9
        )

    def test_mission_master_number_11(self):
        # day 15 → 6; digits 1+5+5+1+9+9+2 = 32 → 5; 6 + 5 = 11.
        codes = compute_codes("1992-05-15")
        assert codes.personality == 6
        assert codes.connector == 5
        assert codes.mission == 11
        assert codes.has_master_mission

    def test_generator_uses_single_pass_digit_sums(self):
        # digit_sum(29) = 11, digit_sum(12) = 3 → 33 → 6.
        codes = compute_codes("29.12.1985")
        assert codes.personality == 2
        assert codes.connector == 1
        assert codes.realization == 4
        assert codes.generator == 6
        assert codes.mission == 3

    def test_century_year_realization(self):
        codes = compute_codes("2000-01-01")
        assert codes.realization == 9
        assert codes.connector == 4
        assert codes.mission == 5


class TestProperties:
    def test_deterministic(self):
        assert compute_codes("1984-11-27") == compute_codes("1984-11-27")

    @pytest.mark.parametrize(
        "iso, dotted",
        [
            ("1990-05-15", "15.05.1990"),
            ("2001-01-09", "09.01.2001"),
            ("1975-12-31", "31.12.1975"),
            ("2000-02-29", "29.02.2000"),
        ],
    )
    def test_formats_agree(self, iso, dotted):
        assert compute_codes(iso) == compute_codes(dotted)

    def test_unpadded_dotted_matches_padded(self):
        assert compute_codes("5.1.1990") == compute_codes("05.01.1990")

    @pytest.mark.parametrize("year", [2000, 2023, 2024])
    def test_ranges_for_every_day_of_year(self, year):
        d = date(year, 1, 1)
        while d.year == year:
            codes = compute_codes(d.isoformat())
            for value in (codes.personality, codes.connector, codes.realization, codes.generator):
                assert 1 <= value <= 9
            assert 1 <= codes.mission <= 9 or codes.mission in (11, 22)
            d += timedelta(days=1)

    def test_rotating_codes(self, sample_codes):
        assert sample_codes.rotating == (6, 3, 9)


class TestErrors:
    def test_not_a_date(self):
        with pytest.raises(InvalidDateFormat):
            compute_codes("not-a-date")

    def test_missing(self):
        with pytest.raises(MissingBirthDate):
            compute_codes(None)

    def test_invalid_calendar_date_strict(self):
        with pytest.raises(InvalidCalendarDate):
            compute_codes("2024-02-30")

    def test_lenient_computes_from_components(self):
        codes = compute_codes("2024-02-30", strict=False)
        # day 30 → 3; digits 3+0+2+2+0+2+4 = 13 → 4; 24 → 6; 3*2 = 6; 3+4 = 7.
        assert codes == SALCodes(
            personality=3, connector=4, realization=6, generator=6, mission=7
        )


def test_codes_for_birth_date_matches_string_entry_point():
    bd = BirthDate(year=1990, month=5, day=15)
    assert codes_for_birth_date(bd) == compute_codes("1990-05-15")
