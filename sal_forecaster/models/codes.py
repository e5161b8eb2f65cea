"""
Birth date and SAL code models.

``BirthDate`` is the normalized form of the two accepted textual inputs
(``YYYY-MM-DD`` and ``DD.MM.YYYY``). Field ranges are coarse (day 1–31,
month 1–12); whether the combination is a real Gregorian date is decided by
the parser, which may run in lenient mode for compatibility with older
client records.

``SALCodes`` is the five-code result. Both models are frozen.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sal_forecaster.calc.digits import MASTER_NUMBERS


class BirthDate(BaseModel):
    """A birth date as (year, month, day) with no time component.

    Attributes:
        year:  Four-digit year, 1–9999.
        month: 1–12.
        day:   1–31.
    """

    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @property
    def iso(self) -> str:
        """``YYYY-MM-DD`` rendering."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @property
    def is_calendar_date(self) -> bool:
        """True when the components form a real Gregorian date."""
        try:
            self.to_date()
        except ValueError:
            return False
        return True

    def to_date(self) -> date:
        """Return the ``datetime.date``; raises ``ValueError`` if not a real date."""
        return date(self.year, self.month, self.day)

    def digits(self) -> list[int]:
        """Every decimal digit of day, month and year, in that order."""
        return [int(ch) for ch in f"{self.day}{self.month}{self.year}"]


class SALCodes(BaseModel):
    """The five SAL codes derived from one birth date.

    Attributes:
        personality: 1–9.
        connector:   1–9.
        realization: 1–9.
        generator:   1–9.
        mission:     1–9, or the master numbers 11 / 22.
    """

    model_config = ConfigDict(frozen=True)

    personality: int
    connector: int
    realization: int
    generator: int
    mission: int

    @field_validator("personality", "connector", "realization", "generator")
    @classmethod
    def validate_single_digit(cls, v: int) -> int:
        if not 1 <= v <= 9:
            raise ValueError(f"SAL code must be in [1, 9], got {v}.")
        return v

    @field_validator("mission")
    @classmethod
    def validate_mission(cls, v: int) -> int:
        if not (1 <= v <= 9 or v in MASTER_NUMBERS):
            raise ValueError(f"mission must be in [1, 9] or one of 11/22, got {v}.")
        return v

    @property
    def rotating(self) -> tuple[int, int, int]:
        """``(personality, connector, realization)`` — the codes used for forecasting."""
        return self.personality, self.connector, self.realization

    @property
    def has_master_mission(self) -> bool:
        return self.mission in MASTER_NUMBERS
