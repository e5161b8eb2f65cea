"""
SAL code taxonomy and forecast index bands.

Two small vocabularies:
  - ``CodeKind``  — the five codes derived from a birth date.
  - ``IndexBand`` — five-level classification of a daily forecast index,
    used to colour calendar cells and count favourable days.

``CODE_LABELS`` / ``CODE_DESCRIPTIONS`` are the canonical display strings.
``ROTATING_CODES`` lists the three codes that drive the forecast; generator
and mission are reported but never scored.

This module has NO imports from any other ``sal_forecaster`` package.
"""

from enum import StrEnum


class CodeKind(StrEnum):
    """One of the five SAL codes."""

    PERSONALITY = "personality"
    """Core nature and way of thinking. Digit root of the day of birth."""

    CONNECTOR = "connector"
    """How the person interacts with the world. Digit root of all date digits."""

    REALIZATION = "realization"
    """Where the person finds results. Digit root of the two-digit year."""

    GENERATOR = "generator"
    """What charges and drains the person. Day-sum times month-sum."""

    MISSION = "mission"
    """The energy the person carries. Personality + connector; keeps 11 and 22."""


ROTATING_CODES: tuple[CodeKind, ...] = (
    CodeKind.PERSONALITY,
    CodeKind.CONNECTOR,
    CodeKind.REALIZATION,
)

CODE_LABELS: dict[CodeKind, str] = {
    CodeKind.PERSONALITY: "Personality Code",
    CodeKind.CONNECTOR:   "Connector Code",
    CodeKind.REALIZATION: "Realization Code",
    CodeKind.GENERATOR:   "Generator Code",
    CodeKind.MISSION:     "Mission Code",
}

CODE_SHORT_LABELS: dict[CodeKind, str] = {
    CodeKind.PERSONALITY: "Personality",
    CodeKind.CONNECTOR:   "Connector",
    CodeKind.REALIZATION: "Realization",
    CodeKind.GENERATOR:   "Generator",
    CodeKind.MISSION:     "Mission",
}

CODE_DESCRIPTIONS: dict[CodeKind, str] = {
    CodeKind.PERSONALITY: (
        "The core of the person: innate nature, way of thinking, character. "
        "Sum of the digits of the day of birth (down to 9)."
    ),
    CodeKind.CONNECTOR: (
        "How the person interacts with the world and how others perceive them. "
        "Sum of all digits of the birth date (down to 9)."
    ),
    CodeKind.REALIZATION: (
        "Through what the person realizes themselves and gets a sense of result. "
        "Sum of the last two digits of the birth year (down to 9)."
    ),
    CodeKind.GENERATOR: (
        "What charges and drains the person, what gives meaning. "
        "Digit sum of the day times digit sum of the month (down to 9)."
    ),
    CodeKind.MISSION: (
        "The energy the person is called to carry into the world. "
        "Personality plus Connector; may be the master numbers 11 or 22."
    ),
}


class IndexBand(StrEnum):
    """Classification of a daily forecast index in [-2, 2]."""

    STRONG_PLUS = "strong_plus"
    PLUS = "plus"
    NEUTRAL = "neutral"
    MINUS = "minus"
    STRONG_MINUS = "strong_minus"


# Lower bounds, checked top to bottom; anything below the last is STRONG_MINUS.
BAND_THRESHOLDS: tuple[tuple[float, IndexBand], ...] = (
    (1.5,   IndexBand.STRONG_PLUS),
    (0.5,   IndexBand.PLUS),
    (-0.49, IndexBand.NEUTRAL),
    (-1.49, IndexBand.MINUS),
)

BAND_LABELS: dict[IndexBand, str] = {
    IndexBand.STRONG_PLUS:  "Strong plus (>= 1.5)",
    IndexBand.PLUS:         "Plus (0.5 to 1.49)",
    IndexBand.NEUTRAL:      "Neutral (-0.49 to 0.49)",
    IndexBand.MINUS:        "Minus (-0.5 to -1.49)",
    IndexBand.STRONG_MINUS: "Strong minus (<= -1.5)",
}

BAND_SYMBOLS: dict[IndexBand, str] = {
    IndexBand.STRONG_PLUS:  "++",
    IndexBand.PLUS:         "+",
    IndexBand.NEUTRAL:      "0",
    IndexBand.MINUS:        "-",
    IndexBand.STRONG_MINUS: "--",
}

FAVOURABLE_BANDS: frozenset[IndexBand] = frozenset(
    {IndexBand.STRONG_PLUS, IndexBand.PLUS}
)


def classify_index(index: float) -> IndexBand:
    """Return the ``IndexBand`` for a forecast index value."""
    for lower, band in BAND_THRESHOLDS:
        if index >= lower:
            return band
    return IndexBand.STRONG_MINUS
