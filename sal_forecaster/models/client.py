"""
Typed client record received at the calling boundary.

Client data lives in an external store; this model is the validated shape the
forecast helpers accept instead of an untyped dict. Blank strings are treated
as missing so an empty ``birth_date`` column surfaces as ``MissingBirthDate``
rather than a format error.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class ClientRecord(BaseModel):
    """Minimal client fields needed to compute a forecast.

    Attributes:
        id:         External record identifier, if known.
        name:       Display name, if known.
        birth_date: Birth date string (``YYYY-MM-DD`` or ``DD.MM.YYYY``), or ``None``.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: Optional[str] = None
    birth_date: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        # External stores hand out integer and UUID keys alike.
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("id", "name", "birth_date")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None
