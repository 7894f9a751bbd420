"""Club member model."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


def whole_years_between(start: date, end: date) -> int:
    """Complete calendar years from ``start`` to ``end``, truncated toward zero."""

    if end < start:
        return -whole_years_between(end, start)
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


class Member(BaseModel):
    """Membership record. Identity (equality, hashing, ordering) is the DNI."""

    dni: str = Field(..., min_length=1)
    name: str
    joined_on: date

    model_config = ConfigDict(validate_assignment=True)

    def tenure(self, today: Optional[date] = None) -> int:
        return whole_years_between(self.joined_on, today or date.today())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Member):
            return NotImplemented
        return self.dni == other.dni

    def __hash__(self) -> int:
        return hash(self.dni)

    def __lt__(self, other: "Member") -> bool:
        if not isinstance(other, Member):
            return NotImplemented
        return self.dni < other.dni
