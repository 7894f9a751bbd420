"""Player model held by the roster."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Position(str, Enum):
    GOALKEEPER = "goalkeeper"
    DEFENDER = "defender"
    MIDFIELDER = "midfielder"
    FORWARD = "forward"

    @classmethod
    def parse(cls, value: "Position | str") -> "Position":
        """Resolve a position from an enum member, its value or its name."""

        if isinstance(value, cls):
            return value
        token = str(value).strip().lower()
        for position in cls:
            if token in (position.value, position.name.lower()):
                return position
        raise ValueError(f"Unknown position {value!r}")


class Player(BaseModel):
    """Roster entry; the jersey number is the key in the store, not a field."""

    dni: str = Field(..., min_length=1)
    name: str
    position: Position
    height: float = Field(..., gt=0.0)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return (
            f"Player(dni={self.dni!r}, name={self.name!r}, "
            f"position={self.position.value}, height={self.height:.2f})"
        )
