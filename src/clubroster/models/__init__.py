"""Record models shared by the stores, persistence and console layers."""

from .member import Member
from .player import Player, Position

__all__ = ["Member", "Player", "Position"]
