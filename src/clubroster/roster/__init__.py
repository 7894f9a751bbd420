"""Football roster store and its console driver."""

from .app import RosterApp
from .store import PlayerNotFoundError, RosterStore

__all__ = ["PlayerNotFoundError", "RosterApp", "RosterStore"]
