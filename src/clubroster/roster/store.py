"""In-memory roster keyed by jersey number."""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from clubroster.models import Player, Position


logger = logging.getLogger(__name__)


class PlayerNotFoundError(LookupError):
    """Raised when no player wears the requested jersey number."""

    def __init__(self, number: int):
        super().__init__(f"No player with jersey number {number}.")
        self.number = number


class RosterStore:
    """Players keyed by jersey number, kept in insertion order."""

    def __init__(self) -> None:
        self._players: Dict[int, Player] = {}

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, number: object) -> bool:
        return number in self._players

    def add(self, number: int, player: Player) -> None:
        if number in self._players:
            logger.debug("Replacing player at jersey number %d", number)
        self._players[number] = player

    def remove(self, number: int) -> Player:
        try:
            player = self._players.pop(number)
        except KeyError:
            raise PlayerNotFoundError(number) from None
        logger.debug("Removed player %s from jersey number %d", player.dni, number)
        return player

    def list(self) -> List[Tuple[int, Player]]:
        return list(self._players.items())

    def filter_by_position(self, position: Position | str) -> List[Tuple[int, Player]]:
        wanted = Position.parse(position)
        return [(number, player) for number, player in self._players.items() if player.position is wanted]
