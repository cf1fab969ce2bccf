"""Game table with named seats.

Each seat holds at most one player. Leaving empties the seat and returns
the player's purse to the bank, so a seat is either a live player or None.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ledger.bank import Bank
from players.player import Player

logger = logging.getLogger(__name__)


class GameError(Exception):
    """Error raised when a seat is used incorrectly."""

    pass


class Game:
    """Table of players sharing one bank."""

    def __init__(self, bank: Bank) -> None:
        self.bank = bank
        self._seats: Dict[str, Player] = {}

    @property
    def seated(self) -> List[str]:
        return list(self._seats)

    def player(self, name: str) -> Optional[Player]:
        """Player in the seat, or None if the seat is empty."""
        return self._seats.get(name)

    def _require(self, name: str) -> Player:
        player = self._seats.get(name)
        if player is None:
            raise GameError(f"No player seated as {name}")
        return player

    def join(self, name: str, coins: int) -> Player:
        """Seat a new player with a starting allowance.

        Raises:
            GameError: If the seat is already taken.
        """
        if name in self._seats:
            raise GameError(f"Seat {name} is already taken")
        player = Player(self.bank, coins, name=name)
        self._seats[name] = player
        return player

    def win(self, name: str, coins: int) -> int:
        return self._require(name).win_coins(coins)

    def leave(self, name: str) -> int:
        """Empty the seat and return the player's purse to the bank."""
        player = self._require(name)
        del self._seats[name]
        return player.release()

    def close(self) -> int:
        """Release every seated player. Returns total coins returned."""
        returned = 0
        for name in list(self._seats):
            returned += self.leave(name)
        if returned:
            logger.info("Table closed, %d coins returned", returned)
        return returned

    def __enter__(self) -> Game:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
