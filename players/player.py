"""Players borrow coins from a bank and hand their purse back when they leave.

Returning the purse is tied to the player's lifetime with weakref.finalize,
so it happens exactly once whichever way the player goes away:
- explicit release()
- leaving a `with` block, exception or not
- the last reference being dropped
- interpreter shutdown
"""
from __future__ import annotations

import itertools
import logging
import threading
import weakref
from dataclasses import dataclass
from typing import Optional

from ledger.bank import Bank

logger = logging.getLogger(__name__)

_player_ids = itertools.count(1)


class PlayerLeftError(Exception):
    """Error raised when a player is used after leaving the game."""

    pass


@dataclass
class Purse:
    coins: int = 0


def _return_purse(bank: Bank, purse: Purse, name: str, lock: threading.RLock) -> int:
    # Must not reference the Player itself, or it would never be collected.
    with lock:
        coins = purse.coins
        bank.receive_coins(coins)
        purse.coins = 0
    logger.debug("%s returned %d coins to the bank", name, coins)
    return coins


class Player:
    """A player holding a purse of coins vended by a bank."""

    def __init__(self, bank: Bank, coins: int, name: Optional[str] = None) -> None:
        self.bank = bank
        self.name = name or f"player-{next(_player_ids)}"
        self._lock = threading.RLock()
        self._purse = Purse(bank.vend_coins(coins))
        self._finalizer = weakref.finalize(
            self, _return_purse, bank, self._purse, self.name, self._lock
        )
        logger.info("%s joined with %d coins", self.name, self._purse.coins)

    @property
    def coins_in_purse(self) -> int:
        return self._purse.coins

    @property
    def active(self) -> bool:
        """Whether the player still holds its purse."""
        return self._finalizer.alive

    def win_coins(self, coins: int) -> int:
        """Win coins from the bank.

        Args:
            coins: Number of coins won. The bank may grant fewer.

        Returns:
            Number of coins actually added to the purse.

        Raises:
            PlayerLeftError: If the player already left.
        """
        # The purse return takes the same lock, so a grant always lands
        # in a purse that has not been handed back yet.
        with self._lock:
            if not self.active:
                raise PlayerLeftError(f"{self.name} has left the game")
            granted = self.bank.vend_coins(coins)
            self._purse.coins += granted
        return granted

    def release(self) -> int:
        """Return the whole purse to the bank.

        Returns:
            Coins returned; 0 if the player had already left.
        """
        returned = self._finalizer()
        if returned is None:
            return 0
        logger.info("%s left the game", self.name)
        return returned

    def __enter__(self) -> Player:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "active" if self.active else "left"
        return f"Player(name={self.name!r}, coins_in_purse={self.coins_in_purse}, {state})"
