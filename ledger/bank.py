"""Bank holding the game's bounded coin supply.

The bank is an explicitly passed object rather than module state, so every
player and table knows which bank it borrows from.

- vend_coins: hand out at most what the bank holds
- receive_coins: take coins back (uncapped)
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_SUPPLY = 10_000


@dataclass
class Bank:
    """Shared pool of coins with a fixed starting supply."""

    initial_supply: int = DEFAULT_INITIAL_SUPPLY
    coins_in_bank: int = field(init=False)
    total_vended: int = field(default=0, init=False)
    total_received: int = field(default=0, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.initial_supply < 0:
            raise ValueError(f"Initial supply must be non-negative, got {self.initial_supply}")
        self.coins_in_bank = self.initial_supply

    @property
    def coins_in_circulation(self) -> int:
        """Coins currently held outside the bank."""
        return self.initial_supply - self.coins_in_bank

    @property
    def excess_supply(self) -> int:
        """Coins held above the starting supply (only foreign deposits cause this)."""
        return max(0, self.coins_in_bank - self.initial_supply)

    def vend_coins(self, requested: int) -> int:
        """Hand out up to `requested` coins.

        Args:
            requested: Number of coins asked for. Negative requests count as 0.

        Returns:
            Number of coins actually handed out, min(requested, coins_in_bank).
        """
        with self._lock:
            granted = min(max(0, int(requested)), self.coins_in_bank)
            self.coins_in_bank -= granted
            self.total_vended += granted
            remaining = self.coins_in_bank

        if granted < requested:
            logger.info("Vend clamped: requested %d, granted %d", requested, granted)
        logger.debug("Vended %d coins, %d left in bank", granted, remaining)
        return granted

    def receive_coins(self, coins: int) -> None:
        """Take coins back into the bank. No upper bound is enforced."""
        coins = int(coins)
        if coins < 0:
            logger.warning("Ignoring negative deposit of %d coins", coins)
            return

        with self._lock:
            self.coins_in_bank += coins
            self.total_received += coins
            remaining = self.coins_in_bank

        logger.debug("Received %d coins, %d now in bank", coins, remaining)
