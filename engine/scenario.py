"""The bank-and-player walk-through: join, win, leave."""
from __future__ import annotations

from typing import List

from engine.game import Game
from ledger.bank import Bank


def run_playground(bank: Bank, allowance: int = 100, winnings: int = 2_000) -> List[str]:
    """Run one player through joining, winning and leaving.

    Args:
        bank: Bank the player borrows from.
        allowance: Starting allowance requested on joining.
        winnings: Coins the player wins once seated.

    Returns:
        Narration lines, one per step.
    """
    lines: List[str] = []
    with Game(bank) as game:
        player = game.join("playerOne", allowance)
        lines.append(f"A new player has joined the game with {player.coins_in_purse:,} coins")
        lines.append(f"There are now {bank.coins_in_bank:,} coins left in the bank")

        granted = game.win("playerOne", winnings)
        lines.append(f"PlayerOne won {granted:,} coins & now has {player.coins_in_purse:,} coins")
        lines.append(f"The bank now only has {bank.coins_in_bank:,} coins left")

        game.leave("playerOne")
        lines.append("PlayerOne has left the game")
        lines.append(f"The bank now has {bank.coins_in_bank:,} coins")
    return lines
