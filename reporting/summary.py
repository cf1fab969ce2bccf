from __future__ import annotations
from typing import Dict, Any
from engine.game import Game
from ledger.bank import Bank

def bank_summary(bank: Bank) -> Dict[str, Any]:
    return {
        "initial_supply": bank.initial_supply,
        "coins_in_bank": bank.coins_in_bank,
        "coins_in_circulation": bank.coins_in_circulation,
        "excess_supply": bank.excess_supply,
        "total_vended": bank.total_vended,
        "total_received": bank.total_received,
    }

def table_summary(game: Game) -> Dict[str, Any]:
    return {
        "bank": bank_summary(game.bank),
        "players": [{"name": n, "coins": game.player(n).coins_in_purse} for n in game.seated],
    }
