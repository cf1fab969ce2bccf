"""Bank supply simulator.

Runs seeded rounds of players joining, winning and leaving a table that
shares one bank, and records the bank reserve after every round.

Metrics computed:
- Ending reserve
- Lowest reserve and rounds spent with an empty bank
- Supply drift (coins created or lost; zero when coins are conserved)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd

from engine.game import Game
from ledger.bank import DEFAULT_INITIAL_SUPPLY, Bank

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Results from a supply simulation."""

    rounds: int
    ending_reserve: int
    min_reserve: int
    empty_bank_rounds: int
    max_supply_drift: int
    history: pd.DataFrame


def _supply_drift(history: pd.DataFrame) -> int:
    """Largest absolute drift from the starting supply across all rounds."""
    if history.empty:
        return 0
    return int(history["supply_drift"].abs().max())


def _play_round(game: Game, rng: np.random.Generator, seats: int, max_allowance: int,
                max_win: int, leave_probability: float) -> None:
    for i in range(seats):
        name = f"seat-{i}"
        if game.player(name) is None:
            game.join(name, int(rng.integers(0, max_allowance + 1)))
        elif rng.random() < leave_probability:
            game.leave(name)
        else:
            game.win(name, int(rng.integers(0, max_win + 1)))


def simulate(
    initial_supply: int = DEFAULT_INITIAL_SUPPLY,
    rounds: int = 250,
    seats: int = 4,
    max_allowance: int = 500,
    max_win: int = 2_000,
    leave_probability: float = 0.1,
    seed: int = 7,
) -> SimulationResult:
    """Simulate a table of players against one bank.

    Args:
        initial_supply: Coins the bank starts with.
        rounds: Number of rounds to play.
        seats: Number of seats at the table.
        max_allowance: Largest starting allowance a new player asks for.
        max_win: Largest single win.
        leave_probability: Chance a seated player leaves in a round.
        seed: Random seed for reproducibility.

    Returns:
        SimulationResult with a per-round history DataFrame.
    """
    if rounds < 0 or seats < 0:
        raise ValueError(f"rounds and seats must be non-negative, got {rounds} and {seats}")
    if not 0.0 <= leave_probability <= 1.0:
        raise ValueError(f"leave_probability must be within [0, 1], got {leave_probability}")

    rng = np.random.default_rng(seed)
    bank = Bank(initial_supply)
    rows = []

    with Game(bank) as game:
        for r in range(1, rounds + 1):
            _play_round(game, rng, seats, max_allowance, max_win, leave_probability)
            purses = sum(game.player(n).coins_in_purse for n in game.seated)
            rows.append({
                "round": r,
                "coins_in_bank": bank.coins_in_bank,
                "coins_in_circulation": purses,
                "players": len(game.seated),
                "supply_drift": bank.coins_in_bank + purses - initial_supply,
            })

    history = pd.DataFrame(rows, columns=[
        "round", "coins_in_bank", "coins_in_circulation", "players", "supply_drift",
    ]).set_index("round")

    reserve = history["coins_in_bank"]
    result = SimulationResult(
        rounds=rounds,
        ending_reserve=bank.coins_in_bank,
        min_reserve=int(reserve.min()) if not reserve.empty else bank.coins_in_bank,
        empty_bank_rounds=int((reserve == 0).sum()),
        max_supply_drift=_supply_drift(history),
        history=history,
    )
    logger.info(
        "Simulated %d rounds: ending reserve %d, max drift %d",
        rounds, result.ending_reserve, result.max_supply_drift,
    )
    return result
