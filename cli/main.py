"""Coin ledger CLI.

Provides commands for:
- demo: Walk one player through joining, winning and leaving
- simulate: Run seeded table rounds against one bank
- show: Print the configured bank state
"""
from __future__ import annotations

import argparse

from common.config_loader import LoadedConfig, load_all
from common.logging_config import setup_logging
from engine.game import GameError
from engine.scenario import run_playground
from ledger.bank import Bank
from players.player import PlayerLeftError
from policy.simulation_policy import SimulationPolicy
from policy.supply_policy import SupplyPolicy, validate_supply
from reporting.summary import bank_summary
from simulation.simulator import simulate


def build_bank(cfg: LoadedConfig) -> Bank:
    """Build a fresh bank from loaded configuration."""
    return Bank(SupplyPolicy(cfg.raw).initial_supply)


def print_warnings(warnings) -> None:
    if warnings:
        print("\nWarnings:")
        for w in warnings:
            print(f"  - {w}")


def cmd_demo(args) -> int:
    """Handle demo command: the join/win/leave walk-through."""
    cfg = load_all(args.config)

    try:
        bank = build_bank(cfg)
        lines = run_playground(bank, allowance=args.allowance, winnings=args.winnings)
    except (ValueError, GameError, PlayerLeftError) as e:
        print(f"Error: {e}")
        return 1

    for line in lines:
        print(line)

    print_warnings(validate_supply(bank, SupplyPolicy(cfg.raw)))
    return 0


def cmd_simulate(args) -> int:
    """Handle simulate command: seeded table rounds."""
    cfg = load_all(args.config)
    pol = SimulationPolicy(cfg.raw)

    try:
        result = simulate(
            initial_supply=SupplyPolicy(cfg.raw).initial_supply,
            rounds=args.rounds if args.rounds is not None else pol.rounds,
            seats=args.seats if args.seats is not None else pol.seats,
            max_allowance=pol.max_allowance,
            max_win=pol.max_win,
            leave_probability=pol.leave_probability,
            seed=args.seed if args.seed is not None else pol.seed,
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print("Simulation Results")
    print("=" * 50)
    print(f"  Rounds:             {result.rounds:>10,}")
    print(f"  Ending Reserve:     {result.ending_reserve:>10,}")
    print(f"  Lowest Reserve:     {result.min_reserve:>10,}")
    print(f"  Empty-Bank Rounds:  {result.empty_bank_rounds:>10,}")
    print(f"  Max Supply Drift:   {result.max_supply_drift:>10,}")

    if result.max_supply_drift:
        print_warnings([f"Coins were not conserved (drift {result.max_supply_drift:,})"])
    return 0


def cmd_show(args) -> int:
    """Handle show command: configured bank state."""
    cfg = load_all(args.config)
    try:
        bank = build_bank(cfg)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print("Bank")
    print("=" * 40)
    for k, v in bank_summary(bank).items():
        print(f"  {k:22} {v:>10,}")
    return 0


def main():
    """Main entry point."""
    p = argparse.ArgumentParser(
        prog="cli.main",
        description="Coin ledger CLI: one bank, many players",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    # Common arguments for all commands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default="config/game.yaml", help="Game config file")
    common.add_argument("--log-level", default=None, help="Log level (overrides config)")

    demo = sub.add_parser("demo", parents=[common], help="Join, win and leave with one player")
    demo.add_argument("--allowance", type=int, default=100, help="Starting allowance requested")
    demo.add_argument("--winnings", type=int, default=2_000, help="Coins won once seated")
    demo.set_defaults(func=cmd_demo)

    sim = sub.add_parser("simulate", parents=[common], help="Run seeded table rounds")
    sim.add_argument("--rounds", type=int, default=None, help="Rounds to play (default: config)")
    sim.add_argument("--seats", type=int, default=None, help="Seats at the table (default: config)")
    sim.add_argument("--seed", type=int, default=None, help="Random seed (default: config)")
    sim.set_defaults(func=cmd_simulate)

    show = sub.add_parser("show", parents=[common], help="Show configured bank state")
    show.set_defaults(func=cmd_show)

    args = p.parse_args()
    level = args.log_level or load_all(args.config).logging.get("level") or "WARNING"
    setup_logging(level)
    raise SystemExit(args.func(args))


if __name__ == "__main__":
    main()
