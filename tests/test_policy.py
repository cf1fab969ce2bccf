"""Tests for config loading and policies.

Covers:
- YAML config loading and defaults
- Supply validation flags uncapped deposits
- Simulation defaults
"""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from common.config_loader import load_all, load_yaml
from common.logging_config import ROOT_LOGGERS, setup_logging
from ledger.bank import Bank
from policy.simulation_policy import SimulationPolicy
from policy.supply_policy import SupplyPolicy, validate_supply

CONFIG = Path(__file__).resolve().parents[1] / "config" / "game.yaml"


class TestConfigLoader:
    """Tests for YAML config loading."""

    def test_loads_shipped_config(self):
        cfg = load_all(CONFIG)

        assert cfg.bank["initial_supply"] == 10_000
        assert cfg.simulation["seats"] == 4
        assert cfg.logging["level"] == "WARNING"

    def test_missing_file_gives_defaults(self, tmp_path):
        cfg = load_all(tmp_path / "missing.yaml")

        assert cfg.raw == {}
        assert SupplyPolicy(cfg.raw).initial_supply == 10_000

    def test_empty_file_loads_as_empty_dict(self, tmp_path):
        p = tmp_path / "empty.yaml"
        p.write_text("", encoding="utf-8")

        assert load_yaml(p) == {}

    def test_overrides_from_file(self, tmp_path):
        p = tmp_path / "game.yaml"
        p.write_text("bank:\n  initial_supply: 500\nsimulation:\n  rounds: 3\n", encoding="utf-8")

        cfg = load_all(p)

        assert SupplyPolicy(cfg.raw).initial_supply == 500
        assert SimulationPolicy(cfg.raw).rounds == 3
        assert SimulationPolicy(cfg.raw).seats == 4


class TestSupplyValidation:
    """Tests for reserve checks."""

    def test_conserved_reserve_passes(self):
        bank = Bank()
        bank.vend_coins(2_000)
        bank.receive_coins(2_000)

        assert validate_supply(bank, SupplyPolicy({})) == []

    def test_uncapped_deposit_is_flagged(self):
        """Deposits are not capped; the excess shows up as a warning."""
        bank = Bank()
        bank.receive_coins(1)

        issues = validate_supply(bank, SupplyPolicy({}))

        assert len(issues) == 1
        assert "above starting supply" in issues[0].lower()

    def test_reserve_below_supply_passes(self):
        bank = Bank()
        bank.vend_coins(10_000)

        assert validate_supply(bank, SupplyPolicy({})) == []


class TestSimulationPolicy:
    """Tests for simulation defaults."""

    def test_defaults(self):
        pol = SimulationPolicy({})

        assert pol.rounds == 250
        assert pol.seats == 4
        assert pol.max_allowance == 500
        assert pol.max_win == 2_000
        assert pol.leave_probability == 0.1
        assert pol.seed == 7

    def test_null_bank_section_uses_default_supply(self):
        assert SupplyPolicy({"bank": None}).initial_supply == 10_000


class TestLoggingSetup:
    """Tests for log level handling."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("debug", logging.DEBUG),
            (None, logging.WARNING),
            ("", logging.WARNING),
            (20, logging.INFO),
            ("nonsense", logging.WARNING),
        ],
    )
    def test_level_coercion(self, level, expected):
        setup_logging(level)

        for name in ROOT_LOGGERS:
            assert logging.getLogger(name).level == expected
