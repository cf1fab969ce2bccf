from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

@dataclass(frozen=True)
class SimulationPolicy:
    raw: Dict[str, Any]

    @property
    def _section(self) -> Dict[str, Any]:
        return self.raw.get("simulation") or {}

    @property
    def rounds(self) -> int:
        return int(self._section.get("rounds", 250))

    @property
    def seats(self) -> int:
        return int(self._section.get("seats", 4))

    @property
    def max_allowance(self) -> int:
        return int(self._section.get("max_allowance", 500))

    @property
    def max_win(self) -> int:
        return int(self._section.get("max_win", 2_000))

    @property
    def leave_probability(self) -> float:
        return float(self._section.get("leave_probability", 0.1))

    @property
    def seed(self) -> int:
        return int(self._section.get("seed", 7))
