from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List
from ledger.bank import DEFAULT_INITIAL_SUPPLY, Bank

@dataclass(frozen=True)
class SupplyPolicy:
    raw: Dict[str, Any]

    @property
    def initial_supply(self) -> int:
        return int((self.raw.get("bank") or {}).get("initial_supply", DEFAULT_INITIAL_SUPPLY))

def validate_supply(bank: Bank, pol: SupplyPolicy) -> List[str]:
    issues: List[str] = []
    if bank.coins_in_bank > pol.initial_supply:
        issues.append(
            f"Bank reserve above starting supply: {bank.coins_in_bank:,} > {pol.initial_supply:,}"
        )
    return issues
