from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict
import yaml

def load_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

@dataclass(frozen=True)
class LoadedConfig:
    raw: Dict[str, Any]

    @property
    def bank(self) -> Dict[str, Any]:
        return self.raw.get("bank") or {}

    @property
    def simulation(self) -> Dict[str, Any]:
        return self.raw.get("simulation") or {}

    @property
    def logging(self) -> Dict[str, Any]:
        return self.raw.get("logging") or {}

def load_all(config_path: str | Path = "config/game.yaml") -> LoadedConfig:
    # Missing file means built-in defaults everywhere.
    try:
        raw = load_yaml(config_path)
    except FileNotFoundError:
        raw = {}
    return LoadedConfig(raw=raw)
