from __future__ import annotations

import yaml
from pathlib import Path
from typing import Any, Dict

# Project root (parent of this file)
BASE_DIR = Path(__file__).resolve().parent


def _load_yaml(path: Path = BASE_DIR / "config.yaml") -> Dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            return {}
        return data


CFG = _load_yaml()

# Form defaults
DEFAULT_PRINCIPAL: float = float(CFG.get("principal", 100_000.0))
DEFAULT_RATE_PERCENT: float = float(CFG.get("annual_rate_percent", 5.0))  # percent, not fraction
DEFAULT_TERM_YEARS: int = int(CFG.get("term_years", 30))

# Term bounds
MIN_TERM_YEARS: int = int(CFG.get("min_term_years", 1))
MAX_TERM_YEARS: int = int(CFG.get("max_term_years", 50))

# Display
PAGE_TITLE: str = str(CFG.get("page_title", "Loan Calculator"))
CURRENCY_SYMBOL: str = str(CFG.get("currency_symbol", "$"))

# Export
EXPORT_FILE_NAME: str = str(CFG.get("export_file_name", "amortization_schedule.csv"))

LOG_LEVEL: str = str(CFG.get("log_level", "INFO")).upper()
