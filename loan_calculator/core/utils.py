from __future__ import annotations

import math
import re
from typing import Optional


CENTS: int = 100

_AMOUNT_DECORATIONS = re.compile(r"[\s,%$€£]")


def round_currency(value: float) -> float:
    """Round a currency amount to 2 decimals, halves going up.

    Python's built-in ``round`` rounds halves to even; schedules need the
    half-up behaviour so that e.g. 416.665 becomes 416.67.
    """
    return math.floor(value * CENTS + 0.5) / CENTS


def currency(value: float, symbol: str = "$") -> str:
    if value < 0:
        return f"-{symbol}{abs(value):,.2f}"
    return f"{symbol}{value:,.2f}"


def parse_amount(text: Optional[str]) -> Optional[float]:
    """Parse a user-typed amount such as ``"$100,000"`` or ``"5 %"``.

    Only currency symbols, thousands separators, percent signs and whitespace
    are dropped. Returns None for blank input; anything else that is not a
    number, such as ``"100k"``, raises ValueError.
    """
    if text is None or not str(text).strip():
        return None
    cleaned = _AMOUNT_DECORATIONS.sub("", str(text))
    try:
        return float(cleaned)
    except ValueError:
        raise ValueError(f"Not a number: {text!r}") from None
