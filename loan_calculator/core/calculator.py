from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from .amortization import (
    MAX_TERM_YEARS,
    LoanTerms,
    PaymentRecord,
    ValidationError,
    amortize,
    total_interest,
)
from .export import write_schedule_csv
from .utils import currency


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationOutcome:
    ok: bool
    message: str = ""
    payment_monthly: float = 0.0
    schedule: List[PaymentRecord] = field(default_factory=list)


class LoanCalculator:
    """Holds the current loan terms and schedule behind a request/response API.

    Every successful ``calculate`` replaces the schedule wholesale; a failed
    one leaves the previous schedule in place.
    """

    def __init__(self, max_term_years: int = MAX_TERM_YEARS, currency_symbol: str = "$"):
        self.max_term_years = max_term_years
        self.currency_symbol = currency_symbol
        self.clear()

    # ------------------------- Requests ------------------------- #
    def calculate(
        self,
        principal: Optional[float],
        annual_rate_percent: Optional[float],
        term_years: Optional[int],
    ) -> CalculationOutcome:
        if principal is None or annual_rate_percent is None or term_years is None:
            return self._fail("Please fill in all fields")
        try:
            terms = LoanTerms(
                principal=float(principal),
                annual_rate_percent=float(annual_rate_percent),
                term_years=term_years,
            )
            summary = amortize(terms, max_term_years=self.max_term_years)
        except ValidationError as exc:
            return self._fail(str(exc))
        except Exception as exc:
            logger.exception("Calculation failed")
            return self._fail(f"Error: {exc}")

        self.terms = summary.terms
        self.payment_monthly = summary.payment_monthly
        self.schedule = summary.schedule
        return CalculationOutcome(
            ok=True,
            payment_monthly=summary.payment_monthly,
            schedule=summary.schedule,
        )

    def clear(self) -> None:
        self.terms = LoanTerms(principal=0.0, annual_rate_percent=0.0, term_years=1)
        self.payment_monthly = 0.0
        self.schedule: List[PaymentRecord] = []

    def export_csv(self, path: Union[str, Path]) -> Path:
        return write_schedule_csv(self.schedule, path)

    # ------------------------- Views ------------------------- #
    @property
    def total_interest(self) -> float:
        return total_interest(self.schedule)

    def chart_values(self) -> Tuple[float, float]:
        if not self.schedule:
            return 0.0, 0.0
        return self.terms.principal, self.total_interest

    def table_rows(self) -> List[Dict[str, object]]:
        fmt = lambda v: currency(v, self.currency_symbol)
        return [
            {
                "Month": r.month,
                "Payment": fmt(r.payment),
                "Principal": fmt(r.principal),
                "Interest": fmt(r.interest),
                "Balance": fmt(r.balance),
            }
            for r in self.schedule
        ]

    def _fail(self, message: str) -> CalculationOutcome:
        logger.warning("Calculation rejected: %s", message)
        return CalculationOutcome(ok=False, message=message)
