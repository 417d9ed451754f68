from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, replace
from typing import Final, List, Optional

import pandas as pd

from .utils import round_currency


logger = logging.getLogger(__name__)

MONTHS_IN_YEAR: Final[int] = 12
MAX_TERM_YEARS: Final[int] = 50

SCHEDULE_COLUMNS: Final[List[str]] = [
    "month",
    "payment",
    "principal",
    "interest",
    "balance",
    "total_interest",
]


class ValidationError(ValueError):
    """Loan terms rejected before any calculation."""


class InvalidPrincipal(ValidationError):
    pass


class InvalidRate(ValidationError):
    pass


class InvalidTerm(ValidationError):
    pass


class CalculationError(RuntimeError):
    """Unexpected failure while building a schedule."""


@dataclass(frozen=True)
class LoanTerms:
    principal: float
    annual_rate_percent: float  # 5.0 means 5%
    term_years: int

    @property
    def monthly_rate(self) -> float:
        return self.annual_rate_percent / 100 / MONTHS_IN_YEAR

    @property
    def number_of_payments(self) -> int:
        return self.term_years * MONTHS_IN_YEAR


@dataclass(frozen=True)
class PaymentRecord:
    """One scheduled month; ``principal`` is rounded to cents like the other amounts."""

    month: int
    payment: float
    principal: float
    interest: float
    balance: float
    total_interest: float


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def validate(
    principal: Optional[float],
    annual_rate_percent: Optional[float],
    term_years: Optional[int],
    max_term_years: int = MAX_TERM_YEARS,
) -> None:
    """Check loan inputs, raising the matching ValidationError subclass.

    Parameters
    ----------
    principal : float
        Amount borrowed, must be strictly positive.
    annual_rate_percent : float
        Nominal annual rate as a percentage, strictly between 0 and 100.
    term_years : int
        Whole number of years, from 1 to ``max_term_years``.
    """
    if not _is_number(principal) or principal <= 0:
        raise InvalidPrincipal("Principal must be positive")
    if not _is_number(annual_rate_percent) or annual_rate_percent <= 0 or annual_rate_percent >= 100:
        raise InvalidRate("Rate must be between 0.01% and 99.99%")
    if isinstance(term_years, float) and term_years.is_integer():
        term_years = int(term_years)
    if not isinstance(term_years, int) or isinstance(term_years, bool) or term_years <= 0:
        raise InvalidTerm("Term must be at least 1 year")
    if term_years > max_term_years:
        raise InvalidTerm(f"Term must be at most {max_term_years} years")


def compute_monthly_payment(principal: float, monthly_rate: float, number_of_payments: int) -> float:
    """Fixed payment that retires ``principal`` over ``number_of_payments`` months.

    No rounding is applied; the schedule loop works from the full-precision value.
    """
    if number_of_payments <= 0:
        return 0.0
    if monthly_rate == 0:
        return principal / number_of_payments
    return principal * monthly_rate / (1 - (1 + monthly_rate) ** (-number_of_payments))


def generate_schedule(
    principal: float,
    monthly_rate: float,
    number_of_payments: int,
    payment: float,
) -> List[PaymentRecord]:
    """Build the month-by-month schedule.

    Interest, principal portion, running interest and balance are rounded to
    cents at every step. The last month takes whatever balance remains as its
    principal portion so the loan always ends at exactly zero.
    """
    records: List[PaymentRecord] = []
    balance = float(principal)
    total_interest = 0.0

    for month in range(1, number_of_payments + 1):
        interest = round_currency(balance * monthly_rate)
        principal_part = round_currency(payment - interest)
        total_interest = round_currency(total_interest + interest)

        if month == number_of_payments:
            principal_part = balance
            balance = 0.0
        else:
            balance = round_currency(balance - principal_part)

        records.append(
            PaymentRecord(
                month=month,
                payment=payment,
                principal=principal_part,
                interest=interest,
                balance=balance,
                total_interest=total_interest,
            )
        )
    return records


@dataclass(frozen=True)
class AmortizationSummary:
    terms: LoanTerms
    payment_monthly: float
    schedule: List[PaymentRecord]

    @property
    def total_interest(self) -> float:
        return total_interest(self.schedule)


def amortize(terms: LoanTerms, max_term_years: int = MAX_TERM_YEARS) -> AmortizationSummary:
    """Validate ``terms`` and return the payment together with its schedule."""
    validate(terms.principal, terms.annual_rate_percent, terms.term_years, max_term_years)
    terms = replace(terms, term_years=int(terms.term_years))
    monthly_rate = terms.monthly_rate
    n_payments = terms.number_of_payments

    payment = compute_monthly_payment(terms.principal, monthly_rate, n_payments)
    if not math.isfinite(payment):
        raise CalculationError(f"payment is not finite for {terms}")

    schedule = generate_schedule(terms.principal, monthly_rate, n_payments, payment)
    logger.debug(
        "Amortized %.2f at %.4f%% over %d months: payment %.4f",
        terms.principal,
        terms.annual_rate_percent,
        n_payments,
        payment,
    )
    return AmortizationSummary(terms=terms, payment_monthly=payment, schedule=schedule)


def total_interest(schedule: List[PaymentRecord]) -> float:
    if not schedule:
        return 0.0
    return schedule[-1].total_interest


def schedule_frame(schedule: List[PaymentRecord]) -> pd.DataFrame:
    if not schedule:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS, data=[])
    return pd.DataFrame([asdict(record) for record in schedule], columns=SCHEDULE_COLUMNS)


def aggregate_yearly(schedule: pd.DataFrame) -> pd.DataFrame:
    """Aggregate a monthly schedule frame by loan year.

    Returns a DataFrame with columns: year, payment, principal, interest,
    end_balance, total_interest
    """
    columns = ["year", "payment", "principal", "interest", "end_balance", "total_interest"]
    if schedule.empty:
        return pd.DataFrame(columns=columns, data=[])

    schedule = schedule.copy()
    schedule["year"] = (schedule["month"] - 1) // MONTHS_IN_YEAR + 1
    agg = (
        schedule.groupby("year", as_index=False)[["payment", "principal", "interest"]]
        .sum()
        .sort_values("year")
    )
    # Balance and running interest as of the last month of each year
    year_end = (
        schedule.groupby("year", as_index=False)[["balance", "total_interest"]]
        .last()
        .rename(columns={"balance": "end_balance"})
    )
    return agg.merge(year_end, on="year", how="left")[columns]
