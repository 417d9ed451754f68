from .amortization import (
	AmortizationSummary,
	CalculationError,
	InvalidPrincipal,
	InvalidRate,
	InvalidTerm,
	LoanTerms,
	PaymentRecord,
	ValidationError,
	aggregate_yearly,
	amortize,
	compute_monthly_payment,
	generate_schedule,
	schedule_frame,
	validate,
)
from .calculator import CalculationOutcome, LoanCalculator
from .export import CSV_HEADER, ExportError, read_schedule_csv, schedule_to_csv, write_schedule_csv
from .utils import currency, parse_amount, round_currency

__all__ = [
	"AmortizationSummary",
	"CalculationError",
	"InvalidPrincipal",
	"InvalidRate",
	"InvalidTerm",
	"LoanTerms",
	"PaymentRecord",
	"ValidationError",
	"aggregate_yearly",
	"amortize",
	"compute_monthly_payment",
	"generate_schedule",
	"schedule_frame",
	"validate",
	"CalculationOutcome",
	"LoanCalculator",
	"CSV_HEADER",
	"ExportError",
	"read_schedule_csv",
	"schedule_to_csv",
	"write_schedule_csv",
	"currency",
	"parse_amount",
	"round_currency",
]
