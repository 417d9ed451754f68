from __future__ import annotations

import logging
import os
import sys
from typing import Optional

import pandas as pd
import streamlit as st

# Ensure package import works on Streamlit Cloud when CWD != repo root
_THIS_DIR = os.path.dirname(__file__)
_REPO_ROOT = os.path.abspath(os.path.join(_THIS_DIR, "..", ".."))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from loan_calculator.core import plots
from loan_calculator.core.amortization import aggregate_yearly, schedule_frame
from loan_calculator.core.calculator import LoanCalculator
from loan_calculator.core.export import ExportError, schedule_to_csv
from loan_calculator.core.utils import currency, parse_amount
from config import (
    DEFAULT_PRINCIPAL,
    DEFAULT_RATE_PERCENT,
    DEFAULT_TERM_YEARS,
    MIN_TERM_YEARS,
    MAX_TERM_YEARS,
    PAGE_TITLE,
    CURRENCY_SYMBOL,
    EXPORT_FILE_NAME,
    LOG_LEVEL,
)


logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

st.set_page_config(page_title=PAGE_TITLE, layout="wide")


def get_calculator() -> LoanCalculator:
    if "calculator" not in st.session_state:
        st.session_state["calculator"] = LoanCalculator(
            max_term_years=MAX_TERM_YEARS, currency_symbol=CURRENCY_SYMBOL
        )
    return st.session_state["calculator"]


def reset_form():
    # Runs as an on_click callback, before the widgets are rebuilt
    st.session_state["principal_text"] = currency(0.0, CURRENCY_SYMBOL)
    st.session_state["rate_percent"] = 0.0
    st.session_state["term_years"] = MIN_TERM_YEARS
    st.session_state["cleared"] = True
    st.session_state.pop("message", None)
    get_calculator().clear()


def sidebar_inputs():
    st.sidebar.header("Loan")
    principal_text = st.sidebar.text_input(
        "Principal Amount:",
        value=currency(DEFAULT_PRINCIPAL, CURRENCY_SYMBOL),
        key="principal_text",
    )
    rate = st.sidebar.number_input(
        "Annual Interest Rate (%):",
        min_value=0.0,
        max_value=100.0,
        value=DEFAULT_RATE_PERCENT,
        step=0.125,
        format="%0.3f",
        key="rate_percent",
    )
    term = st.sidebar.number_input(
        "Loan Term (years):",
        min_value=MIN_TERM_YEARS,
        max_value=MAX_TERM_YEARS,
        value=DEFAULT_TERM_YEARS,
        step=1,
        key="term_years",
    )
    return principal_text, rate, int(term)


def run_calculation(principal_text: str, rate: float, term: int):
    calculator = get_calculator()
    principal: Optional[float]
    try:
        principal = parse_amount(principal_text)
    except ValueError as exc:
        st.session_state["message"] = ("error", f"Error: {exc}")
        return
    outcome = calculator.calculate(principal, rate, term)
    if outcome.ok:
        st.session_state.pop("message", None)
    else:
        st.session_state["message"] = ("error", outcome.message)


def render_summary(calculator: LoanCalculator):
    st.subheader("Summary")
    c1, c2, c3 = st.columns(3)
    principal, interest = calculator.chart_values()
    with c1:
        st.metric("Monthly payment", currency(calculator.payment_monthly, CURRENCY_SYMBOL))
    with c2:
        st.metric("Total interest", currency(interest, CURRENCY_SYMBOL))
    with c3:
        st.metric("Total paid", currency(principal + interest, CURRENCY_SYMBOL))


def render_schedule(calculator: LoanCalculator):
    st.subheader("Amortization schedule")
    rows = pd.DataFrame(calculator.table_rows(), columns=["Month", "Payment", "Principal", "Interest", "Balance"])
    st.dataframe(rows, use_container_width=True, hide_index=True)
    if not calculator.schedule:
        return
    try:
        csv_text = schedule_to_csv(calculator.schedule)
    except ExportError as exc:
        st.error(str(exc))
        return
    st.download_button(
        "Export to CSV",
        data=csv_text.encode("utf-8"),
        file_name=EXPORT_FILE_NAME,
        mime="text/csv",
    )


def render_chart(calculator: LoanCalculator):
    principal, interest = calculator.chart_values()
    if not calculator.schedule and not st.session_state.get("cleared"):
        # Before the first calculation the chart shows the principal only
        principal = 100.0
    fig = plots.payment_breakdown_pie(principal, interest, symbol=CURRENCY_SYMBOL)
    st.plotly_chart(fig, use_container_width=True)


def render_yearly(calculator: LoanCalculator):
    if not calculator.schedule:
        st.info("Calculate a schedule to see the yearly summary.")
        return
    monthly = schedule_frame(calculator.schedule)
    st.plotly_chart(plots.balance_curve(monthly, symbol=CURRENCY_SYMBOL), use_container_width=True)
    yearly = aggregate_yearly(monthly)
    st.dataframe(
        yearly.style.format({col: "{:,.2f}" for col in yearly.columns if col != "year"}),
        use_container_width=True,
        hide_index=True,
    )


def main():
    st.title(PAGE_TITLE)
    principal_text, rate, term = sidebar_inputs()

    b1, b2 = st.sidebar.columns(2)
    with b1:
        if st.button("Calculate", type="primary", key="calculate"):
            run_calculation(principal_text, rate, term)
    with b2:
        st.button("Clear", on_click=reset_form, key="clear")

    message = st.session_state.get("message")
    if message:
        st.error(message[1])

    calculator = get_calculator()
    render_summary(calculator)

    tabs = st.tabs(["Schedule", "Payment Breakdown", "Yearly"])
    with tabs[0]:
        render_schedule(calculator)
    with tabs[1]:
        render_chart(calculator)
    with tabs[2]:
        render_yearly(calculator)


if __name__ == "__main__":
    main()
