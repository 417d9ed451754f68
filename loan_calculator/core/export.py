from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, List, Union

import pandas as pd

from .amortization import PaymentRecord, schedule_frame


logger = logging.getLogger(__name__)

CSV_HEADER: Final[List[str]] = [
    "Month",
    "Payment",
    "Principal",
    "Interest",
    "Balance",
    "Total Interest",
]


class ExportError(RuntimeError):
    """Schedule could not be written."""


def _export_frame(schedule: List[PaymentRecord]) -> pd.DataFrame:
    if not schedule:
        raise ExportError("Export failed: nothing to export, calculate a schedule first")
    frame = schedule_frame(schedule)
    frame["month"] = frame["month"].astype(int)
    return frame


def schedule_to_csv(schedule: List[PaymentRecord]) -> str:
    """Render the schedule as CSV text.

    One header line, then one ``%d,%.2f,%.2f,%.2f,%.2f,%.2f`` line per month.
    """
    return _export_frame(schedule).to_csv(
        index=False,
        header=CSV_HEADER,
        float_format="%.2f",
        lineterminator="\n",
    )


def write_schedule_csv(schedule: List[PaymentRecord], path: Union[str, Path]) -> Path:
    target = Path(path)
    text = schedule_to_csv(schedule)
    try:
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as exc:
        logger.exception("Could not write schedule to %s", target)
        raise ExportError(f"Export failed: {exc}") from exc
    logger.info("Exported %d payments to %s", len(schedule), target)
    return target


def read_schedule_csv(path: Union[str, Path]) -> pd.DataFrame:
    """Load an exported schedule back with the engine's column names."""
    frame = pd.read_csv(path)
    if list(frame.columns) != CSV_HEADER:
        raise ExportError(f"Unexpected header in {path}: {list(frame.columns)}")
    frame.columns = ["month", "payment", "principal", "interest", "balance", "total_interest"]
    return frame
