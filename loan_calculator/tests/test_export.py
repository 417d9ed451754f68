import pytest

from loan_calculator.core.amortization import LoanTerms, amortize
from loan_calculator.core.export import (
    CSV_HEADER,
    ExportError,
    read_schedule_csv,
    schedule_to_csv,
    write_schedule_csv,
)


def _schedule():
    return amortize(LoanTerms(100_000, 5.0, 30)).schedule


def test_csv_header_and_row_format():
    lines = schedule_to_csv(_schedule()).splitlines()
    assert lines[0] == "Month,Payment,Principal,Interest,Balance,Total Interest"
    assert lines[1] == "1,536.82,120.15,416.67,99879.85,416.67"
    assert lines[-1].startswith("360,536.82,")
    assert lines[-1].split(",")[4] == "0.00"
    assert len(lines) == 361


def test_written_file_reads_back_to_schedule(tmp_path):
    schedule = _schedule()
    path = write_schedule_csv(schedule, tmp_path / "schedule.csv")

    with open(path, encoding="utf-8") as f:
        assert f.readline().rstrip("\n") == ",".join(CSV_HEADER)

    frame = read_schedule_csv(path)
    assert len(frame) == len(schedule)
    for record, row in zip(schedule, frame.itertuples(index=False)):
        assert row.month == record.month
        assert row.payment == pytest.approx(record.payment, abs=0.005)
        assert row.principal == pytest.approx(record.principal, abs=0.005)
        assert row.interest == pytest.approx(record.interest, abs=0.005)
        assert row.balance == pytest.approx(record.balance, abs=0.005)
        assert row.total_interest == pytest.approx(record.total_interest, abs=0.005)


def test_empty_schedule_cannot_be_exported(tmp_path):
    with pytest.raises(ExportError):
        write_schedule_csv([], tmp_path / "empty.csv")
    assert not (tmp_path / "empty.csv").exists()


def test_unwritable_destination_raises_export_error(tmp_path):
    with pytest.raises(ExportError, match="Export failed"):
        write_schedule_csv(_schedule(), tmp_path / "missing" / "schedule.csv")


def test_read_rejects_foreign_header(tmp_path):
    path = tmp_path / "other.csv"
    path.write_text("a,b\n1,2\n", encoding="utf-8")
    with pytest.raises(ExportError):
        read_schedule_csv(path)
