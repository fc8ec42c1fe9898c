"""报告渲染与写入测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from core.amortization import LoanAmortization, generate_schedule
from core.report import render_report, save_report

HEADER = (
    "Month\tInterest\tPrincipal\tBalance\n"
    "-----------------------------------------------\n"
)


class TestRenderReport:
    def test_zero_rate_layout(self):
        text = LoanAmortization(1200, 0, 1).generate_report()
        lines = text.split("\n")
        assert lines[0] == "Monthly Payment: $100.00"
        assert lines[1] == "Month\tInterest\tPrincipal\tBalance"
        assert lines[2] == "-" * 47
        assert lines[3] == "1\t0.00\t\t100.00\t\t1100.00"
        assert lines[14] == "12\t0.00\t\t100.00\t\t0.00"
        assert lines[15] == ""
        assert len(lines) == 16

    def test_standard_loan(self):
        text = LoanAmortization(10000, 0.06, 1).generate_report()
        lines = text.splitlines()
        assert lines[0] == "Monthly Payment: $860.66"
        assert lines[3] == "1\t50.00\t\t810.66\t\t9189.34"
        assert len(lines) == 3 + 12
        assert lines[-1].startswith("12\t")
        assert lines[-1].endswith("\t\t0.00")

    @pytest.mark.parametrize("principal, rate, years", [
        (200000, 0.05, 30), (250000, 0.0425, 30), (99999.99, 0.0899, 15), (10000, 0.06, 1),
    ])
    def test_rendered_principal_sums_to_principal(self, principal, rate, years):
        text = LoanAmortization(principal, rate, years).generate_report()
        rows = [line.split("\t") for line in text.splitlines()[3:]]
        assert len(rows) == 12 * years
        total = sum(float(r[3]) for r in rows)
        assert abs(total - principal) <= 0.01
        assert rows[-1][5] == "0.00"

    def test_no_thousands_separator(self):
        text = render_report(1234567.891, generate_schedule(0, 0, 0))
        assert text == "Monthly Payment: $1234567.89\n" + HEADER

    def test_after_clear(self):
        loan = LoanAmortization(10000, 0.06, 1)
        loan.clear()
        assert loan.generate_report() == "Monthly Payment: $0.00\n" + HEADER

    def test_zero_term(self):
        assert LoanAmortization(5000, 0.05, 0).generate_report() == (
            "Monthly Payment: $0.00\n" + HEADER
        )


class TestSaveReport:
    def test_writes_and_overwrites(self, tmp_path):
        target = tmp_path / "LoanAmortization.txt"
        target.write_text("old content that is longer than the new one " * 10)
        save_report("new\n", target)
        assert target.read_text() == "new\n"

    def test_no_newline_translation(self, tmp_path):
        target = save_report("a\nb\n", tmp_path / "r.txt")
        assert target.read_bytes() == b"a\nb\n"

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(OSError):
            save_report("x", tmp_path / "missing" / "r.txt")

    def test_loan_save_matches_text(self, standard_loan, report_path):
        loan = standard_loan
        target = loan.save_report(report_path)
        assert target.read_text(encoding="utf-8") == loan.generate_report()

    def test_failed_save_keeps_balance(self, tmp_path):
        loan = LoanAmortization(10000, 0.06, 1)
        with pytest.raises(OSError):
            loan.save_report(tmp_path / "missing" / "r.txt")
        assert loan.current_balance == 10000.0
