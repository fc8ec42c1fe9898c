"""命令行测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from click.testing import CliRunner

from cli import cli
from core.amortization import LoanAmortization


@pytest.fixture
def runner():
    return CliRunner()


class TestReportCommand:
    def test_single_run(self, runner, report_path):
        output = report_path
        result = runner.invoke(cli, ["report", "--output", str(output)], input="1200\n0\n1\nn\n")
        assert result.exit_code == 0, result.output
        assert f"Report saved to the file {output}." in result.output
        assert output.read_text() == LoanAmortization(1200, 0, 1).generate_report()

    def test_reprompts_invalid_values(self, runner, tmp_path):
        output = tmp_path / "r.txt"
        result = runner.invoke(
            cli, ["report", "-o", str(output)],
            input="-5\n10000\n-0.06\n0.06\n-1\n1\nN\n",
        )
        assert result.exit_code == 0, result.output
        assert "Invalid amount. Enter the loan amount" in result.output
        assert "Invalid amount. Enter the annual interest rate" in result.output
        assert "Invalid amount. Enter the years of the loan" in result.output
        assert output.read_text().startswith("Monthly Payment: $860.66\n")

    def test_explains_rejected_rate(self, runner, tmp_path):
        output = tmp_path / "r.txt"
        result = runner.invoke(
            cli, ["report", "-o", str(output)],
            input="10000\n5\n0.05\n1\nn\n",
        )
        assert result.exit_code == 0, result.output
        assert "e.g. 0.05 for 5%" in result.output
        assert "Invalid amount. Enter the annual interest rate" in result.output

    def test_runs_again_on_yes(self, runner, tmp_path):
        output = tmp_path / "r.txt"
        result = runner.invoke(
            cli, ["report", "-o", str(output)],
            input="1200\n0\n1\nY\n10000\n0.06\n1\nno\n",
        )
        assert result.exit_code == 0, result.output
        assert result.output.count("Report saved to the file") == 2
        # 第二次覆盖第一次
        assert output.read_text() == LoanAmortization(10000, 0.06, 1).generate_report()

    def test_unwritable_output(self, runner, tmp_path):
        output = tmp_path / "missing" / "r.txt"
        result = runner.invoke(cli, ["report", "-o", str(output)], input="1200\n0\n1\nn\n")
        assert result.exit_code == 1
        assert "Could not open file" in result.output


class TestGenerateCommand:
    def test_prints_report(self, runner):
        result = runner.invoke(cli, ["generate", "--principal", "10000", "--annual-rate", "0.06", "--years", "1"])
        assert result.exit_code == 0, result.output
        assert result.output == LoanAmortization(10000, 0.06, 1).generate_report()

    def test_writes_file(self, runner, tmp_path):
        output = tmp_path / "out.txt"
        result = runner.invoke(cli, [
            "generate", "--principal", "1200", "--annual-rate", "0", "--years", "1", "-o", str(output),
        ])
        assert result.exit_code == 0, result.output
        assert output.read_text().startswith("Monthly Payment: $100.00\n")

    def test_rejects_negative(self, runner):
        result = runner.invoke(cli, ["generate", "--principal=-5", "--annual-rate", "0.06", "--years", "1"])
        assert result.exit_code == 2
        assert "Invalid amount." in result.output


class TestPaymentAndSchedule:
    def test_payment(self, runner):
        result = runner.invoke(cli, ["payment", "--principal", "10000", "--annual-rate", "0.06", "--years", "1"])
        assert result.exit_code == 0, result.output
        assert "Monthly payment: 860.66" in result.output
        assert "Number of payments: 12" in result.output
        total_interest = float(result.output.split("Total interest: ")[1].split()[0])
        assert 327.9 < total_interest < 328.1

    def test_schedule_csv(self, runner):
        result = runner.invoke(cli, ["schedule", "--principal", "1200", "--annual-rate", "0", "--years", "1"])
        assert result.exit_code == 0, result.output
        lines = result.output.strip().splitlines()
        assert lines[0] == "month,payment,interest,principal,balance"
        assert len(lines) == 13
        assert lines[-1] == "12,100.0,0.0,100.0,0.0"
