"""核心计算：固定利率等额还款的月供与摊还计划"""
import logging
from pathlib import Path

import pandas as pd

from config.constants import SCHEDULE_COLUMNS
from config.settings import AMOUNT_PRECISION
from core.report import render_report, save_report

_LOG = logging.getLogger(__name__)


def number_of_payments(term_years: int) -> int:
    """还款总期数 = 12 * 年限"""
    return 12 * term_years


def calc_term_factor(annual_rate: float, term_years: int) -> float:
    """复利因子 (1 + r/12) ^ (12 * n)，零期限时为 1"""
    if term_years == 0:
        return 1.0
    return (1 + annual_rate / 12.0) ** number_of_payments(term_years)


def calc_monthly_payment(
    principal: float,
    annual_rate: float,
    term_years: int,
) -> float:
    """等额月供；零期限返回 0，零利率按本金平摊"""
    if term_years == 0:
        return 0.0
    if annual_rate == 0:
        return principal / number_of_payments(term_years)
    term = calc_term_factor(annual_rate, term_years)
    if term - 1 <= 0:
        # 利率过小，复利因子舍入为 1
        return principal / number_of_payments(term_years)
    return principal * annual_rate / 12.0 * term / (term - 1)


def generate_schedule(
    principal: float,
    annual_rate: float,
    term_years: int,
    monthly_payment: float | None = None,
) -> pd.DataFrame:
    """生成摊还计划表

    每期利息、本金、余额按分取整，余额逐期沿用取整后的值；
    最后一期的本金取剩余余额，吸收全部尾差，余额恰好归零。
    月供列保留未取整的固定月供（最后一期除外）。
    """
    if monthly_payment is None:
        monthly_payment = calc_monthly_payment(principal, annual_rate, term_years)

    months = number_of_payments(term_years)
    r = annual_rate / 12.0
    balance = round(principal, AMOUNT_PRECISION)
    records = []

    for month in range(1, months + 1):
        interest = round(r * balance, AMOUNT_PRECISION)
        if month != months:
            prin = round(monthly_payment - interest, AMOUNT_PRECISION)
            payment = monthly_payment
        else:
            # 最后一期尾差调整
            prin = balance
            payment = round(balance + interest, AMOUNT_PRECISION)

        balance = round(balance - prin, AMOUNT_PRECISION)

        records.append({
            "month": month,
            "payment": payment,
            "interest": interest,
            "principal": prin,
            "balance": balance,
        })

    return pd.DataFrame(records, columns=SCHEDULE_COLUMNS)


def summarize_schedule(schedule: pd.DataFrame) -> dict:
    """汇总：总还款、总利息、总本金、期数"""
    if schedule.empty:
        return {
            "total_payment": 0.0,
            "total_interest": 0.0,
            "total_principal": 0.0,
            "number_of_payments": 0,
        }
    return {
        "total_payment": float(schedule["payment"].sum()),
        "total_interest": float(schedule["interest"].sum()),
        "total_principal": float(schedule["principal"].sum()),
        "number_of_payments": len(schedule),
    }


def _check_non_negative(name: str, value) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value!r}")


class LoanAmortization:
    """一笔贷款的参数与摊还报告

    月供在构造或修改参数时计算，调用方不可直接设置。
    报告渲染使用局部余额，多次调用结果一致。
    """

    def __init__(self, principal: float, annual_rate: float, term_years: int):
        _check_non_negative("principal", principal)
        _check_non_negative("annual_rate", annual_rate)
        _check_non_negative("term_years", term_years)
        self._principal = float(principal)
        self._annual_rate = float(annual_rate)
        self._term_years = int(term_years)
        self._current_balance = self._principal
        self._calc_payment()

    def __repr__(self) -> str:
        return (
            f"LoanAmortization(principal={self._principal!r}, "
            f"annual_rate={self._annual_rate!r}, term_years={self._term_years!r})"
        )

    def _calc_payment(self) -> None:
        self._term_factor = calc_term_factor(self._annual_rate, self._term_years)
        self._monthly_payment = calc_monthly_payment(
            self._principal, self._annual_rate, self._term_years,
        )
        _LOG.debug(
            "Monthly payment %.6f for principal=%s rate=%s years=%s",
            self._monthly_payment, self._principal, self._annual_rate, self._term_years,
        )

    @property
    def principal(self) -> float:
        return self._principal

    @property
    def annual_rate(self) -> float:
        return self._annual_rate

    @property
    def term_years(self) -> int:
        return self._term_years

    @property
    def monthly_payment(self) -> float:
        return self._monthly_payment

    @property
    def term_factor(self) -> float:
        return self._term_factor

    @property
    def current_balance(self) -> float:
        """最近一次保存报告后的余额；未保存时等于本金"""
        return self._current_balance

    def update(
        self,
        principal: float | None = None,
        annual_rate: float | None = None,
        term_years: int | None = None,
    ) -> None:
        """修改贷款参数并重新计算月供，余额重置为本金"""
        if principal is not None:
            _check_non_negative("principal", principal)
            self._principal = float(principal)
        if annual_rate is not None:
            _check_non_negative("annual_rate", annual_rate)
            self._annual_rate = float(annual_rate)
        if term_years is not None:
            _check_non_negative("term_years", term_years)
            self._term_years = int(term_years)
        self._current_balance = self._principal
        self._calc_payment()

    def number_of_payments(self) -> int:
        return number_of_payments(self._term_years)

    def schedule(self) -> pd.DataFrame:
        return generate_schedule(
            self._principal, self._annual_rate, self._term_years,
            monthly_payment=self._monthly_payment,
        )

    def generate_report(self) -> str:
        """返回报告文本，不修改任何字段"""
        return render_report(self._monthly_payment, self.schedule())

    def save_report(self, path) -> Path:
        """写入报告文件（覆盖），写入成功后余额记为还清后的余额"""
        schedule = self.schedule()
        target = save_report(render_report(self._monthly_payment, schedule), path)
        if not schedule.empty:
            self._current_balance = float(schedule["balance"].iloc[-1])
        return target

    def clear(self) -> None:
        """清空所有数据，不重新计算"""
        self._principal = 0.0
        self._annual_rate = 0.0
        self._current_balance = 0.0
        self._term_factor = 0.0
        self._monthly_payment = 0.0
        self._term_years = 0
