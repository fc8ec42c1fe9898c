from typing import Tuple

from config.settings import MAX_ANNUAL_RATE, MAX_TERM_YEARS


def validate_loan_amount(amount: float) -> Tuple[bool, str]:
    """校验贷款金额，返回 (是否合法, 错误信息)"""
    if amount < 0:
        return False, "Invalid amount. The loan amount must not be negative."
    return True, ""


def validate_annual_rate(annual_rate: float) -> Tuple[bool, str]:
    """校验年利率（小数形式，如 0.05 表示 5%）"""
    if annual_rate < 0:
        return False, "Invalid amount. The annual interest rate must not be negative."
    if annual_rate >= MAX_ANNUAL_RATE:
        return False, (
            "Invalid amount. Enter the annual interest rate as a decimal "
            "fraction, e.g. 0.05 for 5%."
        )
    return True, ""


def validate_term_years(term_years: int) -> Tuple[bool, str]:
    if term_years < 0:
        return False, "Invalid amount. The years of the loan must not be negative."
    if term_years > MAX_TERM_YEARS:
        return False, f"Invalid amount. The loan term cannot exceed {MAX_TERM_YEARS} years."
    return True, ""


def validate_loan_inputs(
    principal: float,
    annual_rate: float,
    term_years: int,
) -> Tuple[bool, str]:
    """依次校验三个输入，返回第一个错误"""
    for ok, msg in (
        validate_loan_amount(principal),
        validate_annual_rate(annual_rate),
        validate_term_years(term_years),
    ):
        if not ok:
            return False, msg
    return True, ""


def wants_another_report(answer: str) -> bool:
    """首字母为 Y/y 表示继续"""
    answer = (answer or "").strip()
    return answer[:1].lower() == "y"
