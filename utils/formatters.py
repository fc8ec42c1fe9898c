from config.settings import AMOUNT_PRECISION


def fmt_money(value: float) -> str:
    """固定两位小数，不带千分位：1234.5 -> 1234.50"""
    return f"{value:.{AMOUNT_PRECISION}f}"


def fmt_amount(value: float, symbol: str = "$") -> str:
    """格式化金额：1234567.891 -> $1,234,567.89"""
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.{AMOUNT_PRECISION}f}"


def fmt_rate(value: float) -> str:
    """格式化小数利率：0.0525 -> 5.25%"""
    return f"{value * 100:.2f}%"


def fmt_months(months: int) -> str:
    """格式化月数：36 -> 3 years, 18 -> 1 year 6 months"""
    years = months // 12
    remain = months % 12
    parts = []
    if years:
        parts.append(f"{years} year" + ("s" if years != 1 else ""))
    if remain or not years:
        parts.append(f"{remain} month" + ("s" if remain != 1 else ""))
    return " ".join(parts)
