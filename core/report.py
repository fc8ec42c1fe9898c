"""摊还报告：文本渲染与写入文件"""
import logging
from pathlib import Path

import pandas as pd

from config.constants import (
    REPORT_PAYMENT_LINE, REPORT_COLUMNS_LINE, REPORT_SEPARATOR, REPORT_ROW,
)
from utils.formatters import fmt_money

_LOG = logging.getLogger(__name__)


def render_report(monthly_payment: float, schedule: pd.DataFrame) -> str:
    """按固定格式渲染报告，每行以换行结尾"""
    lines = [
        REPORT_PAYMENT_LINE.format(payment=fmt_money(monthly_payment)),
        REPORT_COLUMNS_LINE,
        REPORT_SEPARATOR,
    ]
    for row in schedule.itertuples(index=False):
        lines.append(REPORT_ROW.format(
            month=int(row.month),
            interest=fmt_money(row.interest),
            principal=fmt_money(row.principal),
            balance=fmt_money(row.balance),
        ))
    return "\n".join(lines) + "\n"


def save_report(text: str, path) -> Path:
    """一次性写入报告（覆盖已有内容），I/O 错误直接抛给调用方"""
    target = Path(path)
    with open(target, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    _LOG.info("Wrote amortization report to %s", target)
    return target
