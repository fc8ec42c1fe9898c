import os
from pathlib import Path

# 项目根目录
PROJECT_ROOT = Path(__file__).parent.parent

# 报告输出文件
DEFAULT_REPORT_NAME = "LoanAmortization.txt"
REPORT_FILE = Path(os.getenv("LOAN_REPORT_FILE", DEFAULT_REPORT_NAME))

# 表单默认值
DEFAULT_LOAN_AMOUNT = 200000.0
DEFAULT_ANNUAL_RATE = 0.05
DEFAULT_TERM_YEARS = 30

# 输入上限
MAX_ANNUAL_RATE = 1.0
MAX_TERM_YEARS = 50

# 日志
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# 页面配置
PAGE_TITLE = "Loan Amortization Report"
PAGE_ICON = "🏦"
LAYOUT = "wide"

# 图表配色
COLORS = {
    "primary": "#1f77b4",
    "danger": "#d62728",
    "principal": "#1f77b4",
    "interest": "#ff7f0e",
    "balance": "#2ca02c",
}

# 金额精度
AMOUNT_PRECISION = 2
