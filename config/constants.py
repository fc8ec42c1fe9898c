# 报告格式
REPORT_PAYMENT_LINE = "Monthly Payment: ${payment}"
REPORT_COLUMNS_LINE = "Month\tInterest\tPrincipal\tBalance"
REPORT_SEPARATOR = "-" * 47
REPORT_ROW = "{month}\t{interest}\t\t{principal}\t\t{balance}"

# 列定义
SCHEDULE_COLUMNS = ["month", "payment", "interest", "principal", "balance"]

# 交互提示
PROMPT_LOAN_AMOUNT = "Enter the loan amount"
PROMPT_ANNUAL_RATE = "Enter the annual interest rate"
PROMPT_TERM_YEARS = "Enter the years of the loan"
PROMPT_INVALID_PREFIX = "Invalid amount."
PROMPT_RUN_AGAIN = "Would you like to run another report? Enter Y for yes or N for no"
MSG_REPORT_SAVED = "Report saved to the file {filename}."
