import sys
import pytest
from pathlib import Path

# 确保项目根目录在 sys.path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from core.amortization import LoanAmortization


@pytest.fixture
def standard_loan():
    """1万, 6%, 1年"""
    return LoanAmortization(10000, 0.06, 1)


@pytest.fixture
def report_path(tmp_path):
    return tmp_path / "LoanAmortization.txt"
