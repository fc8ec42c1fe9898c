"""表单组件"""
import streamlit as st

from config.settings import (
    DEFAULT_LOAN_AMOUNT, DEFAULT_ANNUAL_RATE, DEFAULT_TERM_YEARS,
    MAX_ANNUAL_RATE, MAX_TERM_YEARS,
)


def render_loan_form(key_prefix: str = "loan") -> dict | None:
    """渲染贷款参数表单，返回表单数据 dict 或 None（未提交）"""
    with st.form(f"{key_prefix}_form"):
        c1, c2, c3 = st.columns(3)
        with c1:
            principal = st.number_input(
                "Loan amount", min_value=0.0, value=DEFAULT_LOAN_AMOUNT,
                step=1000.0, format="%.2f", key=f"{key_prefix}_principal")
        with c2:
            annual_rate = st.number_input(
                "Annual interest rate (0.05 = 5%)", min_value=0.0,
                max_value=MAX_ANNUAL_RATE, value=DEFAULT_ANNUAL_RATE,
                step=0.0025, format="%.4f", key=f"{key_prefix}_rate")
        with c3:
            term_years = st.number_input(
                "Years of the loan", min_value=0, max_value=MAX_TERM_YEARS,
                value=DEFAULT_TERM_YEARS, step=1, key=f"{key_prefix}_years")

        submitted = st.form_submit_button("Run report", width='stretch', type="primary")

        if submitted:
            return {
                "principal": float(principal),
                "annual_rate": float(annual_rate),
                "term_years": int(term_years),
            }
    return None
