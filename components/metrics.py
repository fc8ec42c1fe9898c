"""指标卡片组件"""
import streamlit as st

from utils.formatters import fmt_amount, fmt_months, fmt_rate


def render_loan_metrics(
    principal: float,
    annual_rate: float,
    monthly_payment: float,
    summary: dict,
):
    """渲染贷款概览指标"""
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Loan Amount", fmt_amount(principal))
    with c2:
        st.metric("Monthly Payment", fmt_amount(monthly_payment))
    with c3:
        st.metric("Annual Rate", fmt_rate(annual_rate))
    with c4:
        st.metric("Term", fmt_months(summary["number_of_payments"]))

    c5, c6 = st.columns(2)
    with c5:
        st.metric("Total Interest", fmt_amount(summary["total_interest"]))
    with c6:
        st.metric("Total Paid", fmt_amount(summary["total_payment"]))
