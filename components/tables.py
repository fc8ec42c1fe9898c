"""格式化表格组件"""
import pandas as pd
import streamlit as st


def format_schedule_table(schedule: pd.DataFrame) -> pd.DataFrame:
    """列重命名并把金额列格式化为两位小数"""
    col_map = {
        "month": "Month",
        "payment": "Payment",
        "interest": "Interest",
        "principal": "Principal",
        "balance": "Balance",
    }
    display_cols = [c for c in col_map if c in schedule.columns]
    display_df = schedule[display_cols].rename(columns=col_map)

    for col in ["Payment", "Interest", "Principal", "Balance"]:
        if col in display_df.columns:
            display_df[col] = display_df[col].apply(lambda x: f"{x:,.2f}")
    return display_df


def render_schedule_table(schedule: pd.DataFrame, show_all: bool = False):
    """渲染摊还计划表格"""
    if schedule.empty:
        st.info("No payments for a zero-year term.")
        return

    display_df = format_schedule_table(schedule)
    if not show_all and len(display_df) > 24:
        st.dataframe(display_df, width='stretch', height=600, hide_index=True)
    else:
        st.dataframe(display_df, width='stretch', hide_index=True)
