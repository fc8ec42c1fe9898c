"""贷款摊还报告 - 主入口"""
import streamlit as st

from components.charts import create_balance_line, create_stacked_area, create_principal_interest_pie
from components.forms import render_loan_form
from components.metrics import render_loan_metrics
from components.tables import render_schedule_table
from config.constants import MSG_REPORT_SAVED
from config.settings import PAGE_TITLE, PAGE_ICON, LAYOUT, REPORT_FILE
from core.amortization import LoanAmortization, summarize_schedule
from data_manager.data_validator import validate_loan_inputs

st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout=LAYOUT,
)

st.title(f"{PAGE_ICON} {PAGE_TITLE}")

form_data = render_loan_form()
if form_data is not None:
    ok, msg = validate_loan_inputs(**form_data)
    if not ok:
        st.error(msg)
        st.stop()
    st.session_state["loan_inputs"] = form_data

loan_inputs = st.session_state.get("loan_inputs")
if loan_inputs is None:
    st.info("Enter the loan amount, annual interest rate and years of the loan, then run the report.")
    st.stop()

loan = LoanAmortization(**loan_inputs)
schedule = loan.schedule()
summary = summarize_schedule(schedule)

render_loan_metrics(loan.principal, loan.annual_rate, loan.monthly_payment, summary)

st.divider()

if not schedule.empty:
    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(create_balance_line(schedule), width='stretch')
    with col2:
        st.plotly_chart(create_stacked_area(schedule), width='stretch')
    st.plotly_chart(
        create_principal_interest_pie(summary["total_principal"], summary["total_interest"]),
        width='stretch',
    )

st.subheader("Amortization Schedule")
show_all = st.checkbox("Show all", value=False)
render_schedule_table(schedule, show_all=show_all)

st.divider()

st.subheader("Report")
report_text = loan.generate_report()
st.code(report_text, language=None)

c1, c2 = st.columns(2)
with c1:
    st.download_button(
        "Download report", data=report_text,
        file_name=REPORT_FILE.name, mime="text/plain",
    )
with c2:
    if st.button("Save report"):
        try:
            target = loan.save_report(REPORT_FILE)
        except OSError as e:
            st.error(f"Could not write {REPORT_FILE}: {e}")
        else:
            st.success(MSG_REPORT_SAVED.format(filename=target))
