"""Plotly 图表工厂"""
import plotly.graph_objects as go
import plotly.express as px
import pandas as pd

import plotly.io as pio
from config.settings import COLORS

# 自定义 Plotly 主题
pio.templates["amortization_light"] = go.layout.Template(
    layout=go.Layout(
        font=dict(family="sans-serif", color="#333"),
        title_font=dict(size=20, color="#333"),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(gridcolor="#e0e0e0", linecolor="#e0e0e0", zerolinecolor="#e0e0e0"),
        yaxis=dict(gridcolor="#e0e0e0", linecolor="#e0e0e0", zerolinecolor="#e0e0e0"),
        colorway=px.colors.qualitative.Plotly,
    )
)

pio.templates.default = "amortization_light"

_XAXIS = dict(tickmode="auto", nticks=15)


def create_balance_line(schedule: pd.DataFrame, template: str = "amortization_light") -> go.Figure:
    """剩余余额下降曲线"""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=schedule["month"],
        y=schedule["balance"],
        mode="lines",
        name="Balance",
        fill="tozeroy",
        line=dict(color=COLORS["balance"], width=2),
        fillcolor="rgba(44, 160, 44, 0.15)",
        hovertemplate="Month %{x}<br>Balance: $%{y:,.2f}<extra></extra>",
    ))
    fig.update_layout(
        title="Remaining Balance",
        xaxis_title="Month",
        yaxis_title="Amount ($)",
        hovermode="x unified",
        margin=dict(t=60, b=60, l=60, r=20),
        height=400,
        xaxis=_XAXIS,
        template=template,
    )
    return fig


def create_stacked_area(schedule: pd.DataFrame, template: str = "amortization_light") -> go.Figure:
    """每期本金/利息构成堆叠面积图"""
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=schedule["month"],
        y=schedule["principal"],
        mode="lines",
        name="Principal",
        stackgroup="payment",
        line=dict(color=COLORS["principal"]),
        hovertemplate="Month %{x}<br>Principal: $%{y:,.2f}<extra></extra>",
    ))

    fig.add_trace(go.Scatter(
        x=schedule["month"],
        y=schedule["interest"],
        mode="lines",
        name="Interest",
        stackgroup="payment",
        line=dict(color=COLORS["interest"]),
        hovertemplate="Month %{x}<br>Interest: $%{y:,.2f}<extra></extra>",
    ))

    fig.update_layout(
        title="Principal / Interest per Payment",
        xaxis_title="Month",
        yaxis_title="Amount ($)",
        hovermode="x unified",
        margin=dict(t=60, b=60, l=60, r=20),
        height=400,
        xaxis=_XAXIS,
        template=template,
    )
    return fig


def create_principal_interest_pie(
    total_principal: float,
    total_interest: float,
    template: str = "amortization_light",
) -> go.Figure:
    """总还款中本金与利息占比"""
    fig = go.Figure(data=[go.Pie(
        labels=["Principal", "Interest"],
        values=[total_principal, total_interest],
        hole=0.45,
        marker_colors=[COLORS["principal"], COLORS["interest"]],
        textinfo="label+percent",
        textposition="outside",
    )])
    fig.update_layout(
        title="Total Cost Breakdown",
        showlegend=True,
        margin=dict(t=60, b=20, l=20, r=20),
        height=400,
        template=template,
    )
    return fig
