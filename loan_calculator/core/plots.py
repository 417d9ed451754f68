from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from .utils import currency


def payment_breakdown_pie(
    principal: float,
    total_interest: float,
    title: str = "Payment Breakdown",
    symbol: str = "$",
) -> go.Figure:
    labels = [
        f"Principal ({currency(principal, symbol)})",
        f"Interest ({currency(total_interest, symbol)})",
    ]
    fig = go.Figure(go.Pie(labels=labels, values=[principal, total_interest], sort=False))
    fig.update_layout(title=title, showlegend=True)
    return fig


def balance_curve(schedule: pd.DataFrame, title: str = "Remaining balance", symbol: str = "$") -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=schedule["month"], y=schedule["balance"], mode="lines", name="Balance"))
    fig.add_trace(
        go.Scatter(x=schedule["month"], y=schedule["total_interest"], mode="lines", name="Total interest")
    )
    fig.update_layout(title=title, xaxis_title="Month", yaxis_title=symbol)
    return fig
