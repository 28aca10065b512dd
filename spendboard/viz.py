"""Plotly figures for the dashboard's insight slides."""

from decimal import Decimal
from typing import Dict, List, Sequence, Tuple

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from spendboard.config import CHART_COLORS, CURRENCY_SYMBOL
from spendboard.domain import Expense
from spendboard.utils import round_money, truncate_label

NO_DATA = "No data available"


def _empty_figure(message: str = NO_DATA) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(
        text=message,
        showarrow=False,
        x=0.5,
        y=0.5,
        xref="paper",
        yref="paper",
        font=dict(size=14, color="#64748b"),
    )
    fig.update_layout(margin=dict(l=0, r=0, t=20, b=20))
    return fig


def _money(value: Decimal) -> float:
    return float(round_money(value))


def plot_category_pie(category_totals: Dict[str, Decimal]) -> go.Figure:
    if not category_totals:
        return _empty_figure()

    df = pd.DataFrame(
        [{"category": name, "amount": _money(v)} for name, v in category_totals.items()]
    )
    fig = px.pie(
        df,
        names="category",
        values="amount",
        title="Expenses by Category",
        color_discrete_sequence=CHART_COLORS,
    )
    fig.update_traces(
        textinfo="label+percent",
        hovertemplate=f"%{{label}}: {CURRENCY_SYMBOL}%{{value:.2f}}<extra></extra>",
    )
    fig.update_layout(margin=dict(l=0, r=0, t=40, b=0), showlegend=False)
    return fig


def plot_daily_trend(daily_trend: Sequence[Tuple[str, Decimal]]) -> go.Figure:
    if not daily_trend:
        return _empty_figure()

    df = pd.DataFrame([{"date": key, "amount": _money(v)} for key, v in daily_trend])
    fig = px.line(
        df,
        x="date",
        y="amount",
        markers=True,
        title="Spending Trend",
        labels={"date": "Day", "amount": f"Amount ({CURRENCY_SYMBOL})"},
    )
    fig.update_traces(line=dict(color=CHART_COLORS[0], width=3))
    fig.update_layout(margin=dict(l=0, r=0, t=40, b=0))
    return fig


def plot_top_expenses(top: List[Expense]) -> go.Figure:
    if not top:
        return _empty_figure()

    df = pd.DataFrame(
        [{"name": truncate_label(e.description), "amount": _money(e.amount)} for e in top]
    )
    fig = px.bar(
        df,
        x="amount",
        y="name",
        orientation="h",
        title="Top 5 Expenses",
        labels={"name": "", "amount": f"Amount ({CURRENCY_SYMBOL})"},
    )
    fig.update_traces(marker_color=CHART_COLORS[1])
    # largest first, from the top down
    fig.update_yaxes(autorange="reversed")
    fig.update_layout(margin=dict(l=0, r=0, t=40, b=0))
    return fig


def plot_category_ranking(ranking: Sequence[Tuple[str, Decimal]]) -> go.Figure:
    if not ranking:
        return _empty_figure()

    df = pd.DataFrame([{"category": name, "amount": _money(v)} for name, v in ranking])
    fig = go.Figure()
    fig.add_bar(
        x=df["category"],
        y=df["amount"],
        marker_color=[CHART_COLORS[i % len(CHART_COLORS)] for i in range(len(df))],
    )
    fig.update_layout(
        title="Category Breakdown",
        margin=dict(l=0, r=0, t=40, b=0),
        yaxis_title=f"Amount ({CURRENCY_SYMBOL})",
    )
    return fig
