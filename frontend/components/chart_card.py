"""
Price history chart component.
"""

from typing import List

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from frontend.schemas import PriceData
from frontend.services.utils import chart_y_domain, format_price, hex_to_rgba, sort_by_timestamp


class ChartCard:
    """Area chart of a coin's price history"""

    def __init__(self):
        self.component_name = "Price History"

    @staticmethod
    def build_figure(price_history: List[PriceData], coin_color: str) -> go.Figure:
        """Build the chart for a history, oldest point first.

        The server does not guarantee ordering, so points are sorted by
        timestamp before plotting. The y-axis is padded around the data
        instead of starting at zero.
        """
        ordered = sort_by_timestamp(price_history)
        df = pd.DataFrame(ordered, columns=["coin_id", "timestamp", "price_usd"])
        df["time"] = pd.to_datetime(df["timestamp"], utc=True, format="ISO8601")
        prices = df["price_usd"].tolist()

        fig = go.Figure()
        fig.add_trace(go.Scatter(
            x=df["time"],
            y=prices,
            mode="lines",
            name="Price",
            line=dict(color=coin_color, width=2),
            fill="tozeroy",
            fillcolor=hex_to_rgba(coin_color, 0.15),
            customdata=[format_price(p) for p in prices],
            hovertemplate="Time: %{x|%H:%M:%S}<br>Price: %{customdata}<extra></extra>",
        ))

        fig.update_layout(
            height=300,
            margin=dict(l=10, r=10, t=10, b=10),
            showlegend=False,
            xaxis=dict(title="Time (UTC)", showgrid=True, gridcolor="#374151"),
            yaxis=dict(tickprefix="$", tickformat=",.2f", showgrid=True, gridcolor="#374151"),
        )

        domain = chart_y_domain(prices)
        if domain is not None:
            fig.update_yaxes(range=list(domain))

        return fig

    def render(self, price_history: List[PriceData], time_range: int, loading: bool, coin_color: str):
        """Render the chart card"""
        header_col, range_col = st.columns([3, 1])
        with header_col:
            st.markdown(f"### 📈 {self.component_name}")
        with range_col:
            st.caption(f"{time_range} minutes")

        if loading:
            st.info("Loading chart data...")
            return

        if not price_history:
            st.info("No price data available")
            return

        fig = self.build_figure(price_history, coin_color)
        st.plotly_chart(fig, width='stretch')
