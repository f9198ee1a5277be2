"""
Window aggregate panels for the analytics page.
"""

from typing import Optional

import streamlit as st

from frontend.schemas import AveragePriceData, PriceData, PriceRangeData, TrendData, VolatilityData
from frontend.services.utils import format_datetime, format_price, trend_class

TREND_ICONS = {'positive': '🟢', 'negative': '🔴', 'neutral': '⚪'}


def _price(value: float) -> str:
    return format_price(value, max_digits=2)


class AnalyticsPanels:
    """Metric cards for average, range, volatility, trend and point lookups"""

    def render_average(self, data: Optional[AveragePriceData]):
        if not data:
            return
        st.markdown("#### Average Price")
        st.metric("Average Price", _price(data['average']))
        st.caption(f"Data points: {data['data_points']}")

    def render_range(self, data: Optional[PriceRangeData]):
        if not data:
            return
        st.markdown("#### Price Range")
        col1, col2 = st.columns(2)
        with col1:
            st.metric("Minimum", _price(data['min']))
        with col2:
            st.metric("Maximum", _price(data['max']))

    def render_volatility(self, data: Optional[VolatilityData], title: str = "Volatility Analysis"):
        if not data:
            return
        st.markdown(f"#### {title}")
        col1, col2 = st.columns(2)
        with col1:
            st.metric("Standard Deviation", _price(data['stddev_price']))
        with col2:
            st.metric("Mean Price", _price(data['mean_price']))
        if 'data_points' in data:
            st.caption(f"Data points: {data['data_points']}")

    def render_trend(self, data: Optional[TrendData], title: str = "Trend Analysis"):
        if not data:
            return
        st.markdown(f"#### {title}")
        icon = TREND_ICONS[trend_class(data['trend'])]
        col1, col2 = st.columns(2)
        with col1:
            st.metric("Trend Direction", f"{icon} {data['trend']}")
        with col2:
            st.metric("Slope", f"{data['slope']:.6f}")
        if 'data_points' in data:
            st.caption(f"Data points: {data['data_points']}")

    def render_price_at_time(self, data: Optional[PriceData]):
        if not data:
            return
        st.write(f"Price: {_price(data['price_usd'])}")
        st.write(f"Time: {format_datetime(data['timestamp'])}")
