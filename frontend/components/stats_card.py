"""
History statistics component.
"""

from typing import List

import streamlit as st

from frontend.schemas import PriceData
from frontend.services.utils import format_price, summarize_prices


class StatsCard:
    """Data points, high, low and average of the displayed history"""

    def render(self, price_history: List[PriceData]):
        st.markdown("### 📊 Statistics")

        stats = summarize_prices(price_history)
        has_data = stats.count > 0

        col1, col2 = st.columns(2)
        with col1:
            st.metric("Data Points", stats.count)
            st.metric("High", format_price(stats.high) if has_data else "N/A")
        with col2:
            st.metric("Low", format_price(stats.low) if has_data else "N/A")
            st.metric("Average", format_price(stats.average) if has_data else "N/A")
