"""
Latest price card component.
"""

from typing import List, Optional

import streamlit as st

from frontend.schemas import PriceData
from frontend.services.utils import format_change, format_price, format_time, percent_change


class PriceCard:
    """Current price with the change over the displayed history"""

    def render(self, coin_name: str, latest_price: Optional[PriceData], price_history: List[PriceData]):
        price_change = percent_change(price_history)
        trend_icon = "📈" if price_change >= 0 else "📉"

        st.markdown(f"### 💲 {coin_name} Price")

        st.metric(
            label=f"{trend_icon} Current price",
            value=format_price(latest_price["price_usd"]) if latest_price else "Loading...",
            delta=format_change(price_change),
            delta_color="normal",
        )

        updated = format_time(latest_price["timestamp"]) if latest_price else "N/A"
        st.caption(f"Last updated: {updated}")
