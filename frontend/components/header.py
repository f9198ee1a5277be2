"""
Dashboard header with the history range selector.
"""

import streamlit as st

from frontend.services.utils import get_time_ranges


class Header:

    def render(self, time_range: int) -> int:
        """Render the header; returns the chosen history range in minutes"""
        title_col, range_col = st.columns([3, 1])
        with title_col:
            st.markdown("# 📊 Crypto Dashboard")

        ranges = get_time_ranges()
        minutes = [value for _, value in ranges]
        labels = dict((value, label) for label, value in ranges)
        try:
            index = minutes.index(time_range)
        except ValueError:
            index = minutes.index(60)

        with range_col:
            selected = st.selectbox(
                "🕒 Time range",
                minutes,
                index=index,
                format_func=lambda value: labels[value],
                key="dashboard_time_range",
            )
        return selected
