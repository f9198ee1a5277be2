"""
ML price prediction card component.
"""

from typing import Optional

import streamlit as st

from frontend.schemas import PredictData
from frontend.services.utils import format_datetime, format_price, trend_class

TREND_ICONS = {'positive': '🟢', 'negative': '🔴', 'neutral': '⚪'}


class PredictionCard:
    """Forecast price, 95% range and trend from the backend regression"""

    def render(self, prediction: Optional[PredictData], loading: bool = False, error: str = ""):
        if loading:
            st.info("Predicting…")
            return

        if error:
            st.warning(error)

        if not prediction:
            return

        icon = TREND_ICONS[trend_class(prediction['trend'])]

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Predicted price", format_price(prediction['predicted_price'], max_digits=2))
        with col2:
            st.metric(
                "95% range",
                f"{format_price(prediction['price_low'], max_digits=2)} – "
                f"{format_price(prediction['price_high'], max_digits=2)}",
            )
        with col3:
            st.metric("Trend", f"{icon} {prediction['trend']}")

        st.caption(
            f"By {format_datetime(prediction['horizon_end_time'])} · "
            f"{prediction['data_points']} points"
        )
