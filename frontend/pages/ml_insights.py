"""ML insights page: backend forecast, trend/volatility/momentum signals, AI query."""

import streamlit as st

from frontend.components import AnalyticsPanels, ChatPanel, MoverList, PredictionCard
from frontend.presets import COINS, HORIZONS
from frontend.runtime import get_controller, request_input_reset, run_async
from frontend.services.utils import time_range_presets
from frontend.state.ml_insights import MLInsightsController


class MLInsightsPage:
    CONTROLLER_KEY = "ml_controller"
    CHAT_KEY = "ml_chat"

    def __init__(self):
        self.prediction_card = PredictionCard()
        self.panels = AnalyticsPanels()
        self.mover_list = MoverList()
        self.chat_panel = ChatPanel()

    def render(self):
        controller: MLInsightsController = get_controller(self.CONTROLLER_KEY, MLInsightsController)

        st.markdown("# 🧠 ML Insights")
        st.caption(
            "Backend ML predicts future price and range from linear regression on history. "
            "Plus trend, volatility, momentum & AI query."
        )

        if not controller.loaded:
            run_async(controller.load())

        self._render_prediction(controller)
        st.markdown("---")
        self._render_signal_controls(controller)
        self._render_signals(controller)
        st.markdown("---")
        self._render_ai_query(controller)

    def _render_prediction(self, controller: MLInsightsController):
        st.markdown("### 🎯 ML Price Prediction")

        horizon_values = [minutes for _, minutes in HORIZONS]
        horizon_labels = dict((minutes, label) for label, minutes in HORIZONS)

        col1, col2 = st.columns([3, 1])
        with col1:
            horizon = st.selectbox(
                "Horizon",
                horizon_values,
                index=horizon_values.index(controller.horizon_minutes),
                format_func=lambda minutes: horizon_labels[minutes],
                key="ml_horizon",
            )
        with col2:
            refresh = st.button(
                "Predicting…" if controller.prediction.loading else "Refresh",
                key="ml_prediction_refresh",
                disabled=controller.prediction.loading,
                use_container_width=True,
            )

        if horizon != controller.horizon_minutes:
            run_async(controller.set_horizon(horizon))
        elif refresh:
            run_async(controller.load_prediction())

        self.prediction_card.render(
            controller.prediction.data,
            loading=controller.prediction.loading,
            error=controller.prediction.error,
        )

    def _render_signal_controls(self, controller: MLInsightsController):
        coin_ids = [coin.id for coin in COINS]
        if controller.selected_coin not in coin_ids:
            coin_ids.append(controller.selected_coin)

        asset_col, ranges_col = st.columns([1, 3])
        with asset_col:
            coin_id = st.selectbox(
                "Asset",
                coin_ids,
                index=coin_ids.index(controller.selected_coin),
                key="ml_asset",
            )
        if coin_id != controller.selected_coin:
            run_async(controller.select_coin(coin_id))
            st.rerun()

        with ranges_col:
            presets = time_range_presets()
            columns = st.columns(len(presets))
            for i, (column, window) in enumerate(zip(columns, presets)):
                with column:
                    if st.button(window.label, key=f"ml_range_{i}", disabled=controller.signals_loading,
                                 use_container_width=True):
                        run_async(controller.load_signals(window))
                        st.rerun()

    def _render_signals(self, controller: MLInsightsController):
        for panel in (controller.trend, controller.volatility, controller.top_movers):
            if panel.error:
                st.error(panel.error)

        if controller.signals_loading:
            st.info("Loading signals…")
            return

        if not controller.has_signals:
            return

        col1, col2 = st.columns(2)
        with col1:
            self.panels.render_trend(controller.trend.data, title="📈 Trend Signal")
        with col2:
            self.panels.render_volatility(controller.volatility.data, title="📉 Volatility Index")

        st.markdown("#### ⚡ Momentum (Top Movers)")
        self.mover_list.render(controller.top_movers.data or [], limit=8)

    def _render_ai_query(self, controller: MLInsightsController):
        st.markdown("### 💬 AI Query")
        question = self.chat_panel.render(
            controller.chat.transcript,
            controller.chat.loading,
            placeholder="e.g. What was Bitcoin price at 2024-01-15 12:00?",
            empty_hint="Ask a question about historical prices.",
            key=self.CHAT_KEY,
        )
        if question:
            if run_async(controller.ask(question)):
                request_input_reset(f"{self.CHAT_KEY}_question")
            st.rerun()
        if self.chat_panel.render_clear(controller.chat.transcript, key=self.CHAT_KEY):
            controller.chat.transcript.clear()
            st.rerun()
