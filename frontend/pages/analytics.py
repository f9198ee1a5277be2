"""Analytics page: window aggregates, point lookups, movers and the assistant."""

from datetime import datetime

import streamlit as st

from frontend.components import AnalyticsPanels, ChatPanel, CoinManagerPanel, CoinSelector, MoverList
from frontend.presets import COINS
from frontend.runtime import get_controller, request_input_reset, run_async
from frontend.services.utils import time_range_presets
from frontend.state.analytics import AnalyticsController
from frontend.state.coin_manager import CoinManagerController


class AnalyticsPage:
    CONTROLLER_KEY = "analytics_controller"
    COIN_MANAGER_KEY = "analytics_coin_manager"
    CHAT_KEY = "analytics_chat"

    def __init__(self):
        self.coin_selector = CoinSelector()
        self.coin_manager_panel = CoinManagerPanel()
        self.panels = AnalyticsPanels()
        self.mover_list = MoverList()
        self.chat_panel = ChatPanel()

    def render(self):
        controller: AnalyticsController = get_controller(self.CONTROLLER_KEY, AnalyticsController)

        st.markdown("# 🔬 Analytics")
        st.caption("Historical averages, ranges, volatility, trends & price lookups")

        self._render_coin_controls(controller)

        if not controller.top_movers_loaded:
            run_async(controller.refresh_top_movers())

        for error in controller.errors:
            st.error(error)

        col1, col2 = st.columns(2)
        with col1:
            self._render_time_range_section(controller)
        with col2:
            self._render_price_at_time_section(controller)

        st.markdown("---")

        col3, col4 = st.columns(2)
        with col3:
            self.panels.render_average(controller.average.data)
            self.panels.render_volatility(controller.volatility.data)
        with col4:
            self.panels.render_range(controller.price_range.data)
            self.panels.render_trend(controller.trend.data)

        st.markdown("---")
        self._render_top_movers(controller)

        st.markdown("---")
        self._render_assistant(controller)

        if controller.loading:
            st.info("Loading analytics data...")

    def _render_coin_controls(self, controller: AnalyticsController):
        selector_col, toggle_col = st.columns([5, 1])
        with selector_col:
            clicked = self.coin_selector.render(COINS, controller.selected_coin, key="analytics_coin")
        with toggle_col:
            label = "Hide Coins" if controller.show_coin_manager else "Show Coins"
            if st.button(label, key="analytics_toggle_coins", use_container_width=True):
                controller.toggle_coin_manager()
                st.rerun()

        if clicked:
            run_async(controller.select_coin(clicked))
            st.rerun()

        if controller.show_coin_manager:
            coin_manager: CoinManagerController = get_controller(self.COIN_MANAGER_KEY, CoinManagerController)
            if not coin_manager.loaded:
                run_async(coin_manager.refresh())
            picked, refresh = self.coin_manager_panel.render(coin_manager.coins, key="analytics_manager")
            if refresh:
                run_async(coin_manager.refresh())
                st.rerun()
            if picked:
                run_async(controller.select_coin(picked))
                st.rerun()

    def _render_time_range_section(self, controller: AnalyticsController):
        st.markdown("#### Time Range Analysis")
        presets = time_range_presets()
        columns = st.columns(len(presets))
        for i, (column, window) in enumerate(zip(columns, presets)):
            with column:
                if st.button(window.label, key=f"analytics_range_{i}", use_container_width=True):
                    run_async(controller.select_time_range(window))
                    st.rerun()
        if controller.selected_range_label:
            st.caption(f"Selected: {controller.selected_range_label}")

    def _render_price_at_time_section(self, controller: AnalyticsController):
        st.markdown("#### Price at Specific Time")
        with st.form(key="analytics_price_at_form"):
            date_col, time_col = st.columns(2)
            with date_col:
                day = st.date_input("Date", key="analytics_price_at_date")
            with time_col:
                moment = st.time_input("Time", key="analytics_price_at_time", step=60)
            submitted = st.form_submit_button("Get Price")

        if submitted and day and moment:
            run_async(controller.fetch_price_at_time(datetime.combine(day, moment)))
            st.rerun()

        self.panels.render_price_at_time(controller.price_at_time.data)

    def _render_top_movers(self, controller: AnalyticsController):
        header_col, refresh_col = st.columns([5, 1])
        with header_col:
            st.markdown("#### ⚡ Top Movers (Last Hour)")
        with refresh_col:
            if st.button("Refresh", key="analytics_movers_refresh", use_container_width=True):
                run_async(controller.refresh_top_movers())
                st.rerun()
        self.mover_list.render(controller.top_movers.data or [], limit=10)

    def _render_assistant(self, controller: AnalyticsController):
        st.markdown("#### 💬 Assistant")
        question = self.chat_panel.render(
            controller.chat.transcript,
            controller.chat.loading,
            placeholder=f"Ask about {controller.selected_coin} prices...",
            empty_hint=(
                "Ask about prices with natural language. Try: "
                f"“Show {controller.selected_coin} prices for the last 15 minutes”."
            ),
            key=self.CHAT_KEY,
        )
        if question:
            if run_async(controller.ask(question)):
                request_input_reset(f"{self.CHAT_KEY}_question")
            st.rerun()
        if self.chat_panel.render_clear(controller.chat.transcript, key=self.CHAT_KEY):
            controller.chat.transcript.clear()
            st.rerun()
