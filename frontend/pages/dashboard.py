"""Dashboard page: live price, history chart and statistics for one coin."""

import streamlit as st

from frontend.components import ChartCard, CoinManagerPanel, CoinSelector, Header, PriceCard, StatsCard
from frontend.presets import COINS, DEFAULT_COIN_COLOR, find_coin
from frontend.runtime import get_controller, run_async
from frontend.state.coin_manager import CoinManagerController
from frontend.state.dashboard import DashboardController


class DashboardPage:
    CONTROLLER_KEY = "dashboard_controller"
    COIN_MANAGER_KEY = "dashboard_coin_manager"

    def __init__(self):
        self.header = Header()
        self.coin_selector = CoinSelector()
        self.coin_manager_panel = CoinManagerPanel()
        self.price_card = PriceCard()
        self.chart_card = ChartCard()
        self.stats_card = StatsCard()

    def render(self):
        controller: DashboardController = get_controller(self.CONTROLLER_KEY, DashboardController)
        state = controller.state

        selected_range = self.header.render(state.time_range)
        if selected_range != state.time_range:
            run_async(controller.set_time_range(selected_range))

        selector_col, toggle_col = st.columns([5, 1])
        with selector_col:
            clicked = self.coin_selector.render(COINS, state.selected_coin, key="dashboard_coin")
        with toggle_col:
            label = "Hide Coins" if state.show_coin_manager else "Show Coins"
            if st.button(label, key="dashboard_toggle_coins", use_container_width=True):
                controller.toggle_coin_manager()
                st.rerun()

        if clicked:
            run_async(controller.select_coin(clicked))
            st.rerun()

        if controller.needs_refresh():
            run_async(controller.refresh())

        if state.error:
            st.error(state.error)

        if state.show_coin_manager:
            self._render_coin_manager(controller)

        coin_info = find_coin(state.selected_coin)
        coin_name = coin_info.name if coin_info else state.selected_coin
        coin_color = coin_info.color if coin_info else DEFAULT_COIN_COLOR

        col1, col2 = st.columns([1, 2])
        with col1:
            self.price_card.render(coin_name, state.latest_price, state.price_history)
            st.markdown("---")
            self.stats_card.render(state.price_history)
        with col2:
            self.chart_card.render(state.price_history, state.time_range, state.loading, coin_color)

    def _render_coin_manager(self, controller: DashboardController):
        coin_manager: CoinManagerController = get_controller(self.COIN_MANAGER_KEY, CoinManagerController)
        if not coin_manager.loaded:
            run_async(coin_manager.refresh())

        clicked, refresh = self.coin_manager_panel.render(coin_manager.coins, key="dashboard_manager")
        if refresh:
            run_async(coin_manager.refresh())
            st.rerun()
        if clicked:
            run_async(controller.select_coin(clicked))
            st.rerun()
