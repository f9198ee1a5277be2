"""Top movers page: biggest price moves across all tracked coins."""

import streamlit as st

from frontend.components import MoverList
from frontend.presets import TOP_MOVER_WINDOWS
from frontend.runtime import get_controller, run_async
from frontend.state.top_movers import TopMoversController


class TopMoversPage:
    CONTROLLER_KEY = "top_movers_controller"

    def __init__(self):
        self.mover_list = MoverList()

    def render(self):
        controller: TopMoversController = get_controller(self.CONTROLLER_KEY, TopMoversController)

        st.markdown("# 🚀 Top Movers")
        st.caption(
            "Biggest price moves across all tracked coins. "
            "Use the window to compare momentum over different periods."
        )

        window_values = [minutes for _, minutes in TOP_MOVER_WINDOWS]
        window_labels = dict((minutes, label) for label, minutes in TOP_MOVER_WINDOWS)

        col1, col2 = st.columns([3, 1])
        with col1:
            minutes = st.selectbox(
                "Window",
                window_values,
                index=window_values.index(controller.minutes),
                format_func=lambda value: window_labels[value],
                key="top_movers_window",
            )
        with col2:
            refresh = st.button("🔄 Refresh", key="top_movers_refresh",
                                disabled=controller.movers.loading, use_container_width=True)

        if minutes != controller.minutes:
            run_async(controller.set_window(minutes))
        elif refresh or not controller.loaded:
            run_async(controller.refresh())

        movers = controller.movers

        if movers.error:
            st.error(movers.error)

        if movers.loading:
            st.info("Loading top movers…")
            return

        if movers.data:
            self.mover_list.render(movers.data, ranked=True, price_digits=4, downloadable=True)
        elif not movers.error:
            st.info("No movers data for this window.")
