"""
Available coins panel.
"""

from typing import List, Optional, Tuple

import streamlit as st

from frontend.state.base import Panel


class CoinManagerPanel:
    """Grid of every coin the backend tracks"""

    COLUMNS = 4

    def render(self, coins: Panel[List[str]], key: str) -> Tuple[Optional[str], bool]:
        """Returns (clicked coin id or None, refresh requested)"""
        header_col, refresh_col = st.columns([4, 1])
        with header_col:
            st.markdown("#### 🪙 Available Coins")
        with refresh_col:
            refresh = st.button("🔄", key=f"{key}_refresh", help="Refresh available coins",
                                disabled=coins.loading)

        if coins.error:
            st.error(coins.error)

        clicked = None
        available = coins.data or []
        if coins.loading:
            st.info("Loading available coins...")
        elif available:
            columns = st.columns(self.COLUMNS)
            for i, coin_id in enumerate(available):
                with columns[i % self.COLUMNS]:
                    if st.button(coin_id.upper(), key=f"{key}_coin_{coin_id}", use_container_width=True):
                        clicked = coin_id
        else:
            st.caption("No coins available")

        st.caption(f"Total: {len(available)} coins available")
        return clicked, refresh
