"""
Coin selector component.
"""

from typing import List, Optional

import streamlit as st

from frontend.schemas import CoinInfo


class CoinSelector:
    """Row of coin buttons; the selected coin is highlighted"""

    def render(self, coins: List[CoinInfo], selected_coin: str, key: str) -> Optional[str]:
        """Returns the id of a clicked coin, or None"""
        clicked = None
        columns = st.columns(len(coins))
        for column, coin in zip(columns, coins):
            with column:
                if st.button(
                    coin.symbol,
                    key=f"{key}_{coin.id}",
                    type="primary" if coin.id == selected_coin else "secondary",
                    help=coin.name,
                    use_container_width=True,
                ):
                    clicked = coin.id
        return clicked
