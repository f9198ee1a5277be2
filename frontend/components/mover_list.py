"""
Top movers list component.
"""

from datetime import datetime
from typing import List, Optional

import pandas as pd
import streamlit as st

from frontend.schemas import TopMoverData
from frontend.services.utils import format_change, format_price


class MoverList:
    """Ranked list of coins by price change, in the order the server returns"""

    @staticmethod
    def to_dataframe(
        movers: List[TopMoverData],
        limit: Optional[int] = None,
        price_digits: int = 2,
    ) -> pd.DataFrame:
        rows = []
        for rank, mover in enumerate(movers[:limit] if limit else movers, start=1):
            change = mover['percent_change']
            rows.append({
                'Rank': f"#{rank}",
                'Coin': mover['coin_id'],
                'Change': f"{'🟢' if change >= 0 else '🔴'} {format_change(change)}",
                'Prices': (
                    f"{format_price(mover['start_price'], max_digits=price_digits)} → "
                    f"{format_price(mover['end_price'], max_digits=price_digits)}"
                ),
            })
        return pd.DataFrame(rows, columns=['Rank', 'Coin', 'Change', 'Prices'])

    def render(
        self,
        movers: List[TopMoverData],
        limit: Optional[int] = None,
        ranked: bool = False,
        price_digits: int = 2,
        downloadable: bool = False,
    ):
        if not movers:
            st.info("No movers data for this window.")
            return

        df = self.to_dataframe(movers, limit=limit, price_digits=price_digits)
        if not ranked:
            df = df.drop(columns=['Rank'])
        st.dataframe(df, width='stretch', hide_index=True)

        if downloadable:
            csv = pd.DataFrame(movers).to_csv(index=False)
            st.download_button(
                label="📥 Download as CSV",
                data=csv,
                file_name=f"top_movers_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv",
                mime="text/csv",
            )
