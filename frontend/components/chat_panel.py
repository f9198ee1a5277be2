"""
Natural-language price query assistant component.
"""

from typing import List, Optional

import pandas as pd
import streamlit as st

from frontend.runtime import consume_input_reset
from frontend.schemas import PriceData
from frontend.services.utils import format_datetime, format_price
from frontend.state.chat import ChatTranscript


class ChatPanel:
    """Chat-style transcript with a question box"""

    @staticmethod
    def results_frame(rows: List[PriceData]) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {
                    'Coin': row['coin_id'],
                    'Time': format_datetime(row['timestamp']),
                    'Price': format_price(row['price_usd'], max_digits=2),
                }
                for row in rows
            ],
            columns=['Coin', 'Time', 'Price'],
        )

    def render(
        self,
        transcript: ChatTranscript,
        loading: bool,
        placeholder: str,
        empty_hint: str,
        key: str,
    ) -> Optional[str]:
        """Render the transcript; returns a submitted question, if any"""
        if not transcript.messages:
            st.caption(empty_hint)

        for message in transcript.messages:
            with st.chat_message(message.role):
                if message.text:
                    st.write(message.text)
                if message.results:
                    st.dataframe(self.results_frame(message.results), width='stretch', hide_index=True)
                elif message.role == "assistant" and message.results is not None:
                    st.caption("No rows matched.")

        if loading:
            with st.chat_message("assistant"):
                st.write("…")

        widget_key = f"{key}_question"
        consume_input_reset(widget_key)
        with st.form(key=f"{key}_form", clear_on_submit=False):
            question = st.text_input("Question", placeholder=placeholder, key=widget_key,
                                     label_visibility="collapsed", disabled=loading)
            submitted = st.form_submit_button("Send", disabled=loading)

        if submitted and question.strip():
            return question
        return None

    def render_clear(self, transcript: ChatTranscript, key: str) -> bool:
        """Clear button, shown once the transcript has entries"""
        if not transcript.messages:
            return False
        return st.button("Clear conversation", key=f"{key}_clear")
