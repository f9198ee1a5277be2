"""
Daily email report signup form.
"""

from typing import Optional, Tuple

import streamlit as st

from frontend.runtime import consume_input_reset

SUBSCRIBE = "subscribe"
UNSUBSCRIBE = "unsubscribe"


class EmailSignup:

    def render(self, loading: bool, message: str, error: str, key: str) -> Tuple[Optional[str], str]:
        """Returns (action or None, entered email)"""
        st.markdown("### ✉️ Daily Email Reports")
        st.caption("Get a daily summary of crypto prices and trends delivered to your inbox. Free.")

        widget_key = f"{key}_email"
        consume_input_reset(widget_key)

        action = None
        with st.form(key=f"{key}_form"):
            email = st.text_input("Email address", placeholder="you@example.com", key=widget_key)
            col1, col2 = st.columns(2)
            with col1:
                if st.form_submit_button("Subscribing…" if loading else "Subscribe",
                                         disabled=loading, type="primary"):
                    action = SUBSCRIBE
            with col2:
                if st.form_submit_button("Unsubscribe", disabled=loading):
                    action = UNSUBSCRIBE

        if message:
            st.success(message)
        if error:
            st.error(error)

        return action, email
