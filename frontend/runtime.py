"""
Glue between the Streamlit script thread and the async controllers.
"""

import asyncio
from typing import Any, Callable, Coroutine, TypeVar

import streamlit as st

T = TypeVar("T")


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run a controller coroutine to completion on a fresh event loop.

    Streamlit executes the page script synchronously; each user action gets
    its own loop, inside which concurrent fetches are gathered.
    """
    return asyncio.run(coro)


def get_controller(key: str, factory: Callable[[], T]) -> T:
    """Return the page controller kept in the session, creating it once"""
    if key not in st.session_state:
        st.session_state[key] = factory()
    return st.session_state[key]


def request_input_reset(widget_key: str):
    """Ask for a text input to be emptied on the next run"""
    st.session_state[f"{widget_key}__reset"] = True


def consume_input_reset(widget_key: str):
    """Empty the input if a reset was requested; call before creating the widget"""
    if st.session_state.pop(f"{widget_key}__reset", False):
        st.session_state[widget_key] = ""
