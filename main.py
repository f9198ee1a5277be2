import streamlit as st
import logging
from typing import Dict, Callable

from config.settings import settings
from frontend.logging_config import configure_logging
from frontend.pages import AnalyticsPage, DashboardPage, MLInsightsPage, SubscribePage, TopMoversPage

logger = logging.getLogger(__name__)


class CryptoDashboardApp:
    """Shell: page config, styling, sidebar navigation and the active page"""

    PAGES = {
        "📊 Dashboard": DashboardPage,
        "🔬 Analytics": AnalyticsPage,
        "🧠 ML Insights": MLInsightsPage,
        "🚀 Top Movers": TopMoversPage,
        "✉️ Subscribe": SubscribePage,
    }

    def __init__(self):
        self.pages: Dict[str, Callable[[], None]] = {
            name: page_cls().render for name, page_cls in self.PAGES.items()
        }

    def initialize_session_state(self):
        """Initialize session state variables"""
        if 'active_page' not in st.session_state:
            st.session_state.active_page = next(iter(self.PAGES))

    def render_sidebar(self) -> str:
        """Render navigation; returns the active page name"""
        st.sidebar.markdown("""
        <div style='text-align: center; padding: 16px 0 8px 0;'>
            <h1 style='font-size: 28px; margin: 0; font-weight: 700;'>🪙</h1>
            <h2 style='font-size: 20px; margin: 8px 0 4px 0; font-weight: 600;'>Crypto Dashboard</h2>
            <p style='font-size: 13px; color: #8E8E93; margin: 0;'>Live prices, analytics & ML insights</p>
        </div>
        """, unsafe_allow_html=True)

        page_names = list(self.PAGES)
        active = st.sidebar.radio(
            "Navigate",
            page_names,
            index=page_names.index(st.session_state.active_page),
            label_visibility="collapsed",
        )
        st.session_state.active_page = active

        st.sidebar.markdown("""
        <div style='background-color: #F9F9F9; padding: 12px; border-radius: 10px; margin: 16px 0 8px 0;'>
            <p style='font-size: 14px; font-weight: 600; margin: 0; color: #000000;'>💡 Backend</p>
        </div>
        """, unsafe_allow_html=True)
        st.sidebar.caption(f"📡 {settings.base_url}")
        if settings.DEBUG:
            st.sidebar.caption(f"env: {settings.ENV} · log level: {settings.LOG_LEVEL}")

        return active

    def run(self):
        """Main application runner"""
        st.set_page_config(
            page_title="Crypto Dashboard",
            page_icon="🪙",
            layout="wide",
            initial_sidebar_state="expanded"
        )

        st.markdown("""
        <style>
        /* Metric cards */
        div[data-testid="stMetric"] {
            background-color: #FFFFFF;
            border-radius: 12px;
            padding: 12px 16px;
            box-shadow: 0 1px 3px rgba(0, 0, 0, 0.08);
        }

        [data-testid="stMetricValue"] {
            font-size: 24px;
            font-weight: 600;
        }

        [data-testid="stMetricLabel"] {
            font-size: 13px;
            color: #8E8E93;
            font-weight: 400;
        }

        /* Buttons */
        .stButton > button {
            border-radius: 10px;
            font-weight: 500;
            transition: all 0.2s ease;
        }

        .stButton > button:hover {
            transform: translateY(-1px);
        }

        [data-testid="stSidebar"] {
            border-right: 1px solid #E5E5EA;
        }

        .stAlert {
            border-radius: 12px;
        }

        .js-plotly-plot {
            border-radius: 12px;
            overflow: hidden;
        }

        .block-container {
            padding-top: 2rem;
            padding-bottom: 2rem;
        }
        </style>
        """, unsafe_allow_html=True)

        self.initialize_session_state()
        active = self.render_sidebar()
        logger.debug("Rendering page %s", active)
        self.pages[active]()


def main():
    configure_logging(settings)
    app = CryptoDashboardApp()
    app.run()


if __name__ == "__main__":
    main()
