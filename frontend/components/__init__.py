"""
Frontend components package for the crypto price dashboard.

Streamlit render classes. Each one draws the data it is handed and reports
user intent back to the page through its return value.
"""

from .analytics_panels import AnalyticsPanels
from .chart_card import ChartCard
from .chat_panel import ChatPanel
from .coin_manager import CoinManagerPanel
from .coin_selector import CoinSelector
from .email_signup import EmailSignup
from .header import Header
from .mover_list import MoverList
from .prediction_card import PredictionCard
from .price_card import PriceCard
from .stats_card import StatsCard

__all__ = [
    'AnalyticsPanels',
    'ChartCard',
    'ChatPanel',
    'CoinManagerPanel',
    'CoinSelector',
    'EmailSignup',
    'Header',
    'MoverList',
    'PredictionCard',
    'PriceCard',
    'StatsCard',
]
