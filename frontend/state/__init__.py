"""
View controllers: one per page, owning that page's selection and fetched data.
"""

from frontend.state.analytics import AnalyticsController
from frontend.state.base import Panel, RequestFence, ViewController
from frontend.state.chat import ChatSession, ChatTranscript
from frontend.state.coin_manager import CoinManagerController
from frontend.state.dashboard import DashboardController, DashboardState
from frontend.state.ml_insights import MLInsightsController
from frontend.state.subscription import SubscriptionController
from frontend.state.top_movers import TopMoversController

__all__ = [
    'AnalyticsController',
    'ChatSession',
    'ChatTranscript',
    'CoinManagerController',
    'DashboardController',
    'DashboardState',
    'MLInsightsController',
    'Panel',
    'RequestFence',
    'SubscriptionController',
    'TopMoversController',
    'ViewController',
]
