"""
Page containers: each binds one controller to its panels.
"""

from frontend.pages.analytics import AnalyticsPage
from frontend.pages.dashboard import DashboardPage
from frontend.pages.ml_insights import MLInsightsPage
from frontend.pages.subscribe import SubscribePage
from frontend.pages.top_movers import TopMoversPage

__all__ = [
    'AnalyticsPage',
    'DashboardPage',
    'MLInsightsPage',
    'SubscribePage',
    'TopMoversPage',
]
