"""ML insights page controller."""

import asyncio
import logging
from typing import List, Optional

from config.settings import settings
from frontend.presets import HORIZONS
from frontend.schemas import PredictData, TimeWindow, TopMoverData, TrendData, VolatilityData
from frontend.services.api import ApiService
from frontend.services.utils import time_range_presets
from frontend.state.base import Panel, ViewController
from frontend.state.chat import ChatSession

logger = logging.getLogger(__name__)

SIGNAL_MOVERS_MINUTES = 1440
DEFAULT_HORIZON_MINUTES = HORIZONS[0][1]


class MLInsightsController(ViewController):
    """Trend, volatility and momentum signals plus the backend forecast"""

    def __init__(self, api: Optional[ApiService] = None):
        super().__init__(api)
        self.selected_coin = settings.DEFAULT_COIN
        self.horizon_minutes = DEFAULT_HORIZON_MINUTES

        self.trend: Panel[TrendData] = Panel()
        self.volatility: Panel[VolatilityData] = Panel()
        self.top_movers: Panel[List[TopMoverData]] = Panel(data=[])
        self.prediction: Panel[PredictData] = Panel()

        self.chat = ChatSession(self.api)
        self.loaded = False

    @property
    def signals_loading(self) -> bool:
        return self.trend.loading or self.volatility.loading or self.top_movers.loading

    @property
    def has_signals(self) -> bool:
        return bool(self.trend.data or self.volatility.data or self.top_movers.data)

    @staticmethod
    def default_window() -> TimeWindow:
        # "Last 24 hours"
        return time_range_presets()[1]

    async def load(self):
        """Initial load for the current coin"""
        self.loaded = True
        await asyncio.gather(
            self.load_signals(self.default_window()),
            self.load_prediction(),
        )

    async def select_coin(self, coin_id: str):
        self.selected_coin = coin_id
        await self.load()

    async def set_horizon(self, minutes: int):
        self.horizon_minutes = minutes
        await self.load_prediction()

    async def load_signals(self, window: TimeWindow):
        coin_id = self.selected_coin
        await asyncio.gather(
            self._load(
                "trend",
                self.trend,
                lambda: self.api.get_trend(coin_id, window.start, window.end),
                "Failed to load trend signal",
            ),
            self._load(
                "volatility",
                self.volatility,
                lambda: self.api.get_volatility(coin_id, window.start, window.end),
                "Failed to load volatility signal",
            ),
            self._load(
                "top_movers",
                self.top_movers,
                lambda: self.api.get_top_movers(SIGNAL_MOVERS_MINUTES),
                "Failed to load momentum signal",
            ),
        )

    async def load_prediction(self):
        coin_id = self.selected_coin
        horizon = self.horizon_minutes
        await self._load(
            "prediction",
            self.prediction,
            lambda: self.api.get_prediction(coin_id, horizon),
            "Failed to load prediction",
            clear_on_error=True,
        )

    async def ask(self, question: str) -> bool:
        return await self.chat.ask(question)
