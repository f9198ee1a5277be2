"""Analytics page controller."""

import asyncio
import logging
from datetime import datetime
from typing import List, Optional, Union

from config.settings import settings
from frontend.schemas import (
    AveragePriceData,
    PriceData,
    PriceRangeData,
    TimeWindow,
    TopMoverData,
    TrendData,
    VolatilityData,
)
from frontend.services.api import ApiService
from frontend.services.utils import to_iso
from frontend.state.base import Panel, ViewController
from frontend.state.chat import ChatSession

logger = logging.getLogger(__name__)

TOP_MOVERS_MINUTES = 60


class AnalyticsController(ViewController):
    """Window aggregates, price lookups, top movers and the query assistant.

    Each aggregate is its own panel: selecting a window fires the four
    fetches together, and one failing leaves the others intact.
    """

    def __init__(self, api: Optional[ApiService] = None):
        super().__init__(api)
        self.selected_coin = settings.DEFAULT_COIN
        self.show_coin_manager = False
        self.selected_window: Optional[TimeWindow] = None

        self.average: Panel[AveragePriceData] = Panel()
        self.price_range: Panel[PriceRangeData] = Panel()
        self.volatility: Panel[VolatilityData] = Panel()
        self.trend: Panel[TrendData] = Panel()
        self.price_at_time: Panel[PriceData] = Panel()
        self.top_movers: Panel[List[TopMoverData]] = Panel(data=[])

        self.chat = ChatSession(self.api)
        self.top_movers_loaded = False

    @property
    def selected_range_label(self) -> str:
        if self.selected_window is None:
            return ""
        return f"{self.selected_window.start} to {self.selected_window.end}"

    @property
    def panels(self) -> List[Panel]:
        return [
            self.average,
            self.price_range,
            self.volatility,
            self.trend,
            self.price_at_time,
            self.top_movers,
        ]

    @property
    def loading(self) -> bool:
        return any(panel.loading for panel in self.panels)

    @property
    def errors(self) -> List[str]:
        return [panel.error for panel in self.panels if panel.error]

    def toggle_coin_manager(self):
        self.show_coin_manager = not self.show_coin_manager

    async def select_coin(self, coin_id: str):
        self.selected_coin = coin_id
        self.show_coin_manager = False
        # Drops any lookup still in flight for the previous coin
        self.fence.issue("price_at_time")
        self.price_at_time.clear()
        self.price_at_time.loading = False
        if self.selected_window is not None:
            await self.select_time_range(self.selected_window)

    async def select_time_range(self, window: TimeWindow):
        self.selected_window = window
        coin_id = self.selected_coin
        await asyncio.gather(
            self._load(
                "average",
                self.average,
                lambda: self.api.get_average_price(coin_id, window.start, window.end),
                "Failed to fetch average price data",
            ),
            self._load(
                "range",
                self.price_range,
                lambda: self.api.get_price_range(coin_id, window.start, window.end),
                "Failed to fetch price range data",
            ),
            self._load(
                "volatility",
                self.volatility,
                lambda: self.api.get_volatility(coin_id, window.start, window.end),
                "Failed to fetch volatility data",
            ),
            self._load(
                "trend",
                self.trend,
                lambda: self.api.get_trend(coin_id, window.start, window.end),
                "Failed to fetch trend data",
            ),
        )

    async def fetch_price_at_time(self, timestamp: Union[str, datetime, None]) -> bool:
        """Look up the price at a moment; blank input does nothing"""
        if timestamp is None or (isinstance(timestamp, str) and not timestamp.strip()):
            return False
        try:
            iso_value = to_iso(timestamp)
        except ValueError as e:
            logger.error("Invalid timestamp %r: %s", timestamp, e)
            self.price_at_time.error = "Failed to fetch price at specified time"
            return False
        coin_id = self.selected_coin
        return await self._load(
            "price_at_time",
            self.price_at_time,
            lambda: self.api.get_price_at_time(coin_id, iso_value),
            "Failed to fetch price at specified time",
        )

    async def refresh_top_movers(self):
        self.top_movers_loaded = True
        await self._load(
            "top_movers",
            self.top_movers,
            lambda: self.api.get_top_movers(TOP_MOVERS_MINUTES),
            "Failed to fetch top movers data",
        )

    async def ask(self, question: str) -> bool:
        return await self.chat.ask(question)
