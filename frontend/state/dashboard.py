"""Dashboard page controller: latest price and history for one coin."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from config.settings import settings
from frontend.errors import ApiError
from frontend.schemas import PriceData
from frontend.services.api import ApiService
from frontend.services.utils import sort_by_timestamp
from frontend.state.base import ViewController

logger = logging.getLogger(__name__)


@dataclass
class DashboardState:
    selected_coin: str = field(default_factory=lambda: settings.DEFAULT_COIN)
    time_range: int = field(default_factory=lambda: settings.DEFAULT_TIME_RANGE_MINUTES)
    latest_price: Optional[PriceData] = None
    price_history: List[PriceData] = field(default_factory=list)
    loading: bool = False
    error: str = ""
    show_coin_manager: bool = False


class DashboardController(ViewController):
    """Holds the selected coin and time range and keeps the data in sync.

    Changing either selection refetches the latest price and the history
    concurrently. A failure of either fetch shows an error; only a
    successful history fetch clears it.
    """

    def __init__(self, api: Optional[ApiService] = None):
        super().__init__(api)
        self.state = DashboardState()
        self._loaded_key: Optional[Tuple[str, int]] = None

    @property
    def selection(self) -> Tuple[str, int]:
        return self.state.selected_coin, self.state.time_range

    def needs_refresh(self) -> bool:
        return self._loaded_key != self.selection

    async def select_coin(self, coin_id: str):
        self.state.selected_coin = coin_id
        self.state.show_coin_manager = False
        await self.refresh()

    async def set_time_range(self, minutes: int):
        self.state.time_range = minutes
        await self.refresh()

    def toggle_coin_manager(self):
        self.state.show_coin_manager = not self.state.show_coin_manager

    async def refresh(self):
        coin_id, minutes = self.selection
        self._loaded_key = (coin_id, minutes)
        await asyncio.gather(
            self._fetch_latest_price(coin_id),
            self._fetch_price_history(coin_id, minutes),
        )

    async def _fetch_latest_price(self, coin_id: str):
        token = self.fence.issue("latest")
        try:
            data = await self.api.get_latest_price(coin_id)
        except ApiError as e:
            if self.fence.is_current("latest", token):
                logger.error("Failed to fetch latest price for %s: %s", coin_id, e)
                self.state.error = "Failed to fetch latest price"
            return
        if self.fence.is_current("latest", token):
            self.state.latest_price = data

    async def _fetch_price_history(self, coin_id: str, minutes: int):
        token = self.fence.issue("history")
        self.state.loading = True
        try:
            data = await self.api.get_price_history(coin_id, minutes)
        except ApiError as e:
            if self.fence.is_current("history", token):
                logger.error("Failed to fetch price history for %s: %s", coin_id, e)
                self.state.error = "Failed to fetch price history"
                self.state.loading = False
            return
        if self.fence.is_current("history", token):
            self.state.price_history = sort_by_timestamp(data or [])
            self.state.error = ""
            self.state.loading = False
