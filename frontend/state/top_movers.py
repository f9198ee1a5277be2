"""Top movers page controller."""

from typing import List, Optional

from frontend.schemas import TopMoverData
from frontend.services.api import ApiService
from frontend.state.base import Panel, ViewController

DEFAULT_WINDOW_MINUTES = 1440


class TopMoversController(ViewController):

    def __init__(self, api: Optional[ApiService] = None):
        super().__init__(api)
        self.minutes = DEFAULT_WINDOW_MINUTES
        self.movers: Panel[List[TopMoverData]] = Panel(data=[])
        self.loaded = False

    async def set_window(self, minutes: int):
        self.minutes = minutes
        await self.refresh()

    async def refresh(self):
        self.loaded = True
        minutes = self.minutes
        await self._load(
            "movers",
            self.movers,
            lambda: self.api.get_top_movers(minutes),
            "Failed to fetch top movers",
        )
