"""Available coins list shown beside the coin selector."""

from typing import List, Optional

from frontend.services.api import ApiService
from frontend.state.base import Panel, ViewController


class CoinManagerController(ViewController):

    def __init__(self, api: Optional[ApiService] = None):
        super().__init__(api)
        self.coins: Panel[List[str]] = Panel(data=[])
        self.loaded = False

    async def refresh(self):
        self.loaded = True
        await self._load(
            "coins",
            self.coins,
            self.api.get_available_coins,
            "Failed to fetch available coins",
        )
