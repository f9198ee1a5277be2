"""
Async client for the crypto price backend.

One coroutine per backend endpoint. Every call is a single attempt against
the configured base URL: no retry, no caching, no coalescing of identical
requests. Any transport failure or non-2xx status surfaces as ``ApiError``;
successful responses are returned exactly as decoded from JSON.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from config.settings import settings
from frontend.errors import ApiError
from frontend.schemas import (
    AveragePriceData,
    PredictData,
    PriceData,
    PriceRangeData,
    SubscriptionResponse,
    TopMoverData,
    TrendData,
    VolatilityData,
)

logger = logging.getLogger(__name__)


def _coin_path(prefix: str, coin_id: str) -> str:
    return f"/{prefix}/{quote(coin_id, safe='')}"


class ApiService:
    """Backend API client"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT_S
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        # A fresh client per call: callers may run each action on its own event loop.
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _request(
        self,
        method: str,
        path: str,
        failure_message: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
        content: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        use_response_text: bool = False,
    ) -> Any:
        """Send one request and decode its JSON body.

        With ``use_response_text`` the server's raw error body (when not
        blank) replaces ``failure_message`` in the raised error.
        """
        query = {k: v for k, v in (params or {}).items() if v is not None}
        logger.debug("%s %s%s params=%s", method, self.base_url, path, query)
        try:
            async with self._client() as client:
                response = await client.request(
                    method, path, params=query, json=json, content=content, headers=headers
                )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            body = e.response.text.strip()
            logger.warning("API error %s on %s %s: %s", status, method, path, body[:200])
            message = body if use_response_text and body else failure_message
            raise ApiError(message, status_code=status) from e
        except httpx.RequestError as e:
            logger.warning("Network error on %s %s: %s", method, path, e)
            raise ApiError(failure_message) from e
        except ValueError as e:
            logger.warning("Invalid JSON from %s %s: %s", method, path, e)
            raise ApiError(f"{failure_message}: invalid response body") from e

    # Prices

    async def get_latest_price(self, coin_id: str) -> PriceData:
        return await self._request(
            "GET", _coin_path("latest", coin_id), "Failed to fetch latest price"
        )

    async def get_price_history(self, coin_id: str, minutes: int) -> List[PriceData]:
        return await self._request(
            "GET",
            _coin_path("history", coin_id),
            "Failed to fetch price history",
            params={"minutes": minutes},
        )

    async def get_price_at_time(self, coin_id: str, timestamp: str) -> PriceData:
        return await self._request(
            "GET",
            _coin_path("at", coin_id),
            "Failed to fetch price at time",
            params={"timestamp": timestamp},
        )

    async def get_available_coins(self) -> List[str]:
        return await self._request("GET", "/coins", "Failed to fetch available coins")

    # Aggregates over a time window

    async def get_average_price(self, coin_id: str, start: str, end: str) -> AveragePriceData:
        return await self._request(
            "GET",
            _coin_path("average", coin_id),
            "Failed to fetch average price",
            params={"start": start, "end": end},
        )

    async def get_price_range(self, coin_id: str, start: str, end: str) -> PriceRangeData:
        return await self._request(
            "GET",
            _coin_path("range", coin_id),
            "Failed to fetch price range",
            params={"start": start, "end": end},
        )

    async def get_volatility(self, coin_id: str, start: str, end: str) -> VolatilityData:
        return await self._request(
            "GET",
            _coin_path("volatility", coin_id),
            "Failed to fetch volatility data",
            params={"start": start, "end": end},
        )

    async def get_trend(self, coin_id: str, start: str, end: str) -> TrendData:
        return await self._request(
            "GET",
            _coin_path("trend", coin_id),
            "Failed to fetch trend data",
            params={"start": start, "end": end},
        )

    async def get_top_movers(self, minutes: int = 60) -> List[TopMoverData]:
        return await self._request(
            "GET",
            "/top-movers",
            "Failed to fetch top movers data",
            params={"minutes": minutes},
        )

    # ML and natural-language query

    async def get_prediction(
        self,
        coin_id: str,
        horizon_minutes: int = 60,
        lookback_minutes: Optional[int] = None,
    ) -> PredictData:
        return await self._request(
            "GET",
            _coin_path("predict", coin_id),
            "Failed to fetch prediction",
            params={"horizon_minutes": horizon_minutes, "lookback_minutes": lookback_minutes},
        )

    async def ask_ai(self, question: str) -> List[PriceData]:
        """Send a free-text question; the backend answers with price rows"""
        return await self._request(
            "POST",
            "/ask",
            "AI query failed",
            content=question,
            headers={"Content-Type": "text/plain"},
        )

    # Email reports

    async def subscribe(self, email: str) -> SubscriptionResponse:
        return await self._request(
            "POST",
            "/subscribe",
            "Failed to subscribe",
            json={"email": email},
            use_response_text=True,
        )

    async def unsubscribe(self, email: str) -> SubscriptionResponse:
        return await self._request(
            "POST",
            "/unsubscribe",
            "Failed to unsubscribe",
            json={"email": email},
            use_response_text=True,
        )
