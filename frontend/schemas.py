"""
Data records for the crypto price dashboard.

Wire records are ``TypedDict`` shapes of the JSON the backend returns; the
API client hands them over exactly as decoded. The dataclasses are
client-side values (static coin configuration, time windows, chat entries
and derived statistics).
"""

from dataclasses import dataclass
from typing import List, Literal, Optional, TypedDict


class PriceData(TypedDict):
    """Single price observation"""
    coin_id: str
    timestamp: str
    price_usd: float


class AveragePriceData(TypedDict):
    coin_id: str
    average: float
    data_points: int
    start: str
    end: str


class PriceRangeData(TypedDict):
    coin_id: str
    min: float
    max: float
    start: str
    end: str


class VolatilityData(TypedDict):
    coin_id: str
    start: str
    end: str
    stddev_price: float
    mean_price: float
    data_points: int


class TrendData(TypedDict):
    coin_id: str
    slope: float
    trend: str
    data_points: int
    start: str
    end: str


class TopMoverData(TypedDict):
    coin_id: str
    start_price: float
    end_price: float
    percent_change: float


class PredictData(TypedDict):
    """Backend regression forecast for one coin"""
    coin_id: str
    horizon_minutes: int
    predicted_price: float
    price_low: float
    price_high: float
    trend: str
    slope: float
    data_points: int
    predicted_at: str
    horizon_end_time: str


class SubscriptionResponse(TypedDict, total=False):
    message: str
    email: str


@dataclass(frozen=True)
class CoinInfo:
    """Static display configuration for a tracked coin"""
    id: str
    name: str
    symbol: str
    color: str


@dataclass(frozen=True)
class TimeWindow:
    """Half-open interval [start, end) as ISO-8601 strings"""
    label: str
    start: str
    end: str


@dataclass(frozen=True)
class PriceStats:
    """Summary of a price history"""
    count: int
    high: float
    low: float
    average: float


ChatRole = Literal["user", "assistant"]


@dataclass
class ChatMessage:
    """One entry of a natural-language query transcript"""
    role: ChatRole
    text: Optional[str] = None
    results: Optional[List[PriceData]] = None
