"""
Formatting and analytics helpers shared by the dashboard views.

Everything here is a pure function of its arguments (``time_range_presets``
additionally reads the clock when no instant is supplied).
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import pandas as pd

from frontend.presets import HISTORY_RANGES
from frontend.schemas import PriceData, PriceStats, TimeWindow

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# (label, lookback) pairs for the aggregate analytics windows
CUSTOM_RANGE_LOOKBACKS: List[Tuple[str, timedelta]] = [
    ("Last hour", timedelta(hours=1)),
    ("Last 24 hours", timedelta(hours=24)),
    ("Last 7 days", timedelta(days=7)),
    ("Last 30 days", timedelta(days=30)),
]

TimestampLike = Union[str, datetime, pd.Timestamp]


def parse_timestamp(value: TimestampLike) -> pd.Timestamp:
    """Parse an ISO-8601 timestamp into a UTC-aware pandas Timestamp.

    Naive values are taken as UTC. Nanosecond fractions (as emitted by the
    backend) are preserved.
    """
    return pd.to_datetime(value, utc=True)


def to_iso(value: Union[str, datetime]) -> str:
    """Convert a datetime or date string to ISO-8601 UTC with a ``Z`` suffix.

    Naive inputs are interpreted in the local timezone, the way a
    ``datetime-local`` form value is.
    """
    if isinstance(value, str):
        value = pd.Timestamp(value.strip()).to_pydatetime(warn=False)
    utc_value = value.astimezone(timezone.utc)
    return utc_value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _local(value: TimestampLike) -> datetime:
    return parse_timestamp(value).to_pydatetime(warn=False).astimezone()


def format_time(timestamp: TimestampLike) -> str:
    return _local(timestamp).strftime("%X")


def format_datetime(timestamp: TimestampLike) -> str:
    return _local(timestamp).strftime("%x, %X")


def format_price(price: float, min_digits: int = 2, max_digits: int = 6) -> str:
    """Format a USD amount like ``$1,234.56``.

    The amount is rounded to ``max_digits`` fractional digits and trailing
    zeros are dropped down to ``min_digits``.
    """
    sign = "-" if price < 0 else ""
    text = f"{abs(price):,.{max_digits}f}"
    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0")
    if len(fraction) < min_digits:
        fraction = fraction.ljust(min_digits, "0")
    if not fraction:
        return f"{sign}${whole}"
    return f"{sign}${whole}.{fraction}"


def format_change(percent: float) -> str:
    """Signed percentage, e.g. ``+1.23%``"""
    prefix = "+" if percent >= 0 else ""
    return f"{prefix}{percent:.2f}%"


def percent_change(series: Sequence[Mapping[str, float]]) -> float:
    """Percent change between the first and last point of a series.

    Returns 0 when there are fewer than two points or the first price is 0.
    """
    if len(series) < 2:
        return 0.0
    first_price = series[0]["price_usd"]
    last_price = series[-1]["price_usd"]
    if first_price == 0:
        return 0.0
    return (last_price - first_price) / first_price * 100


def get_time_ranges() -> List[Tuple[str, int]]:
    """History ranges offered on the dashboard, as (label, minutes)"""
    return [(f"Last {label}", minutes) for label, minutes in HISTORY_RANGES]


def time_range_presets(now: Optional[datetime] = None) -> List[TimeWindow]:
    """Aggregate windows ending at ``now``.

    Computed fresh on every call. Start and end of each window derive from
    the same instant, so ``end - start`` is exactly the lookback.
    """
    now = now or datetime.now(timezone.utc)
    return [
        TimeWindow(label=label, start=to_iso(now - lookback), end=to_iso(now))
        for label, lookback in CUSTOM_RANGE_LOOKBACKS
    ]


def trend_class(trend: str) -> str:
    """Map a server trend label to a display class"""
    label = (trend or "").lower()
    if label == "uptrend":
        return "positive"
    if label == "downtrend":
        return "negative"
    return "neutral"


def sort_by_timestamp(history: Iterable[PriceData]) -> List[PriceData]:
    """Stable ascending sort by parsed timestamp"""
    return sorted(history, key=lambda point: parse_timestamp(point["timestamp"]))


def summarize_prices(history: Sequence[PriceData]) -> PriceStats:
    if not history:
        return PriceStats(count=0, high=0.0, low=0.0, average=0.0)
    prices = [point["price_usd"] for point in history]
    return PriceStats(
        count=len(prices),
        high=max(prices),
        low=min(prices),
        average=sum(prices) / len(prices),
    )


def chart_y_domain(prices: Sequence[float]) -> Optional[Tuple[float, float]]:
    """Y-axis bounds with 5% padding (0.1% of the minimum for a flat series, 1 at zero)"""
    if not prices:
        return None
    low = min(prices)
    high = max(prices)
    padding = (high - low) * 0.05 or abs(low) * 0.001 or 1.0
    return low - padding, high + padding


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch((value or "").strip()) is not None


def hex_to_rgba(color: str, alpha: float) -> str:
    """Convert ``#rrggbb`` to a plotly ``rgba(...)`` string"""
    hex_value = color.lstrip("#")
    if len(hex_value) == 3:
        hex_value = "".join(ch * 2 for ch in hex_value)
    red, green, blue = (int(hex_value[i:i + 2], 16) for i in (0, 2, 4))
    return f"rgba({red}, {green}, {blue}, {alpha})"
