import asyncio

import pytest

from frontend.errors import ApiError
from frontend.schemas import TimeWindow
from frontend.state.analytics import AnalyticsController
from frontend.state.chat import APOLOGY

WINDOW = TimeWindow(
    label="Last hour",
    start="2024-01-15T11:00:00.000Z",
    end="2024-01-15T12:00:00.000Z",
)

AVERAGE = {"coin_id": "bitcoin", "average_price": 42000.0}
RANGE = {"coin_id": "bitcoin", "min_price": 41000.0, "max_price": 43000.0, "range": 2000.0}
VOLATILITY = {"coin_id": "bitcoin", "volatility": 0.012}
TREND = {"coin_id": "bitcoin", "trend": "uptrend", "change": 120.0}


def script_window(api, **overrides):
    api.queue("get_average_price", overrides.get("average", AVERAGE))
    api.queue("get_price_range", overrides.get("range", RANGE))
    api.queue("get_volatility", overrides.get("volatility", VOLATILITY))
    api.queue("get_trend", overrides.get("trend", TREND))


@pytest.mark.asyncio
async def test_select_time_range_fills_all_panels(fake_api):
    script_window(fake_api)
    controller = AnalyticsController(fake_api)

    await controller.select_time_range(WINDOW)

    assert controller.average.data == AVERAGE
    assert controller.price_range.data == RANGE
    assert controller.volatility.data == VOLATILITY
    assert controller.trend.data == TREND
    assert controller.errors == []
    assert not controller.loading
    assert controller.selected_range_label == f"{WINDOW.start} to {WINDOW.end}"
    assert fake_api.calls_to("get_trend") == [("bitcoin", WINDOW.start, WINDOW.end)]


@pytest.mark.asyncio
async def test_one_failing_aggregate_leaves_the_others(fake_api):
    script_window(fake_api, volatility=ApiError("down", status_code=500))
    controller = AnalyticsController(fake_api)

    await controller.select_time_range(WINDOW)

    assert controller.average.data == AVERAGE
    assert controller.price_range.data == RANGE
    assert controller.trend.data == TREND
    assert controller.volatility.data is None
    assert controller.volatility.error == "Failed to fetch volatility data"
    assert controller.errors == ["Failed to fetch volatility data"]


@pytest.mark.asyncio
async def test_select_coin_reruns_window(fake_api):
    script_window(fake_api)
    fake_api.queue("get_price_at_time", {"coin_id": "bitcoin", "timestamp": WINDOW.start, "price_usd": 1.0})
    controller = AnalyticsController(fake_api)
    await controller.select_time_range(WINDOW)
    await controller.fetch_price_at_time(WINDOW.start)
    controller.toggle_coin_manager()

    await controller.select_coin("ethereum")

    assert controller.selected_coin == "ethereum"
    assert not controller.show_coin_manager
    assert controller.price_at_time.data is None
    assert fake_api.calls_to("get_average_price")[-1] == ("ethereum", WINDOW.start, WINDOW.end)


@pytest.mark.asyncio
async def test_select_coin_drops_lookup_in_flight(fake_api):
    fake_api.queue("get_price_at_time", {"coin_id": "bitcoin", "timestamp": WINDOW.start, "price_usd": 1.0})
    gate = fake_api.hold("get_price_at_time")
    controller = AnalyticsController(fake_api)

    lookup = asyncio.create_task(controller.fetch_price_at_time(WINDOW.start))
    await asyncio.sleep(0)
    assert controller.price_at_time.loading
    await controller.select_coin("ethereum")
    gate.set()

    assert not await lookup
    assert controller.price_at_time.data is None
    assert not controller.price_at_time.loading


@pytest.mark.asyncio
async def test_select_coin_without_window_fetches_nothing(fake_api):
    controller = AnalyticsController(fake_api)

    await controller.select_coin("solana")

    assert controller.selected_coin == "solana"
    assert fake_api.calls == []


@pytest.mark.asyncio
async def test_stale_window_result_dropped(fake_api):
    older = {"coin_id": "bitcoin", "average_price": 1.0}
    newer = {"coin_id": "bitcoin", "average_price": 2.0}
    fake_api.queue("get_average_price", older, newer)
    fake_api.queue("get_price_range", RANGE)
    fake_api.queue("get_volatility", VOLATILITY)
    fake_api.queue("get_trend", TREND)
    gate = fake_api.hold("get_average_price")
    controller = AnalyticsController(fake_api)
    later = TimeWindow(label="Last 24 hours", start="2024-01-14T12:00:00.000Z", end=WINDOW.end)

    slow = asyncio.create_task(controller.select_time_range(WINDOW))
    await asyncio.sleep(0)
    await asyncio.sleep(0)
    await controller.select_time_range(later)
    gate.set()
    await slow

    assert controller.average.data == newer
    assert controller.selected_window == later


@pytest.mark.asyncio
async def test_price_at_time_converts_to_iso(fake_api):
    point = {"coin_id": "bitcoin", "timestamp": "2024-01-15T12:30:00Z", "price_usd": 42100.0}
    fake_api.queue("get_price_at_time", point)
    controller = AnalyticsController(fake_api)

    assert await controller.fetch_price_at_time("2024-01-15T14:30:00+02:00")

    assert controller.price_at_time.data == point
    assert fake_api.calls_to("get_price_at_time") == [("bitcoin", "2024-01-15T12:30:00.000Z")]


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [None, "", "   "])
async def test_price_at_time_blank_input_is_ignored(fake_api, value):
    controller = AnalyticsController(fake_api)

    assert not await controller.fetch_price_at_time(value)

    assert fake_api.calls == []
    assert controller.price_at_time.error == ""


@pytest.mark.asyncio
async def test_price_at_time_failure(fake_api):
    fake_api.queue("get_price_at_time", ApiError("not found", status_code=404))
    controller = AnalyticsController(fake_api)

    assert not await controller.fetch_price_at_time("2024-01-15T12:30:00Z")

    assert controller.price_at_time.error == "Failed to fetch price at specified time"


@pytest.mark.asyncio
async def test_price_at_time_unparseable_input(fake_api):
    controller = AnalyticsController(fake_api)

    assert not await controller.fetch_price_at_time("not a timestamp")

    assert controller.price_at_time.error == "Failed to fetch price at specified time"
    assert fake_api.calls == []


@pytest.mark.asyncio
async def test_top_movers_refresh(fake_api):
    movers = [
        {"coin_id": "solana", "start_price": 100.0, "end_price": 110.0, "percent_change": 10.0},
        {"coin_id": "bitcoin", "start_price": 100.0, "end_price": 95.0, "percent_change": -5.0},
    ]
    fake_api.queue("get_top_movers", movers)
    controller = AnalyticsController(fake_api)

    await controller.refresh_top_movers()

    assert controller.top_movers_loaded
    assert controller.top_movers.data == movers
    assert fake_api.calls_to("get_top_movers") == [(60,)]


@pytest.mark.asyncio
async def test_top_movers_failure_keeps_empty_list(fake_api):
    fake_api.queue("get_top_movers", ApiError("down"))
    controller = AnalyticsController(fake_api)

    await controller.refresh_top_movers()

    assert controller.top_movers.data == []
    assert controller.top_movers.error == "Failed to fetch top movers data"


@pytest.mark.asyncio
async def test_ask_uses_shared_chat(fake_api):
    fake_api.queue("ask_ai", ApiError("down"))
    controller = AnalyticsController(fake_api)

    assert not await controller.ask("price of bitcoin yesterday")

    texts = [message.text for message in controller.chat.transcript.messages]
    assert texts == ["price of bitcoin yesterday", APOLOGY]
