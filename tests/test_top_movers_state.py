import pytest

from frontend.errors import ApiError
from frontend.state.coin_manager import CoinManagerController
from frontend.state.top_movers import TopMoversController

MOVERS = [
    {"coin_id": "solana", "start_price": 100.0, "end_price": 120.0, "percent_change": 20.0},
    {"coin_id": "cardano", "start_price": 0.5, "end_price": 0.45, "percent_change": -10.0},
]


@pytest.mark.asyncio
async def test_default_window_is_a_day(fake_api):
    fake_api.queue("get_top_movers", MOVERS)
    controller = TopMoversController(fake_api)

    await controller.refresh()

    assert controller.loaded
    assert controller.movers.data == MOVERS
    assert fake_api.calls_to("get_top_movers") == [(1440,)]


@pytest.mark.asyncio
async def test_set_window_refetches(fake_api):
    fake_api.queue("get_top_movers", MOVERS)
    controller = TopMoversController(fake_api)

    await controller.set_window(10080)

    assert controller.minutes == 10080
    assert fake_api.calls_to("get_top_movers") == [(10080,)]


@pytest.mark.asyncio
async def test_failure_sets_error(fake_api):
    fake_api.queue("get_top_movers", MOVERS, ApiError("down", status_code=500))
    controller = TopMoversController(fake_api)
    await controller.refresh()

    await controller.refresh()

    assert controller.movers.error == "Failed to fetch top movers"
    assert controller.movers.data == MOVERS


@pytest.mark.asyncio
async def test_coin_manager_lists_coins(fake_api):
    fake_api.queue("get_available_coins", ["bitcoin", "ethereum"])
    controller = CoinManagerController(fake_api)

    await controller.refresh()

    assert controller.loaded
    assert controller.coins.data == ["bitcoin", "ethereum"]


@pytest.mark.asyncio
async def test_coin_manager_failure(fake_api):
    fake_api.queue("get_available_coins", ApiError("down"))
    controller = CoinManagerController(fake_api)

    await controller.refresh()

    assert controller.coins.data == []
    assert controller.coins.error == "Failed to fetch available coins"
