import asyncio

import pytest

from frontend.errors import ApiError
from frontend.services.utils import percent_change
from frontend.state.base import Panel, RequestFence, ViewController
from frontend.state.dashboard import DashboardController
from tests.fakes import price_point


def latest(coin_id, price):
    return price_point(coin_id, "2024-01-15T12:00:00Z", price)


def history(coin_id, *prices):
    return [
        price_point(coin_id, f"2024-01-15T12:{minute:02d}:00Z", price)
        for minute, price in enumerate(prices)
    ]


class TestRequestFence:
    def test_newest_token_is_current(self):
        fence = RequestFence()
        first = fence.issue("latest")
        second = fence.issue("latest")
        assert not fence.is_current("latest", first)
        assert fence.is_current("latest", second)

    def test_slots_are_independent(self):
        fence = RequestFence()
        a = fence.issue("a")
        fence.issue("b")
        assert fence.is_current("a", a)
        assert not fence.is_current("missing", a)


class TestViewControllerLoad:
    @pytest.mark.asyncio
    async def test_applies_result(self, fake_api):
        fake_api.queue("get_available_coins", ["bitcoin"])
        controller = ViewController(fake_api)
        panel = Panel()

        applied = await controller._load("coins", panel, fake_api.get_available_coins, "boom")

        assert applied
        assert panel.data == ["bitcoin"]
        assert not panel.loading
        assert panel.error == ""

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_data(self, fake_api):
        fake_api.queue("get_available_coins", ApiError("down", status_code=500))
        controller = ViewController(fake_api)
        panel = Panel(data=["bitcoin"])

        applied = await controller._load("coins", panel, fake_api.get_available_coins, "Failed")

        assert not applied
        assert panel.data == ["bitcoin"]
        assert panel.error == "Failed"
        assert not panel.loading

    @pytest.mark.asyncio
    async def test_failure_can_clear_data(self, fake_api):
        fake_api.queue("get_available_coins", ApiError("down"))
        controller = ViewController(fake_api)
        panel = Panel(data=["bitcoin"])

        await controller._load(
            "coins", panel, fake_api.get_available_coins, "Failed", clear_on_error=True
        )

        assert panel.data is None

    @pytest.mark.asyncio
    async def test_stale_result_dropped(self, fake_api):
        fake_api.queue("get_available_coins", ["old"], ["new"])
        gate = fake_api.hold("get_available_coins")
        controller = ViewController(fake_api)
        panel = Panel()

        slow = asyncio.create_task(
            controller._load("coins", panel, fake_api.get_available_coins, "Failed")
        )
        await asyncio.sleep(0)
        assert await controller._load("coins", panel, fake_api.get_available_coins, "Failed")
        gate.set()

        assert not await slow
        assert panel.data == ["new"]


class TestDashboardController:
    @pytest.mark.asyncio
    async def test_refresh_loads_latest_and_history(self, fake_api):
        fake_api.queue("get_latest_price", latest("bitcoin", 42000.0))
        fake_api.queue("get_price_history", history("bitcoin", 1.0, 2.0))
        controller = DashboardController(fake_api)

        assert controller.needs_refresh()
        await controller.refresh()

        assert controller.state.latest_price["price_usd"] == 42000.0
        assert len(controller.state.price_history) == 2
        assert controller.state.error == ""
        assert not controller.state.loading
        assert not controller.needs_refresh()
        assert fake_api.calls_to("get_price_history") == [("bitcoin", 60)]

    @pytest.mark.asyncio
    async def test_history_stored_oldest_first(self, fake_api):
        fake_api.queue("get_latest_price", latest("bitcoin", 150.0))
        fake_api.queue("get_price_history", [
            price_point("bitcoin", "2024-01-15T12:02:00Z", 150.0),
            price_point("bitcoin", "2024-01-15T12:00:00.5Z", 100.0),
            price_point("bitcoin", "2024-01-15T12:01:00Z", 120.0),
        ])
        controller = DashboardController(fake_api)

        await controller.refresh()

        prices = [p["price_usd"] for p in controller.state.price_history]
        assert prices == [100.0, 120.0, 150.0]
        assert percent_change(controller.state.price_history) == pytest.approx(50.0)

    @pytest.mark.asyncio
    async def test_time_range_change_refetches(self, fake_api):
        fake_api.queue("get_latest_price", latest("bitcoin", 1.0))
        fake_api.queue("get_price_history", [])
        controller = DashboardController(fake_api)

        await controller.set_time_range(240)

        assert controller.state.time_range == 240
        assert fake_api.calls_to("get_price_history") == [("bitcoin", 240)]
        assert fake_api.calls_to("get_latest_price") == [("bitcoin",)]

    @pytest.mark.asyncio
    async def test_select_coin_closes_manager(self, fake_api):
        fake_api.queue("get_latest_price", latest("ethereum", 1.0))
        fake_api.queue("get_price_history", [])
        controller = DashboardController(fake_api)
        controller.toggle_coin_manager()
        assert controller.state.show_coin_manager

        await controller.select_coin("ethereum")

        assert controller.state.selected_coin == "ethereum"
        assert not controller.state.show_coin_manager

    @pytest.mark.asyncio
    async def test_latest_failure_sets_error(self, fake_api):
        fake_api.queue("get_latest_price", ApiError("down", status_code=500))
        fake_api.queue("get_price_history", ApiError("down", status_code=500))
        controller = DashboardController(fake_api)

        await controller.refresh()

        assert controller.state.error
        assert not controller.state.loading

    @pytest.mark.asyncio
    async def test_history_success_clears_error(self, fake_api):
        fake_api.queue("get_latest_price", ApiError("down"), latest("bitcoin", 5.0))
        fake_api.queue("get_price_history", ApiError("down"), history("bitcoin", 5.0))
        controller = DashboardController(fake_api)

        await controller.refresh()
        assert controller.state.error

        await controller.refresh()
        assert controller.state.error == ""
        assert controller.state.price_history

    @pytest.mark.asyncio
    async def test_slow_response_for_old_coin_is_discarded(self, fake_api):
        fake_api.queue("get_latest_price", latest("bitcoin", 42000.0), latest("ethereum", 2500.0))
        fake_api.queue("get_price_history", history("bitcoin", 1.0), history("ethereum", 2.0, 3.0))
        latest_gate = fake_api.hold("get_latest_price")
        history_gate = fake_api.hold("get_price_history")
        controller = DashboardController(fake_api)

        slow = asyncio.create_task(controller.select_coin("bitcoin"))
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        await controller.select_coin("ethereum")
        latest_gate.set()
        history_gate.set()
        await slow

        assert controller.state.selected_coin == "ethereum"
        assert controller.state.latest_price["coin_id"] == "ethereum"
        assert [p["coin_id"] for p in controller.state.price_history] == ["ethereum", "ethereum"]
        assert not controller.state.loading
