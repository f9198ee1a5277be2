"""
Shared machinery for the view controllers.

A controller owns the state of one page. Each value it fetches lives in a
``Panel`` (data, loading flag, error string) filled through ``_load``. Every
load takes a token from the controller's ``RequestFence``; when the response
arrives, it is applied only if no newer load has been started for the same
slot since, so a slow response for an old selection cannot overwrite the
result of a newer one.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Generic, Optional, TypeVar

from frontend.errors import ApiError
from frontend.services.api import ApiService

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RequestFence:
    """Issues per-slot tokens; only the newest token of a slot is current"""

    def __init__(self):
        self._counter = itertools.count(1)
        self._latest: Dict[str, int] = {}

    def issue(self, slot: str) -> int:
        token = next(self._counter)
        self._latest[slot] = token
        return token

    def is_current(self, slot: str, token: int) -> bool:
        return self._latest.get(slot) == token


@dataclass
class Panel(Generic[T]):
    """Fetched value plus its loading and error state"""
    data: Optional[T] = None
    loading: bool = False
    error: str = ""

    def clear(self):
        self.data = None
        self.error = ""


class ViewController:
    """Base class for page controllers"""

    def __init__(self, api: Optional[ApiService] = None):
        self.api = api or ApiService()
        self.fence = RequestFence()

    async def _load(
        self,
        slot: str,
        panel: Panel,
        call: Callable[[], Awaitable[Any]],
        failure_message: str,
        clear_on_error: bool = False,
    ) -> bool:
        """Run ``call`` and store its result in ``panel``.

        Returns True when the result was applied. A stale result (a newer
        load of ``slot`` started meanwhile) is dropped and leaves the panel
        to the newer load.
        """
        token = self.fence.issue(slot)
        panel.loading = True
        panel.error = ""
        try:
            result = await call()
        except ApiError as e:
            if not self.fence.is_current(slot, token):
                logger.debug("Dropping stale failure for %s: %s", slot, e)
                return False
            logger.error("%s: %s", failure_message, e)
            panel.error = failure_message
            if clear_on_error:
                panel.data = None
            panel.loading = False
            return False
        if not self.fence.is_current(slot, token):
            logger.debug("Dropping stale result for %s (token %s)", slot, token)
            return False
        panel.data = result
        panel.loading = False
        return True
