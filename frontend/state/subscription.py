"""Daily email report subscription form."""

import logging
from typing import Awaitable, Callable, Optional

from frontend.errors import ApiError
from frontend.schemas import SubscriptionResponse
from frontend.services.api import ApiService
from frontend.services.utils import is_valid_email

logger = logging.getLogger(__name__)

INVALID_EMAIL = "Please enter a valid email address"


class SubscriptionController:
    """Validates the address locally before any call to the backend"""

    def __init__(self, api: Optional[ApiService] = None):
        self.api = api or ApiService()
        self.loading = False
        self.message = ""
        self.error = ""

    async def subscribe(self, email: str) -> bool:
        return await self._submit(
            email, self.api.subscribe, "Subscription successful", "Failed to subscribe"
        )

    async def unsubscribe(self, email: str) -> bool:
        return await self._submit(
            email, self.api.unsubscribe, "Unsubscribed successfully", "Failed to unsubscribe"
        )

    async def _submit(
        self,
        email: str,
        call: Callable[[str], Awaitable[SubscriptionResponse]],
        success_message: str,
        failure_message: str,
    ) -> bool:
        """Returns True on success so the form can clear its input"""
        self.message = ""
        self.error = ""

        address = (email or "").strip()
        if not is_valid_email(address):
            self.error = INVALID_EMAIL
            return False

        self.loading = True
        try:
            response = await call(address)
        except ApiError as e:
            logger.error("%s for %s: %s", failure_message, address, e)
            self.error = e.message or failure_message
            return False
        finally:
            self.loading = False

        self.message = (response or {}).get("message") or success_message
        return True
