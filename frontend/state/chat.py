"""Natural-language price query transcript."""

import logging
from typing import List

from frontend.errors import ApiError
from frontend.schemas import ChatMessage, PriceData
from frontend.services.api import ApiService

logger = logging.getLogger(__name__)

APOLOGY = "Sorry, I could not process that request."


class ChatTranscript:
    """In-memory log of questions and answers, cleared with the session"""

    def __init__(self):
        self.messages: List[ChatMessage] = []

    def add_user(self, text: str) -> ChatMessage:
        message = ChatMessage(role="user", text=text)
        self.messages.append(message)
        return message

    def add_results(self, results: List[PriceData]) -> ChatMessage:
        message = ChatMessage(role="assistant", results=results)
        self.messages.append(message)
        return message

    def add_assistant_text(self, text: str) -> ChatMessage:
        message = ChatMessage(role="assistant", text=text)
        self.messages.append(message)
        return message

    def clear(self):
        self.messages.clear()


class ChatSession:
    """Sends questions to the ask endpoint and records the exchange"""

    def __init__(self, api: ApiService):
        self.api = api
        self.transcript = ChatTranscript()
        self.loading = False

    async def ask(self, question: str) -> bool:
        """Ask a question; returns True when the backend answered.

        The question is logged before the call is made, so a failure still
        leaves it in the transcript, followed by the apology.
        """
        text = (question or "").strip()
        if not text:
            return False

        self.transcript.add_user(text)
        self.loading = True
        try:
            results = await self.api.ask_ai(text)
        except ApiError as e:
            logger.error("AI query failed: %s", e)
            self.transcript.add_assistant_text(APOLOGY)
            return False
        finally:
            self.loading = False

        self.transcript.add_results(results or [])
        return True
