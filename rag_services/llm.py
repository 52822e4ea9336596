"""
LLM service for reply generation
"""
from typing import Dict, List, Optional

from fastapi.concurrency import run_in_threadpool
from openai import OpenAI

from core.exceptions import UpstreamGenerationError
from core.logger import get_logger
from rag_services.state import ConversationStore

logger = get_logger(__name__)

SYSTEM_PROMPT = (
    "You are Long Distance Love®,a Smartbot developed by Phoenix Labs under Jmedia Corporation. "
    "You are a a chatbot designed to assist with maintaining long-distance relationships. "
    "You provide communication tips, activity suggestions, and emotional support to help "
    "couples stay connected."
)


class LLMService:
    """Builds prompts from stored history and asks OpenAI's chat model for a reply."""

    def __init__(self, model: str, store: ConversationStore, client=None, api_key: Optional[str] = None):
        # The OpenAI client is built on first use so the app imports
        # without OPENAI_API_KEY being set.
        self._client = client
        self._api_key = api_key
        self.model = model
        self.store = store

    def _ensure_client(self):
        if self._client is None:
            try:
                self._client = OpenAI(api_key=self._api_key) if self._api_key else OpenAI()
            except Exception as e:
                raise UpstreamGenerationError(
                    "OpenAI client could not be initialized. "
                    "Set the OPENAI_API_KEY environment variable.",
                    original=e,
                ) from e
        return self._client

    def build_messages(self, user_id: str, user_message: str, document_text: Optional[str] = None) -> List[Dict]:
        """System persona, then stored history, then the new user turn."""
        if document_text is not None:
            content = f"Here is the document text: {document_text}. The user asked: {user_message}"
        else:
            content = user_message

        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            *self.store.get_history(user_id),
            {"role": "user", "content": content},
        ]

    def _complete(self, messages: List[Dict]) -> str:
        client = self._ensure_client()
        completion = client.chat.completions.create(
            model=self.model,
            messages=messages,
        )
        content = completion.choices[0].message.content
        if not isinstance(content, str):
            raise ValueError("Completion response carried no message content")
        return content

    async def generate(self, user_id: str, user_message: str, document_text: Optional[str] = None) -> str:
        """
        Generate a reply and record the exchange.

        Requests for the same user are serialised so history reads and
        writes never interleave. On failure nothing is recorded.
        """
        async with self.store.lock_for(user_id):
            messages = self.build_messages(user_id, user_message, document_text)
            mode = "document" if document_text is not None else "regular"
            logger.debug("Generating %s response for %s with %d messages", mode, user_id, len(messages))

            try:
                reply = await run_in_threadpool(self._complete, messages)
            except UpstreamGenerationError:
                raise
            except Exception as e:
                logger.debug("Completion failed for %s (%s): %r", user_id, mode, e)
                raise UpstreamGenerationError(f"Completion request failed: {e}", original=e) from e

            self.store.record_exchange(user_id, "user", user_message)
            self.store.record_exchange(user_id, "assistant", reply)
            return reply
