from functools import lru_cache

from fastapi import Depends

from core.config import settings
from rag_services.llm import LLMService
from rag_services.pdf_processor import PDFProcessor
from rag_services.state import ConversationStore, conversation_store


def get_conversation_store() -> ConversationStore:
    return conversation_store


@lru_cache
def _llm_service_for(store: ConversationStore) -> LLMService:
    return LLMService(settings.CHAT_MODEL, store, api_key=settings.OPENAI_API_KEY)


def get_llm_service(store: ConversationStore = Depends(get_conversation_store)) -> LLMService:
    # One service per store, so routers and the service always share history
    return _llm_service_for(store)


def get_pdf_processor() -> PDFProcessor:
    return PDFProcessor()
