from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from core.config import settings
from core.logger import get_logger
from dependencies.services import get_conversation_store, get_llm_service
from rag_services.llm import LLMService
from rag_services.state import ConversationStore
from schemas.chat import ChatRequest, ChatResponse

router = APIRouter()
logger = get_logger(__name__)


@router.get("/chat-health", response_class=PlainTextResponse)
async def chat_health():
    return "Chat route is working"


@router.post("/chat", response_model=ChatResponse)
async def chat(
    payload: ChatRequest,
    store: ConversationStore = Depends(get_conversation_store),
    llm_service: LLMService = Depends(get_llm_service),
):
    """
    Answer a chat message, using the user's uploaded document when there is one.

    Request body:
    ```json
    {
        "message": "How do we keep date night going across time zones?",
        "userId": "alex"
    }
    ```

    Response:
    ```json
    {
        "response": "AI response here"
    }
    ```

    Generation failures surface as a 500 with a generic body.
    """
    user_id = payload.userId or settings.DEFAULT_USER_ID
    document_text = store.get_document(user_id)

    if document_text:
        logger.info("Chat for %s using uploaded document", user_id)
        reply = await llm_service.generate(user_id, payload.message, document_text)
    else:
        logger.info("Chat for %s", user_id)
        reply = await llm_service.generate(user_id, payload.message)

    return ChatResponse(response=reply)
