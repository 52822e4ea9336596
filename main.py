from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from core.config import settings
from core.exceptions import ChatbotError
from core.logger import get_logger

logger = get_logger(__name__)


async def chatbot_error_handler(request: Request, exc: ChatbotError) -> PlainTextResponse:
    # Full detail stays in the logs; clients only get the generic message
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed with %s: %s",
            request.method, request.url.path, type(exc).__name__, exc,
            exc_info=exc.original or exc,
        )
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return PlainTextResponse(exc.public_message, status_code=exc.status_code)


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.app_name,
        description="Chat API for long-distance couples with optional PDF context",
        version="1.0.0",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(ChatbotError, chatbot_error_handler)

    @application.get("/", response_class=PlainTextResponse)
    async def home():
        return "Hello World"

    # Routers are imported lazily to avoid circular deps during app creation
    from routers.chat import router as chat_router
    from routers.upload import router as upload_router

    application.include_router(chat_router, tags=["chat"])
    application.include_router(upload_router, tags=["upload"])

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn
    logger.info("Server is running on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
