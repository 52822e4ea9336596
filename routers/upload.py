import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse

from core.config import settings
from core.exceptions import DocumentParseError, ValidationError
from core.logger import get_logger
from dependencies.services import get_conversation_store, get_pdf_processor
from rag_services.pdf_processor import PDFProcessor
from rag_services.state import ConversationStore
from schemas.chat import UploadResponse

router = APIRouter()
logger = get_logger(__name__)


def _write_staged(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


@contextmanager
def staged_upload(filename: Optional[str]) -> Iterator[Path]:
    """Yield a unique path under ``UPLOAD_DIR`` and remove whatever lands there on exit."""
    suffix = Path(filename or "").suffix or ".pdf"
    path = Path(settings.UPLOAD_DIR) / f"upload_{uuid.uuid4().hex}{suffix}"
    try:
        yield path
    finally:
        # exists() is False when the directory could not be created
        if path.exists():
            path.unlink()


@router.get("/upload-health", response_class=PlainTextResponse)
async def upload_health():
    return "Upload route is working"


@router.post("/upload", response_model=UploadResponse)
async def upload_document(
    document: Optional[UploadFile] = File(None),
    userId: Optional[str] = Form(None),
    store: ConversationStore = Depends(get_conversation_store),
    pdf_processor: PDFProcessor = Depends(get_pdf_processor),
):
    """
    Extract the text of an uploaded PDF and keep it for the user's next chats.

    Multipart fields:
    - document: the PDF file (required)
    - userId: conversation owner (optional)

    A new upload replaces the user's previous document.
    """
    if document is None:
        raise ValidationError("Multipart field 'document' is missing")

    user_id = userId or settings.DEFAULT_USER_ID
    data = await document.read()

    try:
        with staged_upload(document.filename) as path:
            await run_in_threadpool(_write_staged, path, data)
            text = await run_in_threadpool(pdf_processor.extract_text, path)
    except OSError as e:
        raise DocumentParseError(f"Could not stage upload: {e}", original=e) from e

    store.set_document(user_id, text)
    logger.info("Stored %d characters of %s for %s", len(text), document.filename, user_id)

    return UploadResponse(message="Document uploaded and processed successfully.")
