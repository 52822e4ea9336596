"""
Application errors and the generic messages sent back to clients.
"""
from typing import Optional


class ChatbotError(Exception):
    """Base error. ``public_message`` is the only text a client ever sees."""

    status_code: int = 500
    public_message: str = "Internal server error."

    def __init__(self, detail: str = "", original: Optional[BaseException] = None):
        super().__init__(detail or self.public_message)
        self.original = original


class ValidationError(ChatbotError):
    status_code = 400
    public_message = "No files were uploaded."


class DocumentParseError(ChatbotError):
    status_code = 500
    public_message = "Error processing document."


class UpstreamGenerationError(ChatbotError):
    status_code = 500
    public_message = "Error generating response."
