from typing import Optional
from pydantic import BaseModel


# Request Schemas
class ChatRequest(BaseModel):
    message: str
    userId: Optional[str] = None


# Response Schemas
class ChatResponse(BaseModel):
    response: str


class UploadResponse(BaseModel):
    message: str
