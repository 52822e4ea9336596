import tempfile
from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List, Optional


class Settings(BaseSettings):
    app_name: str = "Long Distance Love API"
    environment: str = Field(default="development")

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    OPENAI_API_KEY: Optional[str] = None

    # CORS
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])

    # Chat Settings
    CHAT_MODEL: str = "gpt-4o-mini-2024-07-18"
    MAX_HISTORY_MESSAGES: int = 5
    DEFAULT_USER_ID: str = "default_user"

    # File Upload Settings
    UPLOAD_DIR: str = Field(default_factory=tempfile.gettempdir)

    # Logging (derived from environment when unset)
    LOG_LEVEL: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }


settings = Settings()
