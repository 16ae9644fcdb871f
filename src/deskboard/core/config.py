from typing import Optional

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    app_name: str = "Deskboard"
    debug: bool = False
    log_level: str = "INFO"
    # Public quote service; LOCAL_API_BASE points at the tasks/notes backend
    quote_api_base: str = "https://veff-2026-quotes.netlify.app/api/v1"
    local_api_base: str = "http://localhost:3000/api/v1"
    default_category: str = "general"
    # None means requests never time out
    request_timeout: Optional[float] = None

    @field_validator("quote_api_base", "local_api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"


settings = Settings()
