from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from chat_api import __version__

load_dotenv()


class Settings(BaseSettings):
    PROJECT_NAME: str = "chat-api"
    VERSION: str = __version__
    API_PREFIX: str = "/api/openai"

    # OpenAI 호환 엔드포인트
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_BASE_URL: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_TEMPERATURE: float = 0.7
    OPENAI_TIMEOUT: Optional[float] = None
    OPENAI_MAX_RETRIES: Optional[int] = None

    CHAT_SYSTEM_PROMPT: Optional[str] = None

    LOG_LEVEL: str = "INFO"
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8000

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", env_file_encoding="utf-8")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
