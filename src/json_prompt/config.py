from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
STRUCTURED_METHODS = ("function_calling", "json_schema", "json_mode")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    openai_api_key: str = Field(default="", alias="OPENAI_API_KEY")
    openai_base_url: str = Field(default=GEMINI_OPENAI_BASE_URL, alias="OPENAI_BASE_URL")
    openai_model: str = Field(default="gemini-1.5-flash", alias="OPENAI_MODEL")
    llm_timeout_seconds: float = Field(default=60.0, alias="LLM_TIMEOUT_SECONDS")
    llm_num_retries: int = Field(default=1, alias="LLM_NUM_RETRIES")
    llm_structured_method: str = Field(default="function_calling", alias="LLM_STRUCTURED_METHOD")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    copy_reset_ms: int = Field(default=2000, alias="COPY_RESET_MS")

    def model_post_init(self, __context) -> None:  # type: ignore[override]
        method = self.llm_structured_method.strip().lower()
        self.llm_structured_method = method if method in STRUCTURED_METHODS else "function_calling"
        level = self.log_level.strip().upper()
        self.log_level = level if level in LOG_LEVELS else "INFO"
        self.copy_reset_ms = max(self.copy_reset_ms, 0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
