from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    app_name: str = Field("oilfield-ticket-extractor", alias="APP_NAME")
    app_env: str = Field("dev", alias="APP_ENV")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Anthropic Messages API (key is checked per request, not at startup)
    anthropic_api_key: str | None = Field(default=None, alias="ANTHROPIC_API_KEY")
    anthropic_base_url: str = Field("https://api.anthropic.com", alias="ANTHROPIC_BASE_URL")
    anthropic_version: str = Field("2023-06-01", alias="ANTHROPIC_VERSION")
    anthropic_model: str = Field("claude-sonnet-4-20250514", alias="ANTHROPIC_MODEL")
    anthropic_max_tokens: int = Field(1024, alias="ANTHROPIC_MAX_TOKENS")
    anthropic_timeout_seconds: float = Field(60.0, alias="ANTHROPIC_TIMEOUT_SECONDS")

    # Value sent in Access-Control-Allow-Origin on every response
    cors_allow_origin: str = Field("*", alias="CORS_ALLOW_ORIGIN")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

settings = Settings()
