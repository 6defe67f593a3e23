from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    LOCALE: str = "en"

    PIPELINE_BASE_URL: str | None = None
    PIPELINE_TIMEOUT_SECONDS: float = 10.0

    SEARCH_DEBOUNCE_MS: int = 250
    REVIEW_FORM_MAX_LENGTH: int = 5000
    VARIANTS_CACHE_TTL_SECONDS: int = 3600


settings = Settings()
