from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Environment mode: dev or prod
    ENV: Literal["dev", "prod"] = "dev"

    # Database (unset = demo mode, reads served from the sample dataset)
    DATABASE_URL: str | None = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    SLACK_WEBHOOK_URL: str | None = None

    # Prompt discovery relay
    ZAPIER_WEBHOOK_URL: str | None = None
    RELAY_TIMEOUT_SECONDS: float = 10.0

    # Persona prompt enrichment
    ENRICHMENT_MODE: Literal["background", "inline"] = "background"
    BACKGROUND_DRAIN_SECONDS: float = 5.0
    PROMPTS_DIR: str = "data/prompts"

    # Docs Configuration
    DOCS_ENABLED: bool | None = None  # Override docs setting (None = auto based on ENV)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",  # ignore unrelated keys in local .env
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENV == "prod"

    @property
    def is_development(self) -> bool:
        return self.ENV == "dev"

    @property
    def demo_mode(self) -> bool:
        """Without a database every taxonomy is served from the fallback dataset."""
        return not self.DATABASE_URL

    @property
    def debug_enabled(self) -> bool:
        return self.is_development

    @property
    def effective_log_level(self) -> str:
        """Return appropriate log level based on environment."""
        if self.is_production:
            # In production, minimum INFO level (ignore DEBUG)
            return self.LOG_LEVEL if self.LOG_LEVEL.upper() != "DEBUG" else "INFO"
        return self.LOG_LEVEL

    @property
    def docs_enabled(self) -> bool:
        """Swagger/ReDoc docs enabled based on environment or override."""
        if self.DOCS_ENABLED is not None:
            return self.DOCS_ENABLED
        return self.is_development


settings = Settings()
