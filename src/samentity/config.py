"""Configuration settings for samentity."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # SAM Entity API location. Point SAM_ENTITY_API_HOST at
    # api-alpha.sam.gov to target the alpha environment.
    SAM_ENTITY_API_SCHEME: str = "https"
    SAM_ENTITY_API_HOST: str = "api.sam.gov"
    SAM_ENTITY_API_PATH: str = "entity-information/v2/entities"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
