from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "Items API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)

    # Security - single shared bearer secret
    api_token: str = "mysecrettoken"

    @field_validator("api_token")
    @classmethod
    def validate_api_token(cls, v: str) -> str:
        """Reject blank tokens so the auth middleware can never match an empty credential"""
        if not v or not v.strip():
            raise ValueError(
                "api_token must be a non-empty string. "
                "Set API_TOKEN environment variable or update .env file."
            )
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
        case_sensitive=False
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
