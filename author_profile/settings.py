from typing import Self

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=True, env_file=".env", extra="ignore"
    )

    ENVIRONMENT: str = "development"

    # Database settings
    DB_DRIVER: str = "postgresql+asyncpg"
    DB_USER: str = "postgres"
    DB_PASSWORD: SecretStr = SecretStr("postgres")
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "author"
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    # Full URL, takes precedence over the individual components when set
    DB_URL_OVERRIDE: str | None = None

    @property
    def DATABASE_URL(self) -> str:
        """Construct the database URL from individual components."""
        if self.DB_URL_OVERRIDE:
            return self.DB_URL_OVERRIDE

        password = self.DB_PASSWORD.get_secret_value()
        return (
            f"{self.DB_DRIVER}://{self.DB_USER}:{password}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    # Database initialization settings
    DB_INIT_RETRY_INTERVAL: int = 2
    DB_INIT_MAX_RETRIES: int = 10

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE_PATH: str = "logs/author_profile.log"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Reject level names the logging module does not know."""
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return v.upper()

    @model_validator(mode="after")
    def check_production_log_level(self) -> Self:
        if self.ENVIRONMENT == "production" and self.LOG_LEVEL == "DEBUG":
            raise ValueError("DEBUG logging cannot be enabled in production")
        return self


app_settings = Settings()
