import secrets
from functools import lru_cache

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = Field(default="Jobly API", validation_alias=AliasChoices("JOBLY_APP_NAME", "APP_NAME"))
    ENV: str = Field(default="lab", validation_alias=AliasChoices("JOBLY_ENV", "ENV"))  # lab|test|prod
    DATABASE_URL: str = Field(
        default="sqlite:///./jobly.db",
        validation_alias=AliasChoices("JOBLY_DATABASE_URL", "DATABASE_URL"),
    )
    LOG_LEVEL: str = Field(default="INFO", validation_alias=AliasChoices("JOBLY_LOG_LEVEL", "LOG_LEVEL"))

    # Auth (JWT)
    AUTH_JWT_SECRET: str = Field(
        default="",
        validation_alias=AliasChoices("JOBLY_AUTH_JWT_SECRET", "AUTH_JWT_SECRET", "SECRET_KEY"),
    )
    AUTH_JWT_TTL_MIN: int = Field(default=60, validation_alias=AliasChoices("JOBLY_AUTH_JWT_TTL_MIN", "AUTH_JWT_TTL_MIN"))
    # pbkdf2 iterations; tests turn this down
    PASSWORD_HASH_ROUNDS: int = Field(
        default=29000,
        ge=1,
        validation_alias=AliasChoices("JOBLY_PASSWORD_HASH_ROUNDS", "PASSWORD_HASH_ROUNDS"),
    )

    @model_validator(mode="after")
    def _security_invariants(self):
        sec = (self.AUTH_JWT_SECRET or "").strip()

        if self.ENV == "prod":
            if not sec:
                raise ValueError("SECURITY: AUTH_JWT_SECRET is required when ENV=prod")
            if len(sec) < 32:
                raise ValueError("SECURITY: AUTH_JWT_SECRET too short (min 32 chars)")
        elif not sec:
            # tokens will not survive a restart
            sec = secrets.token_urlsafe(48)

        self.AUTH_JWT_SECRET = sec
        self.LOG_LEVEL = self.LOG_LEVEL.upper()
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
