"""Runtime configuration for API clients."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gameon_sdk.core.codec import BodyCodec, JsonCodec
from gameon_sdk.http import ApiTransport, HttpxTransport

SDK_LOGGER_NAME = "gameon_sdk"


class Settings(BaseSettings):
    """Runtime configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", alias="GAMEON_LOG_LEVEL")
    http_timeout_seconds: float = Field(default=10.0, alias="GAMEON_HTTP_TIMEOUT_SECONDS", gt=0.0)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()  # type: ignore[call-arg]


class ApiConfiguration:
    """Dependencies shared by every client built on ``ApiClient``."""

    def __init__(self, api_client: ApiTransport, *, codec: BodyCodec | None = None) -> None:
        self.api_client = api_client
        self.codec: BodyCodec = codec or JsonCodec()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ApiConfiguration:
        """Build an httpx-backed configuration and apply the SDK log level."""

        settings = settings or get_settings()
        logging.getLogger(SDK_LOGGER_NAME).setLevel(
            getattr(logging, settings.log_level.upper(), logging.INFO)
        )
        return cls(HttpxTransport(timeout=settings.http_timeout_seconds))

    async def aclose(self) -> None:
        """Close the transport when it supports closing."""

        close = getattr(self.api_client, "close", None)
        if callable(close):
            await close()

    async def __aenter__(self) -> ApiConfiguration:
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()
