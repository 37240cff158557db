# src/settings.py
import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Etsy Description Writer")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")
    API_PORT: int = Field(default=4000)

    # openrouter
    OPENROUTER_API_KEY: str | None = None
    OPENROUTER_BASE_URL: str = Field(default="https://openrouter.ai/api/v1")
    OPENROUTER_MODEL: str = Field(default="tngtech/deepseek-r1t2-chimera:free")
    OPENROUTER_TIMEOUT_SEC: float = Field(default=120.0, gt=0.0)
    MAX_OUTPUT_TOKENS: int | None = Field(default=None, gt=0)
    APP_REFERER: str = Field(default="https://github.com/example/etsy-description-writer")
    APP_TITLE: str = Field(default="Etsy Description Writer")

    # history
    DATA_FILE: Path = Field(default=Path("data/products.json"))
    HISTORY_LIMIT: int = Field(default=50, gt=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
