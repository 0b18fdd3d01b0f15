# src/settings.py
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Search Banners")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    # debug turns unsupported banner kinds into assertion failures
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
