from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "SwiftShip"
    APP_TAGLINE: str = "Fast & Reliable Delivery"

    # "alert" or "modal", see presenters/registry.py
    DEFAULT_PRESENTATION: str = "alert"

    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
