# routeline/core/config.py
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (.env file).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    APP_NAME: str = "Route Geometry API"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Decimal places carried by encoded polylines (5 for Google, 6 for OSRM/Valhalla)
    POLYLINE_PRECISION: int = Field(default=5, ge=1, le=10)


settings = Settings()
