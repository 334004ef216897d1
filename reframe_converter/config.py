import os
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "REFRAME Coordinate Converter"
    debug: bool = os.getenv("DEBUG", "False").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_dir: str = "logs"

    # Security
    allowed_origins: list = ["*"]  # In production, specify your domain

    # REFRAME requests are unbounded unless a timeout is configured
    request_timeout: Optional[float] = None
    strict_response: bool = False

    batch_max_rows: int = 1000

    class Config:
        env_file = ".env"

settings = Settings()
