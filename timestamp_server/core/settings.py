from __future__ import annotations
import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

class Settings(BaseModel):
    APP_NAME: str = os.getenv("APP_NAME", "timestamp-server")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "4567"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", "")
    # Empty means "whatever the working directory is when the request lands"
    BUILD_INFO_DIR: str = os.getenv("BUILD_INFO_DIR", "")

settings = Settings()
