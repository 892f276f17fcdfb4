"""Application settings and validation."""

import os
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent


class Settings:
    ENV: str
    DATABASE_URL: str
    DB_ECHO: bool
    ALLOW_DEV_CORS: bool
    LOG_LEVEL: str

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE / 'app.db'}")
        self.DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", str(self.ENV == "dev")).lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self._validate()

    def _validate(self):
        if not self.DATABASE_URL.strip():
            raise RuntimeError("DATABASE_URL must not be empty")
        if self.ENV != "dev" and self.ALLOW_DEV_CORS:
            raise RuntimeError("ALLOW_DEV_CORS opens CORS to every origin and is only allowed when ENV=dev")


settings = Settings()
