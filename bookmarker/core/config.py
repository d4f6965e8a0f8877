import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class Settings:
    """Centralised application configuration sourced from environment variables."""

    def __init__(self) -> None:
        load_dotenv()
        self.jwt_secret = os.getenv("JWT_SECRET", "change-me")
        self.jwt_exp_minutes = self._get_int("JWT_EXP_MINUTES", default=60)
        self.database_path = Path(os.getenv("DATABASE_PATH", "data/bookmarker.db")).resolve()
        self.app_base_url = os.getenv("APP_BASE_URL", "http://localhost:3000").rstrip("/")
        self.smtp_host = os.getenv("SMTP_HOST")
        self.smtp_port = self._get_int("SMTP_PORT", default=587)
        self.smtp_username = os.getenv("SMTP_USERNAME")
        self.smtp_password = os.getenv("SMTP_PASSWORD")
        self.mail_from = os.getenv("MAIL_FROM")
        self.mail_from_name = os.getenv("MAIL_FROM_NAME", "Bookmarker")
        origins = os.getenv("CORS_ALLOW_ORIGINS")
        if origins:
            self.cors_allow_origins = [item.strip() for item in origins.split(",") if item.strip()]
        else:
            self.cors_allow_origins = ["*"]

    @staticmethod
    def _get_int(key: str, default: Optional[int] = None) -> int:
        value = os.getenv(key)
        if value is None or value == "":
            if default is None:
                raise RuntimeError(f"Missing required environment variable: {key}")
            return default
        try:
            return int(value)
        except ValueError as exc:
            raise RuntimeError(f"Environment variable {key} must be an integer") from exc
