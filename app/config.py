# config.py
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _split_origins(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """Runtime configuration read from the environment (and a local .env)."""

    def __init__(self):
        self.pg_host = os.getenv("PGHOST", "localhost")
        self.pg_user = os.getenv("PGUSER", "hrms")
        self.pg_password = os.getenv("PGPASSWORD", "hrmspass")
        self.pg_database = os.getenv("PGDATABASE", "hrms_db")
        self.pg_port = int(os.getenv("PGPORT", "5432"))

        self.port = int(os.getenv("PORT", "8080"))
        self.cors_origins = _split_origins(os.getenv("CORS_ORIGINS", "*"))
        self.sql_echo = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        # DATABASE_URL wins over the individual PG* variables
        self._database_url = os.getenv("DATABASE_URL")

    @property
    def database_url(self) -> str:
        if self._database_url:
            return self._database_url
        return (
            f"postgresql+asyncpg://{self.pg_user}:{self.pg_password}"
            f"@{self.pg_host}:{self.pg_port}/{self.pg_database}"
        )


settings = Settings()
