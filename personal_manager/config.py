import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


DEFAULT_CURRENCY = "BDT"


class Settings:
    """Runtime configuration read from the environment (and an optional .env file)."""

    @property
    def database_url(self) -> str:
        return os.getenv("DATABASE_URL", "sqlite:///personal_manager.db")

    @property
    def sql_echo(self) -> bool:
        return os.getenv("SQL_ECHO", "false").lower() == "true"

    @property
    def jwt_secret(self) -> str:
        secret = os.getenv("JWT_SECRET")
        if not secret:
            raise RuntimeError("JWT_SECRET is not configured")
        return secret

    @property
    def jwt_algorithm(self) -> str:
        return os.getenv("JWT_ALGORITHM", "HS256")

    @property
    def token_ttl_hours(self) -> int:
        return int(os.getenv("TOKEN_TTL_HOURS", "24"))

    @property
    def bcrypt_rounds(self) -> int:
        return int(os.getenv("BCRYPT_ROUNDS", "12"))

    @property
    def admin_emails(self) -> List[str]:
        raw = os.getenv("ADMIN_EMAILS", "")
        return [email.strip().lower() for email in raw.split(",") if email.strip()]

    @property
    def cors_origins(self) -> List[str]:
        raw = os.getenv("CORS_ORIGINS", "*")
        return [origin.strip() for origin in raw.split(",") if origin.strip()]


settings = Settings()
