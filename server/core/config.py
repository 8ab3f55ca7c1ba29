# server/core/config.py

import os
import secrets
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from core.logger import get_logger


log = get_logger("config")


# -------------------------------
# Application Settings
# -------------------------------

class Settings(BaseModel):
    """
    Process-wide configuration, built once at startup and passed
    by reference into the storage layer and both auth components.
    """
    database_url: str = "sqlite:///./app.db"
    jwt_secret_key: str = Field(min_length=1)
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = Field(60, gt=0)
    bcrypt_rounds: int = Field(12, ge=4, le=31)
    log_level: str = "INFO"

    model_config = {"frozen": True}

    @field_validator("jwt_algorithm")
    @classmethod
    def check_algorithm(cls, value: str) -> str:
        if not value.startswith("HS"):
            raise ValueError("Only HMAC algorithms (HS256, HS384, HS512) are supported")
        return value

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        secret = os.getenv("JWT_SECRET_KEY")
        if not secret:
            log.warning(
                "JWT_SECRET_KEY is not set; using a random secret. "
                "Tokens will not survive a restart."
            )
            secret = secrets.token_urlsafe(32)

        return cls(
            database_url=os.getenv("DATABASE_URL", "sqlite:///./app.db"),
            jwt_secret_key=secret,
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            access_token_expire_minutes=os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"),
            bcrypt_rounds=os.getenv("BCRYPT_ROUNDS", "12"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
