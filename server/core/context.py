# server/core/context.py

from dataclasses import dataclass
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from core.config import Settings
from core.credentials import CredentialStore, create_pwd_context
from core.tokens import TokenService
from database import create_db_engine, create_session_factory


@dataclass
class AppContext:
    """
    Everything a request needs that lives for the whole process:
    settings, the pooled engine and both auth components.
    """
    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    credentials: CredentialStore
    tokens: TokenService


def build_context(settings: Settings) -> AppContext:
    engine = create_db_engine(settings.database_url)
    credentials = CredentialStore(create_pwd_context(settings.bcrypt_rounds))
    tokens = TokenService(
        credentials,
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.access_token_expire_minutes,
    )
    return AppContext(
        settings=settings,
        engine=engine,
        session_factory=create_session_factory(engine),
        credentials=credentials,
        tokens=tokens,
    )
