# server/core/tokens.py

from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from core.credentials import CredentialStore
from core.errors import NotAuthorized
from core.logger import get_logger
from models.user import User as UserModel


log = get_logger("tokens")


class TokenService:
    """
    Issues and resolves stateless bearer tokens.

    A token is a JWT signed with the process-wide secret and carrying the
    user id in `sub`. Resolution checks the signature and expiry first,
    then re-reads the user so that deleting an account revokes its tokens.
    Every failure path raises the same NotAuthorized error.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        secret_key: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
    ):
        self.credentials = credentials
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def create_access_token(self, user_id: str, expires_delta: timedelta | None = None) -> str:
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.expire_minutes))
        to_encode = {"sub": user_id, "iat": now, "exp": expire}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode_subject(self, token: str) -> str:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            log.debug("Token rejected: %s", exc)
            raise NotAuthorized()

        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            log.debug("Token rejected: missing subject")
            raise NotAuthorized()
        return user_id

    def resolve_token(self, db: Session, token: str | None) -> UserModel:
        if not token:
            raise NotAuthorized()

        user_id = self.decode_subject(token)
        user = self.credentials.get_user(db, user_id)
        if user is None:
            log.debug("Token rejected: unknown user %s", user_id)
            raise NotAuthorized()
        return user
