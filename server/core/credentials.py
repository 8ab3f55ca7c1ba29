# server/core/credentials.py

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.errors import DuplicateUsername, InvalidCredentials
from core.logger import get_logger
from database import storage_errors
from models.user import User as UserModel


log = get_logger("credentials")


def create_pwd_context(rounds: int) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


class CredentialStore:
    """
    Owns the username -> password hash mapping.

    Registration hashes the plaintext and relies on the unique constraint
    on users.username to reject duplicates, so concurrent signups are
    serialized by the database. Verification collapses "no such user" and
    "wrong password" into the same InvalidCredentials error.
    """

    def __init__(self, pwd_context: CryptContext):
        self.pwd_context = pwd_context

    def get_password_hash(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return self.pwd_context.verify(plain_password, hashed_password)

    def register(self, db: Session, username: str, password: str) -> UserModel:
        if not username or not username.strip():
            raise ValueError("username must not be empty")

        user = UserModel(username=username, hashed_password=self.get_password_hash(password))
        with storage_errors():
            try:
                db.add(user)
                db.commit()
            except IntegrityError:
                db.rollback()
                log.info("Registration rejected, username taken: %s", username)
                raise DuplicateUsername()
            db.refresh(user)

        log.info("Registered user %s (%s)", user.username, user.id)
        return user

    def verify(self, db: Session, username: str, password: str) -> str:
        with storage_errors():
            user = db.query(UserModel).filter(UserModel.username == username).first()

        if user is None:
            # Burn the same hashing time as a real comparison.
            self.pwd_context.dummy_verify()
            log.info("Login failed for %s", username)
            raise InvalidCredentials()

        try:
            matched = self.verify_password(password, user.hashed_password)
        except ValueError:
            # passlib rejects some inputs outright, e.g. NUL bytes for bcrypt.
            matched = False

        if not matched:
            log.info("Login failed for %s", username)
            raise InvalidCredentials()

        return user.id

    def get_user(self, db: Session, user_id: str) -> UserModel | None:
        with storage_errors():
            return db.query(UserModel).filter(UserModel.id == user_id).first()

    def list_users(self, db: Session) -> list[UserModel]:
        with storage_errors():
            return db.query(UserModel).order_by(UserModel.username).all()
