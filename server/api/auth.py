# server/api/auth.py

from pydantic import BaseModel, ConfigDict, Field
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordRequestForm, OAuth2PasswordBearer
from sqlalchemy.orm import Session

from core.context import AppContext
from core.logger import get_logger
from database import get_db
from models.user import User as UserModel


log = get_logger("api.auth")

router = APIRouter()
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="token", auto_error=False)


class Token(BaseModel):
    access_token: str
    token_type: str


class User(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str


class RegisterRequest(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1)


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
) -> UserModel:
    return context.tokens.resolve_token(db, token)


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
def register(
    req: RegisterRequest,
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
):
    try:
        return context.credentials.register(db, req.username, req.password)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/token", response_model=Token)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
):
    user_id = context.credentials.verify(db, form_data.username, form_data.password)
    access_token = context.tokens.create_access_token(user_id)
    log.info("Issued token for user %s", user_id)
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/users/me", response_model=User)
def read_users_me(current_user: UserModel = Depends(get_current_user)):
    return current_user


@router.get("/users", response_model=list[User])
def list_users(db: Session = Depends(get_db), context: AppContext = Depends(get_context)):
    return context.credentials.list_users(db)
