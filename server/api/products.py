# server/api/products.py

from pydantic import BaseModel, ConfigDict, Field
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from api.auth import get_current_user
from core import store
from database import get_db
from models.user import User as UserModel


router = APIRouter()


# -------------------------------
# Schemas
# -------------------------------

class ProductIn(BaseModel):
    name: str = Field(min_length=1, max_length=100)


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class FavoriteIn(BaseModel):
    product_id: str


class FavoriteOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    product_id: str
    user_id: str


# -------------------------------
# Product Endpoints
# -------------------------------

@router.get("/products", response_model=list[ProductOut])
def list_products(db: Session = Depends(get_db)):
    return store.list_products(db)


@router.post("/products", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(
    req: ProductIn,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    return store.create_product(db, req.name)


# -------------------------------
# Favorite Endpoints
# -------------------------------

@router.get("/favorites", response_model=list[FavoriteOut])
def list_favorites(db: Session = Depends(get_db), current_user: UserModel = Depends(get_current_user)):
    """
    Lists the favorites of the authenticated user only.
    """
    return store.list_favorites(db, current_user.id)


@router.post("/favorites", response_model=FavoriteOut, status_code=status.HTTP_201_CREATED)
def create_favorite(
    req: FavoriteIn,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    return store.create_favorite(db, current_user.id, req.product_id)


@router.delete("/favorites/{favorite_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_favorite(
    favorite_id: str,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    store.delete_favorite(db, favorite_id, current_user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
